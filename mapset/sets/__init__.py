from .flags import FlagSet
from .multiset import Multiset
from .plain import Set

"""
Set operations for maps.

Generalizes the map-of-bool pattern: a ContainsFunc predicate decides which
keys of a map are members, and a MergeFunc decides the value of a key found
on both sides of a binary operation. The algebra functions work on any dict;
Set, FlagSet and Multiset bind fixed predicate/merge pairs.
"""

from .algebra import (
    ContainsFunc,
    MergeFunc,
    check,
    clone,
    contains,
    diff,
    disjoint,
    equal,
    intersect,
    into,
    keys,
    proper_subset,
    purge,
    size,
    subset,
    sym_diff,
    union,
    values,
)
from .errors import MapsetError, MultisetOverflowError
from .logs import configure_logging
from .models import UINT64_MAX
from .sets import FlagSet, Multiset, Set

__version__ = "0.1.0"

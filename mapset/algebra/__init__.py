from .contains import ContainsFunc, check, contains
from .merge import MergeFunc, into
from .ops import (
    clone,
    diff,
    disjoint,
    equal,
    intersect,
    keys,
    proper_subset,
    purge,
    size,
    subset,
    sym_diff,
    union,
    values,
)

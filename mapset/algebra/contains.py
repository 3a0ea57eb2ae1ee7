"""
Membership predicate.

A ContainsFunc decides whether a key/value pair counts as present in a map
that is being treated as a set. It generalizes the map-of-bool pattern where
a key is only in the set if m[k] is true.

None is a valid ContainsFunc: every value is present.
"""

from typing import Any, Callable, Hashable, Mapping, Optional

ContainsFunc = Optional[Callable[[Any], bool]]


def check(contains: ContainsFunc, value: Any) -> bool:
    """Call contains with value, or return True if contains is None."""
    if contains is None:
        return True
    return contains(value)


def contains(m: Mapping, key: Hashable, contains: ContainsFunc = None) -> bool:
    """Report whether key is in the set m.

    False if key is not in the map, otherwise the result of check on its
    value. Every operation in mapset that accepts a ContainsFunc applies the
    same logic.
    """
    # `in` first so a defaultdict is never grown by the lookup
    if key not in m:
        return False
    return check(contains, m[key])

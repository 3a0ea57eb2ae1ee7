"""
Value merge.

A MergeFunc combines the two values of a key that exists in both maps of a
binary operation. When used together with a ContainsFunc, both values have
passed the check before the merge is called and the merged value is checked
again.

None is a valid MergeFunc: the left-hand value wins.
"""

from typing import Any, Callable, Optional

MergeFunc = Optional[Callable[[Any, Any], Any]]


def into(merge: MergeFunc, lhs: Any, rhs: Any) -> Any:
    """Return merge(lhs, rhs), or lhs if merge is None."""
    if merge is None:
        return lhs
    return merge(lhs, rhs)

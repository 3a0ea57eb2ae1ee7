"""
Set operations over maps.

These treat a map as the set of its keys, with the values taken along for
the ride. A ContainsFunc decides which keys qualify; a MergeFunc decides the
value of a key found on both sides of a binary operation.

Every operation that returns a map builds a new map of the same class as its
left operand. No operation mutates its inputs except purge.
"""

import structlog

from .contains import check, contains as is_member
from .merge import into

log = structlog.get_logger()


def union(lhs, rhs, contains=None, merge=None):
    """Return the union of lhs and rhs.

    An item of either map is included only if its value passes the contains
    check. When a key exists in both maps the pair of values is merged and the
    key is kept only if the merged value passes the check as well.
    """
    out = type(lhs)()
    for k, v in lhs.items():
        if check(contains, v):
            out[k] = v
    for k, v in rhs.items():
        if not check(contains, v):
            continue
        if k not in out:
            out[k] = v
            continue
        merged = into(merge, out[k], v)
        # two valid entries can merge into an invalid one
        if check(contains, merged):
            out[k] = merged
        else:
            del out[k]
    return out


def intersect(lhs, rhs, contains=None, merge=None):
    """Return the intersection of lhs and rhs.

    Both values must pass contains, and so must their merge.
    """
    out = type(lhs)()
    for k, v in lhs.items():
        if k not in rhs:
            continue
        other = rhs[k]
        if check(contains, v) and check(contains, other):
            merged = into(merge, v, other)
            if check(contains, merged):
                out[k] = merged
    return out


def diff(lhs, rhs, contains=None):
    """Return the items of lhs whose keys are not in rhs.

    Also known as relative complement.
    """
    out = type(lhs)()
    for k, v in lhs.items():
        if check(contains, v) and not is_member(rhs, k, contains):
            out[k] = v
    return out


def sym_diff(lhs, rhs, contains=None):
    """Return the items of lhs and rhs whose keys are in exactly one of them."""
    out = diff(lhs, rhs, contains)
    for k, v in rhs.items():
        if check(contains, v) and not is_member(lhs, k, contains):
            out[k] = v
    return out


def disjoint(lhs, rhs, contains=None):
    """True if no key of lhs is in rhs."""
    for k, v in lhs.items():
        if check(contains, v) and is_member(rhs, k, contains):
            return False
    return True


def _subset(lhs, rhs, contains):
    """Return (qualifying keys in lhs, whether they are all in rhs)."""
    n = 0
    for k, v in lhs.items():
        if not check(contains, v):
            continue
        if not is_member(rhs, k, contains):
            return 0, False
        n += 1
    return n, True


def subset(lhs, rhs, contains=None):
    """True if every key of lhs is in rhs. Values are otherwise not compared."""
    _, ok = _subset(lhs, rhs, contains)
    return ok


def proper_subset(lhs, rhs, contains=None):
    """True if lhs is a subset of rhs and not equal to it."""
    n, ok = _subset(lhs, rhs, contains)
    if not ok:
        return False
    # same size means equal
    if n == size(rhs, contains):
        return False
    _, ok = _subset(rhs, lhs, contains)
    return not ok


def equal(lhs, rhs, contains=None):
    """True if lhs and rhs have the same keys. Values are otherwise not compared."""
    m, ok = _subset(lhs, rhs, contains)
    if not ok:
        return False
    n, ok = _subset(rhs, lhs, contains)
    return ok and m == n


def size(m, contains=None):
    """Count the keys of m whose values pass contains."""
    return sum(1 for v in m.values() if check(contains, v))


def clone(m, contains=None):
    """Copy m without the items that fail contains."""
    out = type(m)()
    for k, v in m.items():
        if check(contains, v):
            out[k] = v
    return out


def keys(m, contains=None):
    return [k for k, v in m.items() if check(contains, v)]


def values(m, contains=None):
    return [v for v in m.values() if check(contains, v)]


def purge(m, contains=None):
    """Delete, in place, every key of m whose value fails contains.

    With no contains everything passes, so m is left untouched.
    """
    if contains is None:
        return
    dead = [k for k, v in m.items() if not check(contains, v)]
    for k in dead:
        del m[k]
    if dead:
        log.debug("mapset_purged", removed=len(dead), remaining=len(m))

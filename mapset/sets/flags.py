"""
Flag set: a dict from key to bool.

A key is a member only while its flag is True. Keys found on both sides of a
union or intersection are OR-ed, so a union of flag sets behaves like a
per-key logical OR instead of the plain set's first-wins.
"""

from ..algebra import ops


def is_set(flag):
    return flag


def either(lhs, rhs):
    return lhs or rhs


class FlagSet(dict):
    """
    Set of keys backed by a dict of booleans.

    Entries stored as False are tolerated by raw dict access and ignored by
    every set operation; purge() drops them.
    """

    @classmethod
    def of(cls, *keys):
        s = cls()
        s.extend(*keys)
        return s

    def extend(self, *keys):
        for k in keys:
            self[k] = True

    def add(self, key):
        """Set key and report whether it was absent or False before."""
        seen = self.get(key, False)
        self[key] = True
        return not seen

    def delete(self, key):
        """Remove key and report whether its flag was set."""
        return self.pop(key, False)

    def remove(self, *keys):
        for k in keys:
            self.pop(k, None)

    def contains(self, key):
        return self.get(key, False)

    def union(self, other):
        return ops.union(self, other, is_set, either)

    def intersect(self, other):
        return ops.intersect(self, other, is_set, either)

    def diff(self, other):
        return ops.diff(self, other, is_set)

    def sym_diff(self, other):
        return ops.sym_diff(self, other, is_set)

    def equal(self, other):
        return ops.equal(self, other, is_set)

    def subset(self, other):
        return ops.subset(self, other, is_set)

    def proper_subset(self, other):
        return ops.proper_subset(self, other, is_set)

    def disjoint(self, other):
        return ops.disjoint(self, other, is_set)

    def size(self):
        return ops.size(self, is_set)

    def clone(self):
        return ops.clone(self, is_set)

    def members(self):
        return ops.keys(self, is_set)

    def purge(self):
        ops.purge(self, is_set)

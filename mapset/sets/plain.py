"""
Plain set: a dict from key to the None marker.

Values carry no information, so the algebra runs with no ContainsFunc and no
MergeFunc. Any dict.fromkeys(...) result can be turned into a Set.
"""

from ..algebra import ops


class Set(dict):
    """
    Set of keys backed by a dict.

      s = Set.of("a", "b")
      s.add("c")             → True, "c" is new
      s.union(Set.of("d"))   → Set of a, b, c, d
    """

    @classmethod
    def of(cls, *keys):
        s = cls()
        s.extend(*keys)
        return s

    def extend(self, *keys):
        for k in keys:
            self[k] = None

    def add(self, key):
        """Add key and report whether it is new."""
        seen = self.contains(key)
        self[key] = None
        return not seen

    def delete(self, key):
        """Remove key and report whether it was present."""
        seen = self.contains(key)
        self.pop(key, None)
        return seen

    def remove(self, *keys):
        for k in keys:
            self.pop(k, None)

    def contains(self, key):
        return key in self

    def union(self, other):
        return ops.union(self, other)

    def intersect(self, other):
        return ops.intersect(self, other)

    def diff(self, other):
        return ops.diff(self, other)

    def sym_diff(self, other):
        return ops.sym_diff(self, other)

    def equal(self, other):
        return ops.equal(self, other)

    def subset(self, other):
        return ops.subset(self, other)

    def proper_subset(self, other):
        return ops.proper_subset(self, other)

    def disjoint(self, other):
        return ops.disjoint(self, other)

    def size(self):
        return ops.size(self)

    def clone(self):
        return ops.clone(self)

    def members(self):
        return ops.keys(self)

    def purge(self):
        # everything is a member, nothing to remove
        ops.purge(self)

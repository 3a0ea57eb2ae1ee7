"""
Multiset built on the mapset primitives.

Each key maps to its multiplicity, an unsigned 64-bit count. A multiplicity
of 0 is the same as not being in the set: raw dict access may store an
explicit 0, every operation here treats it as absent, and purge() removes it.

Sums that leave the 64-bit range raise MultisetOverflowError. Subtraction
saturates at 0 and never raises.
"""

import structlog

from ..algebra import ops
from ..errors import MultisetOverflowError
from ..models import UINT64_MAX, validate_amount, validate_delta

log = structlog.get_logger()


def present(n):
    return n > 0


def checked_sum(a, b):
    v = a + b
    if v > UINT64_MAX:
        log.warning("multiplicity_overflow", lhs=a, rhs=b)
        raise MultisetOverflowError(a, b)
    return v


def saturating_sub(a, b):
    if a < b:
        return 0
    return a - b


class Multiset(dict):
    """
    Set where keys can be stored more than once.

      bag = Multiset.of("a", "a", "b")   → {"a": 2, "b": 1}
      bag.inc("b", 3)                    → 4
      bag.dec("a", 5)                    → 0, "a" is gone
    """

    @classmethod
    def of(cls, *keys):
        m = cls()
        for k in keys:
            m.inc(k)
        return m

    def union(self, other):
        """r[k] = max(m[k], o[k])"""
        return ops.union(self, other, present, max)

    def intersect(self, other):
        """r[k] = min(m[k], o[k]) for keys in both.

        Keys found on one side only are carried over unchanged, as in sub.
        """
        return ops.union(self, other, present, min)

    def add(self, other):
        """r[k] = m[k] + o[k]; raises MultisetOverflowError if any sum overflows."""
        return ops.union(self, other, present, checked_sum)

    def sub(self, other):
        """r[k] = max(m[k] - o[k], 0) for keys in both.

        Keys found on one side only are carried over unchanged.
        """
        return ops.union(self, other, present, saturating_sub)

    def inc(self, key, amount=1):
        """Add amount to the multiplicity of key and return the new value."""
        amount = validate_amount(amount)
        current = self.get(key, 0)
        if amount == 0:
            return current
        v = checked_sum(current, amount)
        self[key] = v
        return v

    def dec(self, key, amount=1):
        """Subtract amount from the multiplicity of key, stopping at 0.

        A key that reaches 0 is deleted.
        """
        amount = validate_amount(amount)
        if key not in self:
            return 0
        current = self[key]
        if amount == 0:
            return current
        v = saturating_sub(current, amount)
        if v == 0:
            del self[key]
            log.debug("multiplicity_cleared", key=key, amount=amount)
            return 0
        self[key] = v
        return v

    def inc_dec(self, key, delta):
        """inc for a positive delta, dec by abs(delta) for a negative one."""
        delta = validate_delta(delta)
        if delta > 0:
            return self.inc(key, delta)
        if delta < 0:
            return self.dec(key, -delta)
        return self.get(key, 0)

    def contains(self, key):
        return self.get(key, 0) > 0

    def _rel(self, other, rel):
        for k, n in self.items():
            if not rel(n, other.get(k, 0)):
                return False
        for k, n in other.items():
            if not rel(self.get(k, 0), n):
                return False
        return True

    def included(self, other):
        """True if m[k] <= o[k] for every k."""
        return self._rel(other, lambda x, y: x <= y)

    def properly_included(self, other):
        """True if m[k] < o[k] for every k."""
        return self._rel(other, lambda x, y: x < y)

    def equal(self, other):
        """True if m[k] == o[k] for every k."""
        return self._rel(other, lambda x, y: x == y)

    def cardinality(self):
        """Sum of all multiplicities; raises MultisetOverflowError past 2**64 - 1."""
        n = 0
        for v in self.values():
            n = checked_sum(n, v)
        return n

    def size(self):
        return ops.size(self, present)

    def support(self):
        return ops.keys(self, present)

    def clone(self):
        return ops.clone(self, present)

    def purge(self):
        ops.purge(self, present)

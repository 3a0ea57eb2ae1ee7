class MapsetError(Exception):
    """Base class for errors raised by mapset."""


class MultisetOverflowError(MapsetError, OverflowError):
    """
    A multiplicity sum left the unsigned 64-bit range.

    Raised by Multiset.add, Multiset.inc and Multiset.cardinality. Wrapping
    around would silently corrupt multiplicities, so the operation is aborted
    instead; nothing is written before the check fails.
    """

    def __init__(self, lhs, rhs):
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(f"multiplicity overflow: {lhs} + {rhs}")

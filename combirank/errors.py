class RankError(Exception):
    """Base class for every error raised by combirank."""


class InvalidSpec(RankError, ValueError):
    """Malformed spec parameters, or an example array that does not fit its family."""


class IndexOutOfRange(RankError, IndexError):
    """Index passed to unrank falls outside [0, cardinality)."""

    def __init__(self, index, cardinality):
        self.index = index
        self.cardinality = cardinality
        super().__init__(f"index {index} outside [0, {cardinality})")


class ArithmeticInvariantViolation(RankError, ArithmeticError):
    """A division that must be exact by a multinomial identity left a remainder.

    This is an implementation bug, never a user error.
    """


class BijectionViolation(RankError, AssertionError):
    """rank(unrank(r)) != r for some r during a validation pass."""

    def __init__(self, spec, expected, got, obj):
        self.spec = spec
        self.expected = expected
        self.got = got
        self.obj = obj
        super().__init__(f"{spec}: object {obj} unranked from {expected} ranks back to {got}")

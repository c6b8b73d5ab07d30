"""Error kinds raised by the polynomial and prover modules."""


class SumCheckError(ValueError):
    """Base class for contract violations in the prover core."""


class VariableCountMismatchError(SumCheckError):
    """An exponent vector or evaluation point disagrees with the variable count."""

    def __init__(self, expected: int, actual: int, what: str = "point"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{what} has {actual} entries, polynomial has {expected} variables"
        )


class InvalidExponentError(SumCheckError):
    """An exponent is negative or not an integer."""


class RoundIndexError(SumCheckError, IndexError):
    """A round index lies outside [0, num_vars)."""

    def __init__(self, round_index: int, num_vars: int):
        self.round_index = round_index
        self.num_vars = num_vars
        super().__init__(
            f"round {round_index} out of range for a polynomial in {num_vars} variables"
        )


class RoundsExhaustedError(RoundIndexError):
    """The prover was driven past its final round."""

"""
Prime Field Arithmetic for the SumCheck Prover.

The polynomial and prover modules never do modular arithmetic themselves;
they only compose the operations defined here:

    - zero():       the additive identity every accumulation starts from
    - a + b:        (a + b) mod p
    - a * b:        (a * b) mod p
    - a ** e:       square-and-multiply exponentiation, e a non-negative int
    - a == b:       value equality (used heavily by the tests)

Subtraction, negation and inversion are provided as well so that callers
(verifiers, demos, tests) can work with the same element type.

Example:
    >>> field = PrimeField(97)
    >>> a = field.element(45)
    >>> b = field.element(67)
    >>> a + b
    FieldElement(15, mod 97)

Field choices:
    - 97: small enough to check round polynomials by hand
    - 2^64 - 2^32 + 1: Goldilocks prime
    - BLS12-381 scalar field: ~2^255, the field arkworks-based provers use
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Union
import random


def _check_integer(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValueError(f"field values must be integers, got {value!r}")
    return int(value)


@dataclass
class FieldElement:
    """
    An element of a prime field Z_p.

    All operations reduce their result modulo p. Plain ints are accepted on
    either side of an operator and are interpreted in the same field.

    Attributes:
        value: The integer value (always in range [0, p-1])
        field: Reference to the parent PrimeField
    """
    value: int
    field: 'PrimeField'

    def __post_init__(self):
        self.value = self.value % self.field.prime

    def __repr__(self) -> str:
        return f"FieldElement({self.value}, mod {self.field.prime})"

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.value == other.value and self.field.prime == other.field.prime
        if isinstance(other, int):
            return self.value == (other % self.field.prime)
        return False

    def __hash__(self) -> int:
        return hash((self.value, self.field.prime))

    def _coerce(self, other: Union[FieldElement, int]) -> int:
        if isinstance(other, FieldElement):
            if other.field.prime != self.field.prime:
                raise ValueError(
                    f"Cannot combine elements of Z_{self.field.prime} and Z_{other.field.prime}"
                )
            return other.value
        return _check_integer(other)

    def __add__(self, other: Union[FieldElement, int]) -> FieldElement:
        return FieldElement(self.value + self._coerce(other), self.field)

    def __radd__(self, other: int) -> FieldElement:
        return self.__add__(other)

    def __sub__(self, other: Union[FieldElement, int]) -> FieldElement:
        return FieldElement(self.value - self._coerce(other), self.field)

    def __rsub__(self, other: int) -> FieldElement:
        return FieldElement(_check_integer(other) - self.value, self.field)

    def __mul__(self, other: Union[FieldElement, int]) -> FieldElement:
        return FieldElement(self.value * self._coerce(other), self.field)

    def __rmul__(self, other: int) -> FieldElement:
        return self.__mul__(other)

    def __truediv__(self, other: Union[FieldElement, int]) -> FieldElement:
        """Division in the field: a * b^(-1) mod p"""
        if isinstance(other, FieldElement):
            return self * other.inverse()
        return self * self.field.element(other).inverse()

    def __neg__(self) -> FieldElement:
        return FieldElement(-self.value, self.field)

    def __pow__(self, exp: int) -> FieldElement:
        """
        Exponentiation using square-and-multiply.

        Round extraction raises challenges to every exponent that appears in
        the polynomial, so this is the hot path of the prover. An exponent of
        zero yields one, including for 0 ** 0.
        """
        if exp < 0:
            return self.inverse() ** (-exp)

        result = self.field.one()
        base = FieldElement(self.value, self.field)

        while exp > 0:
            if exp & 1:
                result = result * base
            base = base * base
            exp >>= 1

        return result

    def inverse(self) -> FieldElement:
        """
        Compute the modular inverse with the extended Euclidean algorithm.

        Raises:
            ValueError: If self.value is 0 (no inverse exists)
        """
        if self.value == 0:
            raise ValueError("Cannot invert zero")

        old_r, r = self.value, self.field.prime
        old_s, s = 1, 0

        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_s, s = s, old_s - quotient * s

        if old_r != 1:
            raise ValueError(f"No inverse exists (gcd = {old_r})")

        return FieldElement(old_s, self.field)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1


class PrimeField:
    """
    A prime field Z_p.

    Factory for field elements; polynomials hold a reference to their field
    so they can produce zero() for empty sums and lift int coefficients.

    Attributes:
        prime: The prime modulus p

    Example:
        >>> field = PrimeField(PrimeField.SMALL_TEST_PRIME)
        >>> field.element(100)
        FieldElement(3, mod 97)
    """

    SMALL_TEST_PRIME = 97
    GOLDILOCKS_PRIME = (1 << 64) - (1 << 32) + 1
    BLS12_381_SCALAR_PRIME = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

    def __init__(self, prime: int):
        """
        Args:
            prime: The prime modulus. Primality is not checked.
        """
        if prime < 2:
            raise ValueError("Prime must be at least 2")
        self.prime = prime

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimeField) and other.prime == self.prime

    def __hash__(self) -> int:
        return hash(self.prime)

    def element(self, value: Union[FieldElement, int]) -> FieldElement:
        """
        Lift an int (or an element of this field) into the field.

        Raises:
            ValueError: For floats, bools and other non-integer values
        """
        if isinstance(value, FieldElement):
            if value.field.prime != self.prime:
                raise ValueError(
                    f"Element of Z_{value.field.prime} does not belong to Z_{self.prime}"
                )
            return FieldElement(value.value, self)
        return FieldElement(_check_integer(value), self)

    def zero(self) -> FieldElement:
        """Return the additive identity (0)."""
        return FieldElement(0, self)

    def one(self) -> FieldElement:
        """Return the multiplicative identity (1)."""
        return FieldElement(1, self)

    def random(self, exclude_zero: bool = False,
               rng: Optional[random.Random] = None) -> FieldElement:
        """
        Sample a uniformly random element.

        Args:
            exclude_zero: If True, never returns zero
            rng: Source of randomness; defaults to the module-level generator
        """
        rng = rng or random
        low = 1 if exclude_zero else 0
        return FieldElement(rng.randint(low, self.prime - 1), self)

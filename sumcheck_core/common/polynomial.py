"""
Sparse Polynomial Representations for the SumCheck Prover.

Two representations are used by the prover:

    - MultiVariatePolynomial: the polynomial the prover commits to, stored as
      exponent vector -> coefficient. f(x, y) = 3*x^2*y + 5*y^2 + 7 becomes
          {(2, 1): 3, (0, 2): 5, (0, 0): 7}
    - UnivariatePolynomial: the round polynomial sent to the verifier,
      stored as exponent -> coefficient. 9*x^2 + 52 becomes {2: 9, 0: 52}

Round Extraction:
    get_univariate_at_round(i, previous_values) turns the multivariate
    polynomial into a polynomial in variable i by substituting the values
    supplied for the other positions:

        f(x, y) = 3*x^2*y + 5*y^2 + 7,  y = 3
        round 0 -> (3*3)*x^2 + (5*9 + 7) = 9*x^2 + 52

    Only positions that have an entry in previous_values are substituted.
    A position past the end of previous_values contributes a factor of one
    whatever its exponent; the variable is NOT summed over {0,1} as in the
    textbook sum-check round polynomial. For a prover in round k this means
    variables k+1..n-1 are dropped from every term, so the round polynomial
    agrees with the textbook one only when those variables do not occur.

Both classes are read-only once built. Zero coefficients are kept as given.
"""

from __future__ import annotations
from numbers import Integral
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
import logging

import numpy as np

from .errors import (
    InvalidExponentError,
    RoundIndexError,
    VariableCountMismatchError,
)
from .field import FieldElement, PrimeField

_logger = logging.getLogger(__name__)

Coefficient = Union[FieldElement, int]
ExponentVector = Tuple[int, ...]


def _check_exponent(exponent: object) -> int:
    if isinstance(exponent, bool) or not isinstance(exponent, Integral):
        raise InvalidExponentError(f"exponent must be an integer, got {exponent!r}")
    if exponent < 0:
        raise InvalidExponentError(f"exponent must be non-negative, got {exponent}")
    return int(exponent)


class MultiVariatePolynomial:
    """
    A sparse polynomial in n variables over a prime field.

    Attributes:
        field: The prime field coefficients live in
        num_vars: Number of variables n (length of every exponent vector)
        coeffs: Read-only mapping exponent vector -> FieldElement

    Example:
        >>> field = PrimeField(97)
        >>> f = MultiVariatePolynomial({(2, 1): 3, (0, 2): 5, (0, 0): 7}, field)
        >>> f.evaluate([2, 3])
        FieldElement(88, mod 97)
    """

    def __init__(self, coeffs: Mapping[Sequence[int], Coefficient],
                 field: PrimeField, num_vars: Optional[int] = None):
        """
        Args:
            coeffs: Mapping exponent vector -> coefficient (int or FieldElement)
            field: The prime field for arithmetic
            num_vars: Variable count. Inferred from the keys when omitted;
                      an empty mapping then has zero variables.

        Raises:
            VariableCountMismatchError: If an exponent vector has the wrong length
            InvalidExponentError: If an exponent is negative or not an integer
        """
        self.field = field

        if num_vars is None:
            num_vars = len(next(iter(coeffs), ()))
        if num_vars < 0:
            raise ValueError("num_vars must be non-negative")
        self.num_vars = num_vars

        normalized: Dict[ExponentVector, FieldElement] = {}
        for raw_key, coeff in coeffs.items():
            key = tuple(raw_key)
            if len(key) != num_vars:
                raise VariableCountMismatchError(num_vars, len(key), what="exponent vector")
            exps = tuple(_check_exponent(e) for e in key)
            normalized[exps] = field.element(coeff)

        self._coeffs = normalized
        self.coeffs: Mapping[ExponentVector, FieldElement] = MappingProxyType(normalized)

        # One row per term, one column per variable.
        self._exponents = np.array(list(normalized), dtype=object).reshape(
            len(normalized), num_vars
        )

    def __repr__(self) -> str:
        if not self._coeffs:
            return f"MultiVariatePolynomial(0, vars={self.num_vars})"
        terms = []
        for exps, coeff in self._coeffs.items():
            factors = [str(coeff)]
            for var, e in enumerate(exps):
                if e == 1:
                    factors.append(f"x{var}")
                elif e > 1:
                    factors.append(f"x{var}^{e}")
            terms.append("*".join(factors))
        return f"MultiVariatePolynomial({' + '.join(terms)})"

    @property
    def num_terms(self) -> int:
        """Number of stored terms, zero coefficients included."""
        return len(self._coeffs)

    def degrees(self) -> List[int]:
        """Maximum exponent of each variable across all terms."""
        if not self._coeffs:
            return [0] * self.num_vars
        return [int(d) for d in self._exponents.max(axis=0)]

    @property
    def total_degree(self) -> int:
        """Largest sum of exponents over the stored terms."""
        if not self._coeffs or self.num_vars == 0:
            return 0
        return int(self._exponents.sum(axis=1).max())

    def copy(self) -> 'MultiVariatePolynomial':
        return MultiVariatePolynomial(dict(self._coeffs), self.field, self.num_vars)

    def evaluate(self, point: Sequence[Coefficient]) -> FieldElement:
        """
        Evaluate at a full assignment of the n variables.

        Computes sum over terms of coeff * prod_j point[j]^e[j].

        Args:
            point: n values (ints or FieldElements), indexed by variable

        Raises:
            VariableCountMismatchError: If len(point) != num_vars
        """
        if len(point) != self.num_vars:
            raise VariableCountMismatchError(self.num_vars, len(point))
        values = [self.field.element(v) for v in point]

        result = self.field.zero()
        for exps, coeff in self._coeffs.items():
            term = coeff
            for value, e in zip(values, exps):
                term = term * value ** e
            result = result + term
        return result

    def get_univariate_at_round(self, i: int,
                                previous_values: Sequence[Coefficient]
                                ) -> 'UnivariatePolynomial':
        """
        Project onto variable i, substituting the supplied values elsewhere.

        For every term, the coefficient is multiplied by
        previous_values[j] ** e[j] for each j < len(previous_values) with
        j != i, then accumulated under key e[i]. Terms landing on the same
        exponent of variable i are summed. Positions without an entry in
        previous_values are not substituted (see the module docstring).

        Args:
            i: Index of the free variable, 0 <= i < num_vars
            previous_values: Values for positions 0, 1, ...; the entry at
                             position i, if present, is ignored

        Returns:
            UnivariatePolynomial in variable i

        Raises:
            RoundIndexError: If i is outside [0, num_vars)
            VariableCountMismatchError: If more than num_vars values are given
        """
        if not 0 <= i < self.num_vars:
            raise RoundIndexError(i, self.num_vars)
        if len(previous_values) > self.num_vars:
            raise VariableCountMismatchError(
                self.num_vars, len(previous_values), what="previous_values"
            )
        values = [self.field.element(v) for v in previous_values]

        if len(values) < self.num_vars:
            unfixed = [j for j in range(len(values), self.num_vars) if j != i]
            if unfixed:
                _logger.debug("round %d: positions %s left unsubstituted", i, unfixed)

        zero = self.field.zero()
        uni_coeffs: Dict[int, FieldElement] = {}
        for exps, coeff in self._coeffs.items():
            partial = coeff
            for j, value in enumerate(values):
                if j != i:
                    partial = partial * value ** exps[j]
            degree = exps[i]
            uni_coeffs[degree] = uni_coeffs.get(degree, zero) + partial

        return UnivariatePolynomial(uni_coeffs, self.field)


class UnivariatePolynomial:
    """
    A sparse polynomial in one variable over a prime field.

    Attributes:
        field: The prime field coefficients live in
        coeffs: Read-only mapping exponent -> FieldElement

    Example:
        >>> field = PrimeField(97)
        >>> s = UnivariatePolynomial({2: 9, 0: 52}, field)
        >>> s.evaluate(2)
        FieldElement(88, mod 97)
    """

    def __init__(self, coeffs: Mapping[int, Coefficient], field: PrimeField):
        self.field = field
        normalized = {
            _check_exponent(e): field.element(c) for e, c in coeffs.items()
        }
        self._coeffs = normalized
        self.coeffs: Mapping[int, FieldElement] = MappingProxyType(normalized)

    def __repr__(self) -> str:
        terms = [f"{c}*X^{e}" for e, c in sorted(self._coeffs.items(), reverse=True)]
        return f"UnivariatePolynomial({' + '.join(terms) or '0'})"

    def __eq__(self, other: object) -> bool:
        """Equal when the same field and the same non-zero coefficients."""
        if not isinstance(other, UnivariatePolynomial):
            return NotImplemented
        return self.field == other.field and self._nonzero() == other._nonzero()

    def __hash__(self) -> int:
        return hash((self.field.prime, frozenset(self._nonzero().items())))

    def _nonzero(self) -> Dict[int, FieldElement]:
        return {e: c for e, c in self._coeffs.items() if not c.is_zero()}

    @property
    def degree(self) -> int:
        """Largest exponent with a non-zero coefficient (0 for the zero polynomial)."""
        return max(self._nonzero(), default=0)

    def coefficient(self, exponent: int) -> FieldElement:
        return self._coeffs.get(exponent, self.field.zero())

    def evaluate(self, point: Coefficient) -> FieldElement:
        """Sum of coeff * point^e over the stored entries."""
        x = self.field.element(point)
        result = self.field.zero()
        for e, coeff in self._coeffs.items():
            result = result + coeff * x ** e
        return result

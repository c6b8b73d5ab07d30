"""
Common building blocks for the prover.

This module provides:
    - Finite field arithmetic (PrimeField, FieldElement)
    - Sparse polynomials (MultiVariatePolynomial, UnivariatePolynomial)
    - Error kinds for contract violations
"""

from .field import PrimeField, FieldElement
from .polynomial import MultiVariatePolynomial, UnivariatePolynomial
from .errors import (
    SumCheckError,
    VariableCountMismatchError,
    InvalidExponentError,
    RoundIndexError,
    RoundsExhaustedError,
)

__all__ = [
    "PrimeField",
    "FieldElement",
    "MultiVariatePolynomial",
    "UnivariatePolynomial",
    "SumCheckError",
    "VariableCountMismatchError",
    "InvalidExponentError",
    "RoundIndexError",
    "RoundsExhaustedError",
]

"""
sumcheck-core
=============

Prover-side polynomial machinery for the SumCheck interactive proof over a
prime field.

Modules:
    - common: field arithmetic, sparse polynomials, error kinds
    - prover: the round-by-round prover, its configuration and a demo run

Quick Start:
    >>> from sumcheck_core import PrimeField, MultiVariatePolynomial, Prover
    >>> field = PrimeField(97)
    >>> f = MultiVariatePolynomial({(2, 1): 3, (0, 2): 5, (0, 0): 7}, field)
    >>> prover = Prover(f)
    >>> s0 = prover.get_next_polynomial()
"""

__version__ = "0.1.0"

from .common import (
    PrimeField,
    FieldElement,
    MultiVariatePolynomial,
    UnivariatePolynomial,
    SumCheckError,
    VariableCountMismatchError,
    InvalidExponentError,
    RoundIndexError,
    RoundsExhaustedError,
)
from .prover import Prover, ProverConfig, RoundRecord, run_rounds

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
    "Prover",
    "ProverConfig",
    "RoundRecord",
    "run_rounds",
]

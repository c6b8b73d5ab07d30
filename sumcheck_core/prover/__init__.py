"""
SumCheck Prover

Key Components:
    - Prover: round-by-round state machine over a MultiVariatePolynomial
    - RoundRecord: polynomial and challenge of one completed round
    - ProverConfig: field preset, transcript recording, seeding, log level
    - run_rounds: drive a prover through a list of challenges

Usage:
    >>> from sumcheck_core.prover import Prover, run_rounds
    >>> prover = Prover(f)
    >>> round_polys = run_rounds(prover, [5, 11])
"""

from .config import (
    ProverConfig,
    create_test_config,
    create_goldilocks_config,
    create_bls12_381_config,
)
from .core import Prover, RoundRecord, run_rounds

__all__ = [
    "Prover",
    "RoundRecord",
    "run_rounds",
    "ProverConfig",
    "create_test_config",
    "create_goldilocks_config",
    "create_bls12_381_config",
]

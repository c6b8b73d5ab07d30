"""
Scripted Prover Run.

Plays the prover side of the protocol on the worked example

    f(x, y) = 3*x^2*y + 5*y^2 + 7

with random challenges standing in for the verifier, and renders one table
row per round.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Optional
import random

from tabulate import tabulate

from ..common.field import FieldElement, PrimeField
from ..common.polynomial import MultiVariatePolynomial
from .config import ProverConfig
from .core import Prover, RoundRecord


def example_polynomial(field: PrimeField) -> MultiVariatePolynomial:
    """3*x^2*y + 5*y^2 + 7 over the given field."""
    return MultiVariatePolynomial({(2, 1): 3, (0, 2): 5, (0, 0): 7}, field)


@dataclass
class DemoResult:
    """
    Outcome of a scripted run.

    Attributes:
        challenges: Challenge used for each round
        rounds: Per-round records from the prover transcript
        final_value: f evaluated at the challenge point
        last_round_value: Last round polynomial evaluated at the last challenge
    """
    challenges: List[FieldElement]
    rounds: List[RoundRecord]
    final_value: FieldElement
    last_round_value: FieldElement

    @property
    def consistent(self) -> bool:
        """Last round polynomial agrees with f at the challenge point."""
        return self.final_value == self.last_round_value


def run_demo(config: Optional[ProverConfig] = None,
             polynomial: Optional[MultiVariatePolynomial] = None) -> DemoResult:
    """
    Play every round with seeded random challenges.

    Args:
        config: Field preset and seed (defaults to ProverConfig())
        polynomial: Polynomial to prove; the worked example over the
                    configured field when omitted. Challenges are drawn
                    from the polynomial's own field.
    """
    config = config or ProverConfig()
    if polynomial is None:
        polynomial = example_polynomial(config.field())
    field = polynomial.field
    rng = random.Random(config.seed)

    prover = Prover(polynomial, replace(config, record_transcript=True))

    challenges = []
    last_poly = None
    while not prover.is_finished:
        last_poly = prover.get_next_polynomial()
        challenge = field.random(rng=rng)
        prover.receive_challenge(challenge)
        challenges.append(challenge)

    final_value = polynomial.evaluate(challenges)
    if last_poly is None:
        last_round_value = final_value
    else:
        last_round_value = last_poly.evaluate(challenges[-1])

    return DemoResult(
        challenges=challenges,
        rounds=list(prover.transcript),
        final_value=final_value,
        last_round_value=last_round_value,
    )


def format_rounds(result: DemoResult) -> str:
    """Render the per-round table."""
    rows = [
        [record.round_num, repr(record.polynomial), record.challenge.value,
         record.polynomial.evaluate(record.challenge).value]
        for record in result.rounds
    ]
    return tabulate(rows, headers=["Round", "Polynomial", "Challenge", "s(r)"])

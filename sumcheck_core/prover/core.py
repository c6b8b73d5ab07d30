"""
SumCheck Prover State Machine.

The prover owns a MultiVariatePolynomial in n variables and walks through
rounds 0..n-1:

    Round(0) --receive_challenge--> Round(1) --> ... --> Round(n)  (finished)

In each round k < n the caller:
    1. asks for the round polynomial (get_next_polynomial)
    2. sends it to the verifier and gets a challenge r_k back
    3. feeds r_k into the prover (receive_challenge)

The round-k polynomial is polynomial.get_univariate_at_round(k, [r_0..r_{k-1}]).
Challenge derivation, verification and transport are the caller's concern.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import logging

from ..common.errors import RoundsExhaustedError
from ..common.field import FieldElement
from ..common.polynomial import Coefficient, MultiVariatePolynomial, UnivariatePolynomial
from .config import ProverConfig

_logger = logging.getLogger(__name__)


@dataclass
class RoundRecord:
    """
    One completed round as seen by the prover.

    Attributes:
        round_num: Round index (0-based)
        polynomial: The univariate polynomial for this round
        challenge: The challenge received to close the round
    """
    round_num: int
    polynomial: UnivariatePolynomial
    challenge: FieldElement

    def __repr__(self) -> str:
        return f"RoundRecord(round={self.round_num}, challenge={self.challenge})"


class Prover:
    """
    Stateful prover over a single multivariate polynomial.

    len(values_so_far) == current_round always holds. Not thread-safe: one
    protocol instance per Prover.

    Example:
        >>> field = PrimeField(97)
        >>> f = MultiVariatePolynomial({(2, 1): 3, (0, 2): 5, (0, 0): 7}, field)
        >>> prover = Prover(f)
        >>> s0 = prover.get_next_polynomial()
        >>> prover.receive_challenge(2)
        >>> prover.current_round
        1
    """

    def __init__(self, polynomial: MultiVariatePolynomial,
                 config: Optional[ProverConfig] = None):
        self.polynomial = polynomial
        self.config = config or ProverConfig()
        self.current_round = 0
        self._values_so_far: List[FieldElement] = []
        self.transcript: List[RoundRecord] = []
        # Polynomial last handed out, keyed by the round it belongs to.
        self._sent: Optional[Tuple[int, UnivariatePolynomial]] = None

    def __repr__(self) -> str:
        return f"Prover(round={self.current_round}/{self.num_rounds})"

    @property
    def num_rounds(self) -> int:
        """Total rounds, one per variable."""
        return self.polynomial.num_vars

    @property
    def is_finished(self) -> bool:
        return self.current_round >= self.num_rounds

    @property
    def values_so_far(self) -> Tuple[FieldElement, ...]:
        """Challenges received so far, in round order."""
        return tuple(self._values_so_far)

    def _check_active(self) -> None:
        if self.is_finished:
            raise RoundsExhaustedError(self.current_round, self.num_rounds)

    def get_next_polynomial(self) -> UnivariatePolynomial:
        """
        Round polynomial for the current round.

        Does not change protocol state; calling it again before the next
        challenge returns the same polynomial without recomputing it.

        Raises:
            RoundsExhaustedError: If every round already has a challenge
        """
        self._check_active()
        if self._sent is not None and self._sent[0] == self.current_round:
            return self._sent[1]
        poly = self.polynomial.get_univariate_at_round(
            self.current_round, self._values_so_far
        )
        self._sent = (self.current_round, poly)
        _logger.debug("round %d polynomial: %r", self.current_round, poly)
        return poly

    def receive_challenge(self, value: Coefficient) -> None:
        """
        Fix the current round's variable to value and advance.

        Any element of the polynomial's field is accepted; ints are lifted.

        Raises:
            RoundsExhaustedError: If every round already has a challenge
        """
        self._check_active()
        challenge = self.polynomial.field.element(value)

        if self.config.record_transcript:
            poly = self.get_next_polynomial()
            self.transcript.append(RoundRecord(self.current_round, poly, challenge))

        self._values_so_far.append(challenge)
        self.current_round += 1
        _logger.debug("round %d challenge: %s", self.current_round - 1, challenge)

        if self.is_finished:
            _logger.info("prover finished after %d rounds", self.num_rounds)


def run_rounds(prover: Prover,
               challenges: Iterable[Coefficient]) -> List[UnivariatePolynomial]:
    """
    Drive the get_next_polynomial / receive_challenge alternation.

    Args:
        prover: The prover to advance
        challenges: One challenge per round to play

    Returns:
        The round polynomials, in order

    Raises:
        RoundsExhaustedError: If more challenges than remaining rounds are given
    """
    polys = []
    for challenge in challenges:
        polys.append(prover.get_next_polynomial())
        prover.receive_challenge(challenge)
    return polys

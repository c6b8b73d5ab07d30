"""
Prover Configuration.

Settings that sit around the prover rather than inside the protocol: which
field the demo runs over, whether round messages are kept for inspection,
how challenges are seeded and how loudly to log.

Presets:
    - test:       Z_97, small enough to check every round by hand
    - goldilocks: 2^64 - 2^32 + 1
    - bls12-381:  the BLS12-381 scalar field
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from ..common.field import PrimeField


@dataclass
class ProverConfig:
    """
    Configuration for a Prover and the demo driver around it.

    Attributes:
        name: Preset label for identification
        prime: Field modulus used when the driver builds a field
        record_transcript: Keep a RoundRecord per completed round
        seed: Seed for random challenges (None = nondeterministic)
        log_level: Logging level name applied by the command line entry point

    Example:
        >>> config = ProverConfig(name="demo", prime=101, seed=7)
        >>> config.field()
        PrimeField(101)
    """

    name: str = "default"
    prime: int = PrimeField.SMALL_TEST_PRIME
    record_transcript: bool = True
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration."""
        if self.prime < 2:
            raise ValueError("prime must be at least 2")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level: {self.log_level}")

    def field(self) -> PrimeField:
        return PrimeField(self.prime)

    @property
    def field_bits(self) -> int:
        """Bit length of the modulus."""
        return self.prime.bit_length()

    def summary(self) -> str:
        """Return configuration summary string."""
        return (
            f"ProverConfig '{self.name}':\n"
            f"  Field: Z_p, p = {self.prime} ({self.field_bits} bits)\n"
            f"  Transcript: {'recorded' if self.record_transcript else 'off'}\n"
            f"  Seed: {self.seed if self.seed is not None else 'random'}\n"
            f"  Log level: {self.log_level}"
        )


def create_test_config(seed: Optional[int] = 42) -> ProverConfig:
    return ProverConfig(name="test", prime=PrimeField.SMALL_TEST_PRIME, seed=seed)


def create_goldilocks_config(seed: Optional[int] = None) -> ProverConfig:
    return ProverConfig(name="goldilocks", prime=PrimeField.GOLDILOCKS_PRIME, seed=seed)


def create_bls12_381_config(seed: Optional[int] = None) -> ProverConfig:
    return ProverConfig(name="bls12-381", prime=PrimeField.BLS12_381_SCALAR_PRIME, seed=seed)


PRESETS = {
    "test": create_test_config,
    "goldilocks": create_goldilocks_config,
    "bls12-381": create_bls12_381_config,
}

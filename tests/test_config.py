"""Tests for prover configuration."""

import pytest

from sumcheck_core.common.field import PrimeField
from sumcheck_core.prover.config import (
    PRESETS,
    ProverConfig,
    create_bls12_381_config,
    create_goldilocks_config,
    create_test_config,
)


def test_defaults():
    config = ProverConfig()
    assert config.prime == PrimeField.SMALL_TEST_PRIME
    assert config.record_transcript
    assert config.log_level == "WARNING"


def test_presets():
    assert create_test_config().field() == PrimeField(97)
    assert create_goldilocks_config().prime == (1 << 64) - (1 << 32) + 1
    assert create_bls12_381_config().field_bits == 255
    assert set(PRESETS) == {"test", "goldilocks", "bls12-381"}


def test_log_level_normalized():
    assert ProverConfig(log_level="debug").log_level == "DEBUG"


@pytest.mark.parametrize("kwargs", [{"prime": 1}, {"log_level": "LOUD"}])
def test_invalid(kwargs):
    with pytest.raises(ValueError):
        ProverConfig(**kwargs)


def test_summary_mentions_field():
    text = create_test_config(seed=3).summary()
    assert "p = 97" in text
    assert "Seed: 3" in text

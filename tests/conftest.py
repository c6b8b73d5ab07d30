"""Shared fixtures for the sumcheck-core tests."""

import random

import pytest

from sumcheck_core.common.field import PrimeField
from sumcheck_core.common.polynomial import MultiVariatePolynomial


@pytest.fixture
def field():
    return PrimeField(PrimeField.SMALL_TEST_PRIME)


@pytest.fixture
def big_field():
    return PrimeField(PrimeField.BLS12_381_SCALAR_PRIME)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def example_coeffs():
    # 3*x^2*y + 5*y^2 + 7
    return {(2, 1): 3, (0, 2): 5, (0, 0): 7}


@pytest.fixture
def example_poly(example_coeffs, field):
    return MultiVariatePolynomial(example_coeffs, field)


@pytest.fixture
def three_var_poly(field):
    # 2*x0*x1*x2 + x0^3 + 4*x1^2*x2 + 6*x2 + 1
    return MultiVariatePolynomial(
        {(1, 1, 1): 2, (3, 0, 0): 1, (0, 2, 1): 4, (0, 0, 1): 6, (0, 0, 0): 1},
        field,
    )

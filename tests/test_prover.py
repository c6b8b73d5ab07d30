"""Tests for the round-by-round prover."""

import logging

import pytest

from sumcheck_core.common.errors import RoundsExhaustedError
from sumcheck_core.common.polynomial import MultiVariatePolynomial
from sumcheck_core.prover.config import ProverConfig
from sumcheck_core.prover.core import Prover, run_rounds


class TestProverState:
    def test_initial_state(self, example_poly):
        prover = Prover(example_poly)
        assert prover.current_round == 0
        assert prover.values_so_far == ()
        assert prover.num_rounds == 2
        assert not prover.is_finished

    def test_receive_challenge_advances(self, example_poly):
        prover = Prover(example_poly)
        prover.receive_challenge(5)
        assert prover.current_round == 1
        assert prover.values_so_far == (5,)
        assert len(prover.values_so_far) == prover.current_round

    def test_challenge_lifted_into_field(self, example_poly, field):
        prover = Prover(example_poly)
        prover.receive_challenge(100)
        assert prover.values_so_far[0] == field.element(3)

    def test_get_next_polynomial_is_idempotent(self, three_var_poly):
        prover = Prover(three_var_poly)
        prover.receive_challenge(4)
        first = prover.get_next_polynomial()
        second = prover.get_next_polynomial()
        assert first == second
        assert prover.current_round == 1

    def test_float_challenge_rejected(self, example_poly):
        prover = Prover(example_poly)
        with pytest.raises(ValueError):
            prover.receive_challenge(0.5)
        assert prover.current_round == 0
        assert prover.values_so_far == ()
        assert prover.transcript == []

    def test_round_polynomial_computed_once_per_round(self, example_poly, monkeypatch):
        calls = []
        extract = example_poly.get_univariate_at_round

        def counting(i, previous_values):
            calls.append(i)
            return extract(i, previous_values)

        monkeypatch.setattr(example_poly, "get_univariate_at_round", counting)
        prover = Prover(example_poly)
        sent = []
        for challenge in [2, 3]:
            sent.append(prover.get_next_polynomial())
            prover.get_next_polynomial()
            prover.receive_challenge(challenge)
        assert calls == [0, 1]
        assert prover.transcript[0].polynomial is sent[0]
        assert prover.transcript[1].polynomial is sent[1]

    def test_transcript_without_prior_request(self, example_poly):
        prover = Prover(example_poly)
        prover.receive_challenge(2)
        assert prover.transcript[0].polynomial == example_poly.get_univariate_at_round(0, [])

    def test_first_round_ignores_later_variables(self, example_poly):
        # no challenges yet: y contributes a factor of one
        s0 = Prover(example_poly).get_next_polynomial()
        assert dict(s0.coeffs) == {2: 3, 0: 12}


class TestRoundSequencing:
    @pytest.mark.parametrize("challenges", [[2, 3], [0, 1], [96, 50]])
    def test_matches_direct_extraction(self, example_poly, challenges):
        prover = Prover(example_poly)
        for k, challenge in enumerate(challenges):
            expected = example_poly.get_univariate_at_round(k, challenges[:k])
            assert prover.get_next_polynomial() == expected
            prover.receive_challenge(challenge)
        assert prover.is_finished

    def test_matches_direct_extraction_random(self, big_field, rng):
        poly = MultiVariatePolynomial(
            {(1, 2, 0, 3): 9, (0, 1, 1, 1): 4, (2, 0, 0, 0): 1, (0, 0, 0, 0): 5},
            big_field,
        )
        challenges = [big_field.random(rng=rng) for _ in range(4)]
        polys = run_rounds(Prover(poly), challenges)
        assert len(polys) == 4
        for k, uni in enumerate(polys):
            assert uni == poly.get_univariate_at_round(k, challenges[:k])

    def test_last_round_agrees_with_full_evaluation(self, three_var_poly):
        challenges = [3, 7, 11]
        polys = run_rounds(Prover(three_var_poly), challenges)
        assert polys[-1].evaluate(challenges[-1]) == three_var_poly.evaluate(challenges)


class TestRoundsExhausted:
    def test_get_next_polynomial_after_final_round(self, example_poly):
        prover = Prover(example_poly)
        run_rounds(prover, [1, 2])
        with pytest.raises(RoundsExhaustedError):
            prover.get_next_polynomial()

    def test_receive_challenge_after_final_round(self, example_poly):
        prover = Prover(example_poly)
        run_rounds(prover, [1, 2])
        with pytest.raises(RoundsExhaustedError):
            prover.receive_challenge(3)
        assert prover.current_round == 2
        assert len(prover.values_so_far) == 2

    def test_run_rounds_with_too_many_challenges(self, example_poly):
        with pytest.raises(RoundsExhaustedError):
            run_rounds(Prover(example_poly), [1, 2, 3])

    def test_zero_variable_polynomial_starts_finished(self, field):
        prover = Prover(MultiVariatePolynomial({(): 4}, field))
        assert prover.is_finished
        with pytest.raises(RoundsExhaustedError):
            prover.get_next_polynomial()


class TestTranscript:
    def test_records_each_round(self, example_poly):
        prover = Prover(example_poly)
        polys = run_rounds(prover, [2, 3])
        assert [r.round_num for r in prover.transcript] == [0, 1]
        assert [r.challenge for r in prover.transcript] == [2, 3]
        assert [r.polynomial for r in prover.transcript] == polys

    def test_transcript_disabled(self, example_poly):
        prover = Prover(example_poly, ProverConfig(record_transcript=False))
        run_rounds(prover, [2, 3])
        assert prover.transcript == []

    def test_logs_completion(self, example_poly, caplog):
        with caplog.at_level(logging.INFO, logger="sumcheck_core.prover.core"):
            run_rounds(Prover(example_poly), [2, 3])
        assert "finished after 2 rounds" in caplog.text

"""Tests for the epsilon-greedy, softmax and bag PMF generators."""

from __future__ import annotations

import array

import numpy as np
import pytest

from exploration.distributions.generators import (
    generate_bag,
    generate_bag_from_counts,
    generate_epsilon_greedy,
    generate_softmax,
)
from exploration.status import ExplorationStatus

_TOL = 1e-6


class TestEpsilonGreedy:
    """Tests for generate_epsilon_greedy()."""

    @pytest.mark.parametrize("epsilon", [0.0, 0.05, 0.3, 0.5, 1.0])
    @pytest.mark.parametrize("num_actions", [1, 2, 7, 100])
    def test_distribution_properties(self, epsilon: float, num_actions: int) -> None:
        """Sums to 1, floor epsilon/N everywhere, top gets the rest."""
        pmf = np.zeros(num_actions)
        top = num_actions // 2
        status = generate_epsilon_greedy(epsilon, top, pmf)
        assert status == ExplorationStatus.SUCCESS
        assert abs(pmf.sum() - 1.0) < _TOL
        assert np.all(pmf >= epsilon / num_actions - _TOL)
        assert pmf[top] == pytest.approx(epsilon / num_actions + (1.0 - epsilon))

    def test_exact_values(self) -> None:
        pmf = [0.0] * 4
        assert generate_epsilon_greedy(0.2, 1, pmf) == ExplorationStatus.SUCCESS
        assert pmf == pytest.approx([0.05, 0.85, 0.05, 0.05])

    def test_overwrites_existing_contents(self) -> None:
        pmf = [9.0, 9.0]
        generate_epsilon_greedy(0.0, 0, pmf)
        assert pmf == [1.0, 0.0]

    @pytest.mark.parametrize("epsilon", [-0.01, 1.01, float("nan"), float("inf")])
    def test_epsilon_out_of_range(self, epsilon: float) -> None:
        pmf = [0.0, 0.0]
        assert generate_epsilon_greedy(epsilon, 0, pmf) == ExplorationStatus.BAD_RANGE
        assert pmf == [0.0, 0.0]

    def test_empty_buffer(self) -> None:
        assert generate_epsilon_greedy(0.1, 0, []) == ExplorationStatus.BAD_RANGE

    def test_top_action_out_of_range_fails(self) -> None:
        pmf = [0.0] * 3
        assert generate_epsilon_greedy(0.1, 3, pmf) == ExplorationStatus.BAD_RANGE
        assert pmf == [0.0] * 3

    def test_negative_top_action_fails(self) -> None:
        assert generate_epsilon_greedy(0.1, -1, [0.0] * 3) == ExplorationStatus.BAD_RANGE

    def test_top_action_clamped_when_requested(self) -> None:
        pmf = [0.0] * 3
        status = generate_epsilon_greedy(0.3, 10, pmf, clamp_top_action=True)
        assert status == ExplorationStatus.SUCCESS
        assert pmf == pytest.approx([0.1, 0.1, 0.8])

    def test_clamp_does_not_accept_negative(self) -> None:
        status = generate_epsilon_greedy(0.3, -2, [0.0] * 3, clamp_top_action=True)
        assert status == ExplorationStatus.BAD_RANGE

    def test_writes_into_array_module_buffer(self) -> None:
        """Low-level API accepts any indexable buffer."""
        pmf = array.array("d", [0.0, 0.0])
        generate_epsilon_greedy(0.5, 1, pmf)
        assert list(pmf) == pytest.approx([0.25, 0.75])

    def test_buffer_identity_preserved(self) -> None:
        pmf = np.zeros(3)
        original = pmf
        generate_epsilon_greedy(0.1, 0, pmf)
        assert pmf is original
        assert pmf.shape == (3,)


class TestSoftmax:
    """Tests for generate_softmax()."""

    @pytest.mark.parametrize("lambda_", [0.0, 0.5, 1.0, 10.0])
    def test_sums_to_one_and_monotonic(self, lambda_: float) -> None:
        scores = [0.3, -1.2, 2.5, 2.5, 0.0]
        pmf = np.zeros(len(scores))
        assert generate_softmax(lambda_, scores, pmf) == ExplorationStatus.SUCCESS
        assert abs(pmf.sum() - 1.0) < _TOL
        assert np.all(pmf >= 0.0)
        order = np.argsort(scores)
        assert np.all(np.diff(pmf[order]) >= -1e-12)

    def test_known_values(self) -> None:
        pmf = [0.0, 0.0]
        generate_softmax(1.0, [0.0, np.log(3.0)], pmf)
        assert pmf == pytest.approx([0.25, 0.75])

    def test_all_equal_scores_uniform(self) -> None:
        pmf = np.zeros(4)
        generate_softmax(3.0, [7.0] * 4, pmf)
        np.testing.assert_allclose(pmf, 0.25)

    def test_lambda_zero_uniform(self) -> None:
        pmf = np.zeros(3)
        generate_softmax(0.0, [1.0, 100.0, -5.0], pmf)
        np.testing.assert_allclose(pmf, 1.0 / 3.0)

    def test_large_scores_do_not_overflow(self) -> None:
        pmf = np.zeros(3)
        generate_softmax(1.0, [1000.0, 999.0, 0.0], pmf)
        assert np.all(np.isfinite(pmf))
        assert abs(pmf.sum() - 1.0) < _TOL
        assert pmf[0] > pmf[1] > pmf[2]

    def test_skewed_scores(self, skewed_scores: np.ndarray) -> None:
        pmf = np.zeros(len(skewed_scores))
        generate_softmax(1.0, skewed_scores, pmf)
        assert pmf[0] == pytest.approx(1.0)
        assert pmf[-1] == 0.0
        assert abs(pmf.sum() - 1.0) < _TOL

    def test_all_negative_infinity_falls_back_to_uniform(self) -> None:
        pmf = [0.0] * 4
        status = generate_softmax(1.0, [-np.inf] * 4, pmf)
        assert status == ExplorationStatus.SUCCESS
        assert pmf == pytest.approx([0.25] * 4)

    def test_positive_infinity_takes_all_mass(self) -> None:
        pmf = [0.0, 0.0]
        assert generate_softmax(1.0, [np.inf, 0.0], pmf) == ExplorationStatus.SUCCESS
        assert pmf == [1.0, 0.0]

    def test_positive_infinities_share_mass(self) -> None:
        pmf = np.zeros(4)
        generate_softmax(0.5, [np.inf, 2.0, np.inf, -np.inf], pmf)
        np.testing.assert_array_equal(pmf, [0.5, 0.0, 0.5, 0.0])

    def test_negative_lambda_favors_low_scores(self) -> None:
        pmf = np.zeros(3)
        generate_softmax(-1.0, [np.log(3.0), 0.0, np.inf], pmf)
        np.testing.assert_allclose(pmf, [0.25, 0.75, 0.0])

    def test_negative_lambda_negative_infinity_takes_all_mass(self) -> None:
        pmf = np.zeros(3)
        generate_softmax(-2.0, [1.0, -np.inf, 5.0], pmf)
        np.testing.assert_array_equal(pmf, [0.0, 1.0, 0.0])

    def test_infinite_score_ignored_at_lambda_zero(self) -> None:
        pmf = np.zeros(2)
        generate_softmax(0.0, [np.inf, 0.0], pmf)
        np.testing.assert_array_equal(pmf, [0.5, 0.5])

    def test_size_mismatch(self) -> None:
        """3 scores into a 4-slot buffer is a size mismatch, not BAD_RANGE."""
        pmf = [0.0] * 4
        status = generate_softmax(1.0, [1.0, 2.0, 3.0], pmf)
        assert status == ExplorationStatus.PDF_RANKING_SIZE_MISMATCH
        assert pmf == [0.0] * 4

    def test_empty_inputs(self) -> None:
        assert generate_softmax(1.0, [], []) == ExplorationStatus.BAD_RANGE
        assert generate_softmax(1.0, [1.0], []) == ExplorationStatus.BAD_RANGE
        assert generate_softmax(1.0, [], [0.0]) == ExplorationStatus.BAD_RANGE

    def test_non_finite_lambda(self) -> None:
        assert generate_softmax(float("nan"), [1.0], [0.0]) == ExplorationStatus.BAD_RANGE
        assert generate_softmax(float("inf"), [1.0], [0.0]) == ExplorationStatus.BAD_RANGE

    def test_nan_score(self) -> None:
        assert generate_softmax(1.0, [1.0, float("nan")], [0.0, 0.0]) == ExplorationStatus.BAD_RANGE


class TestBag:
    """Tests for generate_bag()."""

    def test_vote_shares(self) -> None:
        pmf = np.zeros(4)
        status = generate_bag([2, 0, 2, 2, 1], pmf)
        assert status == ExplorationStatus.SUCCESS
        np.testing.assert_allclose(pmf, [0.2, 0.2, 0.6, 0.0])
        assert abs(pmf.sum() - 1.0) < _TOL

    def test_single_vote(self) -> None:
        pmf = [0.5, 0.5, 0.5]
        generate_bag([1], pmf)
        assert pmf == [0.0, 1.0, 0.0]

    def test_accepts_generators_and_numpy_ints(self) -> None:
        pmf = np.zeros(2)
        generate_bag((np.int64(v) for v in [1, 1, 0, 1]), pmf)
        np.testing.assert_allclose(pmf, [0.25, 0.75])

    def test_empty_votes(self) -> None:
        assert generate_bag([], [0.0, 0.0]) == ExplorationStatus.BAD_RANGE

    def test_empty_pmf(self) -> None:
        assert generate_bag([0], []) == ExplorationStatus.BAD_RANGE

    def test_vote_beyond_actions(self) -> None:
        pmf = [0.0, 0.0]
        assert generate_bag([0, 2], pmf) == ExplorationStatus.PDF_RANKING_SIZE_MISMATCH
        assert pmf == [0.0, 0.0]

    def test_negative_vote(self) -> None:
        assert generate_bag([0, -1], [0.0, 0.0]) == ExplorationStatus.BAD_RANGE


class TestBagFromCounts:
    """Tests for generate_bag_from_counts()."""

    def test_counts(self) -> None:
        pmf = np.zeros(3)
        assert generate_bag_from_counts([1, 0, 3], pmf) == ExplorationStatus.SUCCESS
        np.testing.assert_allclose(pmf, [0.25, 0.0, 0.75])

    def test_no_votes_uniform(self) -> None:
        pmf = np.zeros(4)
        generate_bag_from_counts([0, 0, 0, 0], pmf)
        np.testing.assert_allclose(pmf, 0.25)

    def test_length_mismatch(self) -> None:
        status = generate_bag_from_counts([1, 2], [0.0, 0.0, 0.0])
        assert status == ExplorationStatus.PDF_RANKING_SIZE_MISMATCH

    def test_empty(self) -> None:
        assert generate_bag_from_counts([], []) == ExplorationStatus.BAD_RANGE

    def test_negative_count(self) -> None:
        assert generate_bag_from_counts([1, -1], [0.0, 0.0]) == ExplorationStatus.BAD_RANGE

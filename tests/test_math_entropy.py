"""Tests for cohesion_lens.math.entropy module."""

import math

from cohesion_lens.math.entropy import Entropy


class TestShannonEntropy:
    """Tests for Shannon entropy computation."""

    def test_empty_distribution(self):
        """Empty distribution has zero entropy."""
        assert Entropy.shannon({}) == 0.0

    def test_single_event(self):
        """Single event (certainty) has zero entropy."""
        assert Entropy.shannon({"a": 1.0}) == 0.0

    def test_fair_coin(self):
        """Fair coin has entropy = 1.0 bit."""
        assert abs(Entropy.shannon({"m1": 0.5, "m2": 0.5}) - 1.0) < 1e-10

    def test_weights_need_not_sum_to_one(self):
        """Weights are normalized by their total."""
        assert abs(Entropy.shannon({"m1": 1.0, "m2": 1.0}) - 1.0) < 1e-10

    def test_zero_bins_ignored(self):
        assert Entropy.shannon({"m1": 1.0, "m2": 1.0, "m3": 0.0}) == Entropy.shannon(
            {"m1": 1.0, "m2": 1.0}
        )

    def test_all_zero_weights(self):
        assert Entropy.shannon({"m1": 0.0, "m2": 0.0}) == 0.0


class TestNormalizedEntropy:
    """Tests for normalized entropy."""

    def test_uniform_normalized_equals_one(self):
        result = Entropy.normalized({"a": 1, "b": 1, "c": 1, "d": 1})
        assert abs(result - 1.0) < 1e-10

    def test_zero_bins_count_towards_maximum(self):
        """Two equal weights over three bins: 1 / log2(3)."""
        result = Entropy.normalized({"m1": 1.0, "m2": 1.0, "m3": 0.0})
        assert abs(result - 1.0 / math.log2(3)) < 1e-10

    def test_single_bin(self):
        assert Entropy.normalized({"a": 5}) == 0.0

    def test_normalized_in_unit_interval(self):
        result = Entropy.normalized({"a": 97, "b": 1, "c": 1, "d": 1})
        assert 0.0 <= result <= 1.0

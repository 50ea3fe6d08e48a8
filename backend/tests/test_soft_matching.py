"""Tests for Gaussian, edit-distance and time-decay helpers."""

import math

import pytest

from services.soft_matching import (
    fuzzy_similarity,
    gaussian_decay,
    levenshtein,
    soft_experience_match,
    time_decay,
)


class TestEditDistance:
    def test_levenshtein(self):
        assert levenshtein("kitten", "sitting") == 3
        assert levenshtein("", "abc") == 3

    def test_similarity_is_case_insensitive(self):
        assert fuzzy_similarity("Google", "google") == 1.0

    def test_similarity_normalized_by_longer_string(self):
        assert fuzzy_similarity("standford", "stanford") == pytest.approx(8 / 9)

    def test_both_empty(self):
        assert fuzzy_similarity("", "") == 0.0


class TestGaussian:
    def test_on_target(self):
        assert gaussian_decay(3.0, 3.0) == 1.0

    def test_one_sigma(self):
        assert gaussian_decay(5.0, 3.0, sigma=2.0) == pytest.approx(math.exp(-0.5))


class TestExperience:
    def test_missing_inputs(self):
        assert soft_experience_match(None, [3.0]) == 0.0
        assert soft_experience_match(3.2, []) == 0.0

    def test_near_target_is_near_max(self):
        assert soft_experience_match(3.2, [3.0]) > 1.95

    def test_best_target_wins(self):
        assert soft_experience_match(10.0, [1.0, 10.0]) == pytest.approx(2.0)

    def test_bounded(self):
        assert 0.0 <= soft_experience_match(40.0, [1.0]) <= 2.0

    def test_is_twice_the_best_decay(self):
        expected = 2.0 * gaussian_decay(6.0, 5.0, sigma=1.5)
        assert soft_experience_match(6.0, [1.0, 5.0], sigma=1.5) == pytest.approx(expected)


class TestTimeDecay:
    def test_current(self):
        assert time_decay(0) == 1.0

    def test_half_life(self):
        assert time_decay(3, half_life=3.0) == pytest.approx(0.5)

    def test_future_end_year_does_not_amplify(self):
        assert time_decay(-2) == 1.0

"""Tests for dynamic blend weights."""

import pytest

from services.query_parser import parse_query
from services.weighting import adjust_weights, query_complexity

QUERIES = [
    "python",
    "python react django",
    "PM at Google, 3 years",
    "alumni founder at faang with 5 years",
    "engineer, not founder",
    "someone kind",
]


def _weights(query: str):
    parsed = parse_query(query)
    return adjust_weights(parsed.raw_text, parsed)


def test_empty_query_is_recommendation_only():
    weights = _weights("")
    assert weights.recommendation == 1.0
    assert weights.text_match == 0.0


def test_short_query_is_balanced():
    weights = _weights("python")
    assert weights.recommendation == pytest.approx(0.5)
    assert weights.text_match == pytest.approx(0.5)


def test_entities_shift_toward_text():
    assert _weights("python react django").recommendation == pytest.approx(0.2)


def test_recommendation_weight_is_clamped():
    weights = _weights("alumni founder at faang with 5 years")
    assert weights.recommendation == pytest.approx(0.1)
    assert weights.text_match == pytest.approx(0.9)


@pytest.mark.parametrize("query", QUERIES)
def test_weights_are_normalized(query):
    weights = _weights(query)
    assert weights.recommendation + weights.text_match == pytest.approx(1.0)
    assert 0.1 <= weights.recommendation <= 0.9


@pytest.mark.parametrize("query", QUERIES)
def test_deterministic(query):
    assert _weights(query) == _weights(query)


def test_query_complexity():
    assert query_complexity(parse_query("")) == 0.0
    simple = query_complexity(parse_query("python"))
    rich = query_complexity(parse_query("software engineer at google from stanford, 5 years"))
    assert 0.0 < simple < rich <= 10.0

"""Tests for zone-weighted field scoring."""

import pytest

from models.schemas.profile import ProfileRecord
from services.field_scoring import FieldZone, build_zoned_text, score_fields
from services.query_parser import parse_query


def test_zones_are_populated(google_pm):
    zoned = build_zoned_text(google_pm)
    assert "alice chen" in zoned.identity
    assert "google" in zoned.professional
    assert "stanford university" in zoned.professional
    assert "product strategy" in zoned.skills


def test_professional_hit(google_pm):
    assert score_fields(google_pm, ["google"]) == pytest.approx(3.0)


def test_token_scores_in_every_zone(google_pm):
    # "product" appears in the bio, the job title and a skill
    assert score_fields(google_pm, ["product"]) == pytest.approx(1.0 + 3.0 + 1.5)


def test_single_char_tokens_ignored(google_pm):
    assert score_fields(google_pm, ["a", "e"]) == 0.0


def test_custom_zone_weights(google_pm):
    weights = {FieldZone.IDENTITY: 0.0, FieldZone.PROFESSIONAL: 10.0, FieldZone.SKILLS: 0.0}
    assert score_fields(google_pm, ["google"], weights) == pytest.approx(10.0)


def test_empty_profile():
    assert score_fields(ProfileRecord(), ["google", "python"]) == 0.0


def test_phrase_words_do_not_score_separately():
    profile = ProfileRecord(job_title="Product Manager")
    tokens = parse_query("senior product manager").tokens
    assert "manager" in tokens
    assert score_fields(profile, tokens) == pytest.approx(3.0)


def test_trigger_words_earn_no_credit():
    # "no" is a substring of "technology"
    profile = ProfileRecord(industry="Technology")
    assert score_fields(profile, parse_query("engineer, no founder").tokens) == 0.0
    assert score_fields(profile, ["no", "must", "about"]) == 0.0

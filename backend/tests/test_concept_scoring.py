"""Tests for profile concept tags and concept overlap scoring."""

from models.schemas.profile import CareerStage, Education, ProfileRecord
from services.concept_scoring import profile_concept_tags, score_concepts
from services.gazetteers import CONCEPTS
from services.query_parser import parse_query


def test_profile_tags_from_company_and_school(google_pm):
    tags = profile_concept_tags(google_pm, CONCEPTS)
    assert tags == frozenset({"top tech", "faang", "big tech", "stanford"})


def test_past_companies_do_not_tag(google_pm):
    # Stripe is only a past employer
    assert "unicorn" not in profile_concept_tags(google_pm, CONCEPTS)


def test_founder_tags(founder):
    tags = profile_concept_tags(founder, CONCEPTS)
    assert tags == frozenset({"ivy league", "ivy", "top mba", "startup"})


class TestTopMba:
    def test_undergraduate_degree_is_not_top_mba(self):
        profile = ProfileRecord(educations=[Education(school_name="Columbia University", degree="Bachelor's")])
        tags = profile_concept_tags(profile, CONCEPTS)
        assert "ivy league" in tags
        assert "top mba" not in tags

    def test_business_field_of_study(self):
        profile = ProfileRecord(
            educations=[
                Education(
                    school_name="Stanford University",
                    degree="Master's",
                    field_of_study="Business Administration",
                )
            ]
        )
        assert "top mba" in profile_concept_tags(profile, CONCEPTS)


class TestStartup:
    def test_unicorn_employee(self):
        profile = ProfileRecord(current_company="Stripe", career_stage=CareerStage.MID_LEVEL)
        assert profile_concept_tags(profile, CONCEPTS) == frozenset({"unicorn", "startup"})

    def test_company_name(self):
        profile = ProfileRecord(current_company="Acme Startup Studio")
        assert profile_concept_tags(profile, CONCEPTS) == frozenset({"startup"})

    def test_early_career(self):
        profile = ProfileRecord(career_stage=CareerStage.EARLY_CAREER)
        assert "startup" in profile_concept_tags(profile, CONCEPTS)

    def test_startup_founder_query_scores(self, founder, engineer):
        tags = parse_query("startup founder").concept_tags
        assert tags == frozenset({"startup"})
        assert score_concepts(founder, tags, CONCEPTS) == 3.0
        assert score_concepts(engineer, tags, CONCEPTS) == 0.0


def test_school_names_do_not_tag_company_categories():
    profile = ProfileRecord(educations=[Education(school_name="McKinsey Academy")])
    assert "mbb" not in profile_concept_tags(profile, CONCEPTS)


def test_overlap_scores_three_per_category(google_pm):
    assert score_concepts(google_pm, {"faang"}, CONCEPTS) == 3.0
    assert score_concepts(google_pm, {"faang", "stanford"}, CONCEPTS) == 6.0


def test_identical_categories_count_once(founder):
    assert score_concepts(founder, {"ivy league", "ivy"}, CONCEPTS) == 3.0


def test_no_overlap(engineer):
    assert score_concepts(engineer, {"mbb"}, CONCEPTS) == 0.0

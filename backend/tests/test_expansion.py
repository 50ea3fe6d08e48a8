"""Tests for synonym and concept-tag expansion."""

from services.expansion import SynonymExpander, expand_concepts, expand_synonyms
from services.gazetteers import CONCEPT_ALIASES, CONCEPTS


class TestSynonymExpander:
    def test_forward_adds_all_variants(self, gazetteer):
        expanded = expand_synonyms({"pm"}, gazetteer)
        assert {"pm", "product manager", "program manager", "project manager"} <= expanded

    def test_reverse_adds_key_and_siblings(self, gazetteer):
        expanded = expand_synonyms({"coach"}, gazetteer)
        assert {"coach", "mentor", "advisor", "guide"} <= expanded

    def test_reverse_fanout_is_capped(self):
        expander = SynonymExpander({"k": ["a", "b", "c", "d", "e"]}, fanout_cap=3)
        assert expander.expand({"a"}) == {"a", "k", "b", "c", "d"}

    def test_unknown_tokens_pass_through(self):
        expander = SynonymExpander({"pm": ["product manager"]})
        assert expander.expand({"zebra"}) == {"zebra"}

    def test_output_contains_input(self, gazetteer):
        tokens = {"swe", "google", "mentor", "years", "zebra"}
        assert tokens <= expand_synonyms(tokens, gazetteer)


class TestConcepts:
    def test_category_key_injects_members(self):
        tokens, tags = expand_concepts({"worked"}, "worked at faang", CONCEPTS)
        assert tags == frozenset({"faang"})
        assert {"worked", "google", "netflix"} <= tokens

    def test_overlapping_keys_both_fire(self):
        _, tags = expand_concepts(set(), "ivy league grad", CONCEPTS)
        assert tags == frozenset({"ivy league", "ivy"})

    def test_no_category(self):
        tokens, tags = expand_concepts({"python"}, "python developer", CONCEPTS)
        assert tokens == {"python"}
        assert tags == frozenset()

    def test_aliases_fire_their_category(self):
        _, tags = expand_concepts(set(), "wall street analyst", CONCEPTS, CONCEPT_ALIASES)
        assert tags == frozenset({"investment bank"})
        _, tags = expand_concepts(set(), "m7 grad at a large tech company", CONCEPTS, CONCEPT_ALIASES)
        assert tags == frozenset({"top mba", "big tech"})

    def test_alias_injects_members(self):
        tokens, tags = expand_concepts(set(), "management consulting", CONCEPTS, CONCEPT_ALIASES)
        assert tags == frozenset({"mbb", "consulting"})
        assert {"mckinsey", "bain", "bcg", "deloitte"} <= tokens

    def test_aliases_are_optional(self):
        _, tags = expand_concepts(set(), "entrepreneurial", CONCEPTS)
        assert tags == frozenset()

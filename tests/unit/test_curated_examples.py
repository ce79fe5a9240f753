"""Tests for tutor.curated_examples."""

from __future__ import annotations

from tutor.curated_examples import (
    CURATED_TOPICS,
    lookup_exercise_template,
    lookup_topic_content,
    topic_contains,
)
from tutor.lesson_types import Language


class TestTopicContains:
    def test_any_keyword_matches(self):
        predicate = topic_contains("random", "rng")
        assert predicate("random numbers")
        assert predicate("using rng")
        assert not predicate("loops")


class TestLookupTopicContent:
    def test_every_curated_row_has_two_examples(self):
        for _, _, content in CURATED_TOPICS:
            assert len(content.examples) == 2

    def test_match_is_case_insensitive(self):
        content = lookup_topic_content(Language.RUST, "RANDOM Numbers")
        assert content is not None
        assert "rand" in content.syntax_guide

    def test_first_match_wins(self):
        random_row = lookup_topic_content(Language.RUST, "random")
        assert lookup_topic_content(Language.RUST, "random variables") is random_row

    def test_language_must_match(self):
        assert lookup_topic_content(Language.JAVASCRIPT, "variables") is None

    def test_unknown_topic(self):
        assert lookup_topic_content(Language.CPP, "templates") is None


class TestLookupExerciseTemplate:
    def test_variables_checked_before_random(self):
        template = lookup_exercise_template(Language.RUST, "random variables")
        assert template.example_output == "Your name"

    def test_random_template(self):
        template = lookup_exercise_template(Language.CPP, "random numbers")
        assert template.example_output == "Random number between 1 and 100: 42"

    def test_generic_template_mentions_language_and_topic(self):
        template = lookup_exercise_template(Language.JAVASCRIPT, "closures")
        assert "JavaScript" in template.description
        assert "closures" in template.description
        assert template.hints == (
            "Review the code examples above",
            "Start with a simple implementation",
        )

"""
Unit tests for question set generation.
"""

import random
from collections import Counter

import pytest

from subnet_quiz.generation.question_set import (
    ARCHETYPE_WEIGHTS,
    generate,
    generate_question_set,
    pick_archetype,
)
from subnet_quiz.quiz.models import QuestionArchetype


class TestGenerateQuestionSet:
    """Test generate_question_set()."""

    @pytest.mark.parametrize("count", [1, 5, 10, 25])
    def test_count_and_sequential_ids(self, count, rng):
        questions = generate_question_set(count, rng)
        assert len(questions) == count
        assert [q.id for q in questions] == list(range(1, count + 1))

    @pytest.mark.parametrize("count", [0, -1, 2.5, "10", True])
    def test_invalid_count(self, count, rng):
        with pytest.raises(ValueError):
            generate_question_set(count, rng)

    def test_every_question_valid(self, rng):
        for question in generate_question_set(100, rng):
            assert len(set(question.options)) == len(question.options)
            assert 0 <= question.correct_index < len(question.options)
            assert question.points == question.archetype.points

    def test_restricted_archetypes(self, rng):
        allowed = [QuestionArchetype.SUBNET_MASK_LOOKUP, QuestionArchetype.CIDR_FROM_MASK]
        questions = generate_question_set(30, rng, archetypes=allowed)
        assert {q.archetype for q in questions} <= set(allowed)

    def test_seeded_runs_repeat(self):
        first = generate_question_set(10, random.Random(42))
        second = generate_question_set(10, random.Random(42))
        assert first == second

    def test_alias(self):
        assert generate is generate_question_set


class TestPickArchetype:
    """Test pick_archetype()."""

    def test_weights_cover_every_archetype(self):
        assert set(ARCHETYPE_WEIGHTS) == set(QuestionArchetype)

    def test_empty_pool(self, rng):
        with pytest.raises(ValueError):
            pick_archetype(rng, [])

    def test_single_archetype_pool(self, rng):
        assert pick_archetype(rng, [QuestionArchetype.HOST_RANGE]) == QuestionArchetype.HOST_RANGE

    def test_all_archetypes_reachable(self):
        rng = random.Random(7)
        counts = Counter(pick_archetype(rng) for _ in range(4000))
        assert set(counts) == set(QuestionArchetype)
        # Weight 3 vs weight 1
        assert counts[QuestionArchetype.NETWORK_ADDRESS] > counts[QuestionArchetype.IP_CONTAINMENT_YES_NO]

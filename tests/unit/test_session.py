"""
Unit tests for the quiz session state machine.
"""

import pytest

from subnet_quiz.core.errors import QuizFinishedError
from subnet_quiz.generation.question_set import generate_question_set
from subnet_quiz.quiz.session import (
    GRADE_MESSAGES,
    grade_message,
    reset_quiz,
    start_quiz,
    submit_answer,
    summarize,
)


def wrong_index(question):
    return (question.correct_index + 1) % len(question.options)


@pytest.fixture
def questions(rng):
    return generate_question_set(5, rng)


class TestStartQuiz:
    """Test start_quiz()."""

    def test_fresh_state(self, questions):
        state = start_quiz(questions)
        assert state.current_index == 0
        assert state.score == 0
        assert state.strikes == 0
        assert state.current_question == questions[0]
        assert not state.is_finished

    def test_empty_questions(self):
        with pytest.raises(ValueError):
            start_quiz([])

    def test_invalid_strikes(self, questions):
        with pytest.raises(ValueError):
            start_quiz(questions, max_strikes=0)


class TestSubmitAnswer:
    """Test submit_answer()."""

    def test_correct_answer(self, questions):
        state = start_quiz(questions)
        question = state.current_question

        new_state, result = submit_answer(state, question.correct_index)

        assert result.correct
        assert result.points_awarded == question.points
        assert result.feedback == "Correct! Well done!"
        assert new_state.score == question.points
        assert new_state.correct_count == 1
        assert new_state.strikes == 0
        assert new_state.current_index == 1
        # Input state untouched
        assert state.current_index == 0

    def test_incorrect_answer(self, questions):
        state = start_quiz(questions)
        question = state.current_question

        new_state, result = submit_answer(state, wrong_index(question))

        assert not result.correct
        assert result.points_awarded == 0
        assert result.feedback == f"Incorrect. The correct answer was: {question.correct_answer}"
        assert result.user_answer != result.correct_answer
        assert new_state.score == 0
        assert new_state.strikes == 1
        assert new_state.strikes_left == 2

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_bad_index(self, sample_question, index):
        state = start_quiz([sample_question])
        with pytest.raises(ValueError):
            submit_answer(state, index)

    def test_elimination(self, questions):
        state = start_quiz(questions, max_strikes=2)
        for _ in range(2):
            state, _ = submit_answer(state, wrong_index(state.current_question))

        assert state.eliminated
        assert state.is_finished
        assert state.current_question is None
        with pytest.raises(QuizFinishedError):
            submit_answer(state, 0)

    def test_completes_all_questions(self, questions):
        state = start_quiz(questions)
        while not state.is_finished:
            state, _ = submit_answer(state, state.current_question.correct_index)

        assert state.current_index == len(questions)
        assert state.score == sum(q.points for q in questions)
        assert len(state.answers) == len(questions)
        assert not state.eliminated


class TestResetAndSummary:
    """Test reset_quiz() and summarize()."""

    def test_reset_same_questions(self, questions):
        state = start_quiz(questions, max_strikes=4)
        state, _ = submit_answer(state, wrong_index(state.current_question))

        fresh = reset_quiz(state)
        assert fresh.questions == state.questions
        assert fresh.max_strikes == 4
        assert fresh.strikes == 0
        assert fresh.answers == ()

    def test_reset_new_questions(self, questions, sample_question):
        state = start_quiz(questions)
        fresh = reset_quiz(state, [sample_question])
        assert fresh.questions == (sample_question,)

    def test_summary(self, questions):
        state = start_quiz(questions)
        for i in range(len(questions)):
            question = state.current_question
            index = question.correct_index if i < 4 else wrong_index(question)
            state, _ = submit_answer(state, index)

        summary = summarize(state)
        assert summary.correct_count == 4
        assert summary.answered == 5
        assert summary.percentage == 80
        assert summary.message == GRADE_MESSAGES[0][1]
        assert summary.max_score == sum(q.points for q in questions)

    @pytest.mark.parametrize("percentage, expected", [
        (100, 0),
        (80, 0),
        (79, 1),
        (60, 1),
        (59, 2),
        (0, 2),
    ])
    def test_grade_message(self, percentage, expected):
        assert grade_message(percentage) == GRADE_MESSAGES[expected][1]

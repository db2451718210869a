"""
Quiz session state machine.

The session is an immutable QuizState transformed by pure functions:
start_quiz, submit_answer and reset_quiz. A wrong answer costs a strike;
the quiz ends when every question has been answered or the strikes reach
the limit (eliminated).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from loguru import logger

from subnet_quiz.core.errors import QuizFinishedError

from .models import Question

DEFAULT_MAX_STRIKES = 3

# (minimum percentage, message), checked top-down
GRADE_MESSAGES: tuple[tuple[int, str], ...] = (
    (80, "Excellent! You've mastered IP subnetting!"),
    (60, "Good job! Keep practicing to improve!"),
    (0, "You might want to review IP subnetting concepts and try again."),
)


@dataclass(frozen=True)
class QuizState:
    """Snapshot of one quiz run."""

    questions: tuple[Question, ...]
    current_index: int = 0
    score: int = 0  # points earned
    correct_count: int = 0
    strikes: int = 0
    max_strikes: int = DEFAULT_MAX_STRIKES
    answers: tuple[int, ...] = ()

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def eliminated(self) -> bool:
        return self.strikes >= self.max_strikes

    @property
    def is_finished(self) -> bool:
        return self.current_index >= len(self.questions) or self.eliminated

    @property
    def current_question(self) -> Question | None:
        if self.is_finished:
            return None
        return self.questions[self.current_index]

    @property
    def strikes_left(self) -> int:
        return max(0, self.max_strikes - self.strikes)


@dataclass(frozen=True)
class AnswerResult:
    """Result of checking one submitted answer."""

    question: Question
    selected_index: int
    correct: bool
    points_awarded: int

    @property
    def user_answer(self) -> str:
        return self.question.options[self.selected_index]

    @property
    def correct_answer(self) -> str:
        return self.question.correct_answer

    @property
    def feedback(self) -> str:
        if self.correct:
            return "Correct! Well done!"
        return f"Incorrect. The correct answer was: {self.correct_answer}"


@dataclass(frozen=True)
class QuizSummary:
    score: int
    max_score: int
    correct_count: int
    answered: int
    total_questions: int
    strikes: int
    eliminated: bool
    percentage: int
    message: str


def start_quiz(questions: list[Question] | tuple[Question, ...], max_strikes: int = DEFAULT_MAX_STRIKES) -> QuizState:
    """Fresh state for a question set."""
    if not questions:
        raise ValueError("A quiz needs at least one question")
    if max_strikes < 1:
        raise ValueError(f"max_strikes must be at least 1, got {max_strikes}")
    return QuizState(questions=tuple(questions), max_strikes=max_strikes)


def submit_answer(state: QuizState, selected_index: int) -> tuple[QuizState, AnswerResult]:
    """
    Score the answer for the current question and advance.

    Args:
        state: Current quiz state
        selected_index: Index of the chosen option

    Returns:
        (new state, answer result)

    Raises:
        QuizFinishedError: if the quiz has already ended
        ValueError: if `selected_index` is not a valid option index
    """
    question = state.current_question
    if question is None:
        raise QuizFinishedError("The quiz is already finished")
    if not 0 <= selected_index < len(question.options):
        raise ValueError(
            f"Option index {selected_index} out of range for {len(question.options)} options"
        )

    correct = question.is_correct(selected_index)
    points = question.points if correct else 0

    new_state = replace(
        state,
        current_index=state.current_index + 1,
        score=state.score + points,
        correct_count=state.correct_count + (1 if correct else 0),
        strikes=state.strikes if correct else state.strikes + 1,
        answers=state.answers + (selected_index,),
    )

    if new_state.eliminated:
        logger.info(f"Eliminated after {new_state.strikes} strikes on question {question.id}")

    return new_state, AnswerResult(
        question=question,
        selected_index=selected_index,
        correct=correct,
        points_awarded=points,
    )


def reset_quiz(state: QuizState, questions: list[Question] | None = None) -> QuizState:
    """Start over, on the same questions unless a new set is given."""
    return start_quiz(questions if questions is not None else state.questions, state.max_strikes)


def grade_message(percentage: float) -> str:
    for threshold, message in GRADE_MESSAGES:
        if percentage >= threshold:
            return message
    return GRADE_MESSAGES[-1][1]


def summarize(state: QuizState) -> QuizSummary:
    """Final (or running) score summary."""
    max_score = sum(q.points for q in state.questions)
    percentage = round(state.correct_count / state.total_questions * 100)
    return QuizSummary(
        score=state.score,
        max_score=max_score,
        correct_count=state.correct_count,
        answered=len(state.answers),
        total_questions=state.total_questions,
        strikes=state.strikes,
        eliminated=state.eliminated,
        percentage=percentage,
        message=grade_message(percentage),
    )

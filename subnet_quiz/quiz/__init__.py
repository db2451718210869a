"""
Quiz Module - question records and the session state machine.
"""

from subnet_quiz.quiz.models import ARCHETYPE_POINTS, NO, YES, Question, QuestionArchetype
from subnet_quiz.quiz.session import (
    AnswerResult,
    QuizState,
    QuizSummary,
    reset_quiz,
    start_quiz,
    submit_answer,
    summarize,
)

__all__ = [
    "ARCHETYPE_POINTS",
    "AnswerResult",
    "NO",
    "Question",
    "QuestionArchetype",
    "QuizState",
    "QuizSummary",
    "YES",
    "reset_quiz",
    "start_quiz",
    "submit_answer",
    "summarize",
]

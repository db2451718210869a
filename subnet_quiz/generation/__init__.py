"""
Question generation.

Components:
- sampling: weighted CIDR distribution
- distractors: option builder with exactly one correct answer
- archetypes: the registered per-archetype generators
- question_set: weighted assembly of N questions
- explanations: guides and worked solutions
"""

from subnet_quiz.generation.archetypes import (
    GENERATORS,
    generate_question,
    get_generator,
    register,
)
from subnet_quiz.generation.distractors import OptionBuilder, OptionSet, build_options
from subnet_quiz.generation.question_set import (
    ARCHETYPE_WEIGHTS,
    generate,
    generate_question_set,
    pick_archetype,
)
from subnet_quiz.generation.sampling import CidrDistribution, CidrRange, random_cidr

__all__ = [
    "ARCHETYPE_WEIGHTS",
    "CidrDistribution",
    "CidrRange",
    "GENERATORS",
    "OptionBuilder",
    "OptionSet",
    "build_options",
    "generate",
    "generate_question",
    "generate_question_set",
    "get_generator",
    "pick_archetype",
    "random_cidr",
    "register",
]

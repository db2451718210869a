"""
Question set generator.

Picks an archetype per slot by fixed weight, runs its generator and numbers
the results 1..count. Slots are sampled independently; repeated archetypes
or addresses within one set are fine.
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from loguru import logger

from subnet_quiz.core.rng import get_rng
from subnet_quiz.quiz.models import Question, QuestionArchetype

from .archetypes import GENERATORS

# Relative pick weights, derived from the classic dispatch thresholds with the
# containment share split between its 4-option and Yes/No variants
ARCHETYPE_WEIGHTS: dict[QuestionArchetype, int] = {
    QuestionArchetype.USABLE_HOST_COUNT: 3,
    QuestionArchetype.HOST_RANGE: 3,
    QuestionArchetype.SUBNET_MASK_LOOKUP: 3,
    QuestionArchetype.CIDR_FROM_MASK: 3,
    QuestionArchetype.IP_CONTAINMENT: 2,
    QuestionArchetype.IP_CONTAINMENT_YES_NO: 1,
    QuestionArchetype.BROADCAST_ADDRESS: 2,
    QuestionArchetype.NETWORK_ADDRESS: 3,
}


def pick_archetype(
    rng: random.Random | None = None,
    archetypes: Iterable[QuestionArchetype] | None = None,
) -> QuestionArchetype:
    """Weighted random archetype, optionally restricted to a subset."""
    rng = get_rng(rng)
    pool = list(archetypes) if archetypes is not None else list(ARCHETYPE_WEIGHTS)
    if not pool:
        raise ValueError("At least one archetype is required")
    weights = [ARCHETYPE_WEIGHTS[a] for a in pool]
    return rng.choices(pool, weights=weights, k=1)[0]


def generate_question_set(
    count: int,
    rng: random.Random | None = None,
    archetypes: Iterable[QuestionArchetype] | None = None,
) -> list[Question]:
    """
    Generate `count` independent questions with sequential ids starting at 1.

    Args:
        count: Number of questions (must be positive)
        rng: Random source (defaults to the shared one)
        archetypes: Optional subset of archetypes to draw from

    Returns:
        Ordered list of Question records
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise ValueError(f"Question count must be a positive integer, got {count!r}")

    rng = get_rng(rng)
    pool = list(archetypes) if archetypes is not None else None

    questions = []
    for index in range(1, count + 1):
        archetype = pick_archetype(rng, pool)
        question = GENERATORS[archetype](rng=rng)
        questions.append(question.with_id(index))

    logger.debug(f"Generated question set of {count}")
    return questions


# Alias matching the session layer's vocabulary
generate = generate_question_set

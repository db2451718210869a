"""
Distractor / option builder.

Given the correct answer and a factory of "nearby but wrong" candidates,
builds a fixed-size option list with exactly one correct entry:

1. Ask the factory for candidates (expansion level 0).
2. Drop anything equal to the correct answer and any repeats.
3. If fewer than `option_count - 1` survive, ask again with a higher
   expansion level and merge, up to `max_rounds` times.
4. Shuffle the survivors, keep `option_count - 1`, add the correct answer
   and shuffle the whole list so its index is uniform.

Duplicate options are a correctness violation, so the builder retries
rather than padding.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from loguru import logger

from subnet_quiz.core.errors import OptionBuildError
from subnet_quiz.core.rng import get_rng

# Maps an expansion level (0 = base patterns) to candidate wrong answers
CandidateFactory = Callable[[int], Iterable[str]]

DEFAULT_OPTION_COUNT = 4
DEFAULT_MAX_ROUNDS = 8


@dataclass(frozen=True)
class OptionSet:
    """Shuffled options plus the index of the correct one."""

    options: tuple[str, ...]
    correct_index: int

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]


class OptionBuilder:
    """Builds deduplicated, shuffled option sets."""

    def __init__(
        self,
        option_count: int = DEFAULT_OPTION_COUNT,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
    ):
        if option_count < 2:
            raise ValueError("An option set needs at least 2 options")
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")
        self.option_count = option_count
        self.max_rounds = max_rounds

    @property
    def distractor_count(self) -> int:
        return self.option_count - 1

    def collect_distractors(self, correct: str, candidates: CandidateFactory) -> list[str]:
        """Gather unique wrong answers, expanding the candidate set as needed."""
        pool: list[str] = []
        seen = {correct}

        for level in range(self.max_rounds):
            for candidate in candidates(level):
                if candidate in seen:
                    continue
                seen.add(candidate)
                pool.append(candidate)

            if len(pool) >= self.distractor_count:
                return pool

            logger.debug(
                f"Only {len(pool)} distinct distractors for {correct!r} at level {level}, expanding"
            )

        raise OptionBuildError(
            f"Could not build {self.distractor_count} distinct distractors for {correct!r} "
            f"after {self.max_rounds} rounds (got {pool})"
        )

    def build(
        self,
        correct: str,
        candidates: CandidateFactory,
        rng: random.Random | None = None,
    ) -> OptionSet:
        """
        Build an option set around `correct`.

        Args:
            correct: The correct answer string
            candidates: Factory returning wrong-answer candidates per expansion level
            rng: Random source (defaults to the shared one)

        Returns:
            OptionSet with `option_count` pairwise-distinct options

        Raises:
            OptionBuildError: if the factory never yields enough distinct candidates
        """
        rng = get_rng(rng)

        pool = self.collect_distractors(correct, candidates)
        rng.shuffle(pool)

        options = [correct, *pool[: self.distractor_count]]
        rng.shuffle(options)

        return OptionSet(options=tuple(options), correct_index=options.index(correct))


_default_builder = OptionBuilder()


def build_options(
    correct: str,
    candidates: CandidateFactory,
    rng: random.Random | None = None,
) -> OptionSet:
    """Build a standard 4-option set with the default builder."""
    return _default_builder.build(correct, candidates, rng)

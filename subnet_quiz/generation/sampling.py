"""
Weighted CIDR sampling.

Questions favour "classroom" subnet sizes: /22-/26 are twice as likely as
/16-/21 or /27-/29. The (range, weight) table is expanded once into a
per-prefix cumulative distribution and sampled with a single inversion
draw, so the result is a pure function of the random source.
"""

from __future__ import annotations

import bisect
import random
from dataclasses import dataclass
from itertools import accumulate

from subnet_quiz.core.rng import get_rng


@dataclass(frozen=True)
class CidrRange:
    """Inclusive prefix range with a relative weight."""

    low: int
    high: int
    weight: float

    def __post_init__(self):
        if not 0 <= self.low <= self.high <= 32:
            raise ValueError(f"Invalid CIDR range /{self.low}-/{self.high}")
        if self.weight <= 0:
            raise ValueError("CIDR range weight must be positive")

    @property
    def prefixes(self) -> range:
        return range(self.low, self.high + 1)


DEFAULT_CIDR_RANGES: tuple[CidrRange, ...] = (
    CidrRange(16, 21, 1),
    CidrRange(22, 26, 2),
    CidrRange(27, 29, 1),
)


class CidrDistribution:
    """Discrete distribution over prefix lengths built from weighted ranges."""

    def __init__(self, ranges: tuple[CidrRange, ...] = DEFAULT_CIDR_RANGES):
        if not ranges:
            raise ValueError("At least one CIDR range is required")

        total_weight = sum(r.weight for r in ranges)
        probabilities: dict[int, float] = {}
        for r in ranges:
            # Range weight is split evenly across its prefixes
            share = r.weight / total_weight / len(r.prefixes)
            for cidr in r.prefixes:
                probabilities[cidr] = probabilities.get(cidr, 0.0) + share

        self.ranges = ranges
        self.cidrs: list[int] = sorted(probabilities)
        self.probabilities: dict[int, float] = probabilities
        self._cumulative: list[float] = list(accumulate(probabilities[c] for c in self.cidrs))

    @property
    def min_cidr(self) -> int:
        return self.cidrs[0]

    @property
    def max_cidr(self) -> int:
        return self.cidrs[-1]

    def sample(self, rng: random.Random | None = None) -> int:
        u = get_rng(rng).random() * self._cumulative[-1]
        index = bisect.bisect_right(self._cumulative, u)
        # Guard against float rounding at the top end
        return self.cidrs[min(index, len(self.cidrs) - 1)]


DEFAULT_DISTRIBUTION = CidrDistribution()


def random_cidr(rng: random.Random | None = None) -> int:
    """Draw one prefix length from the default classroom distribution."""
    return DEFAULT_DISTRIBUTION.sample(rng)

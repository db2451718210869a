"""
Process-wide pseudo-random source.

Every sampling function takes an optional `rng`; passing a seeded
`random.Random` makes a call reproducible, omitting it falls back to the
shared source below.
"""

from __future__ import annotations

import random

_rng = random.Random()


def get_rng(rng: random.Random | None = None) -> random.Random:
    """Return `rng` if given, otherwise the shared process-wide source."""
    return rng if rng is not None else _rng


def seed(value: int | str | None = None) -> None:
    """Reseed the shared source (used by the CLI `--seed` option)."""
    _rng.seed(value)

"""Seed management: one numpy Generator per run, spawned seeds per null sample.

Every randomization routine takes an explicit np.random.Generator and draws
from nothing else, so a run is reproduced exactly from its seed.
"""

import numpy as np


def make_rng(seed: int | np.random.SeedSequence) -> np.random.Generator:
    """Create the Generator threaded through a randomization run."""
    return np.random.default_rng(seed)


def spawn_seeds(seed: int, count: int) -> list[np.random.SeedSequence]:
    """Derive `count` independent child seeds from a master seed.

    Child k depends only on (seed, k), so growing an ensemble keeps the
    earlier samples unchanged.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return np.random.SeedSequence(seed).spawn(count)

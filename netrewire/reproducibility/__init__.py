"""Reproducibility infrastructure: seeded generators and code provenance tracking."""

from netrewire.reproducibility.seed import make_rng, spawn_seeds
from netrewire.reproducibility.git_hash import get_git_hash

__all__ = [
    "make_rng",
    "spawn_seeds",
    "get_git_hash",
]

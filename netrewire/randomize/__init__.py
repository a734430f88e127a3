"""Degree-preserving randomization: simple MCMC sampler and connected randomizer."""

from netrewire.randomize.adaptive import randomize, validate_for_randomize
from netrewire.randomize.cache import (
    generate_or_load_null,
    null_cache_key,
)
from netrewire.randomize.ensemble import generate_null_networks, randomize_copy
from netrewire.randomize.simple import conf_model_simple, untouched_edge_fraction
from netrewire.randomize.swapper import switch_connections, switch_link_pair_ends
from netrewire.randomize.types import (
    RandomizationError,
    RandomizeResult,
    SimpleSwapResult,
    SwapStallError,
)

__all__ = [
    "RandomizationError",
    "RandomizeResult",
    "SimpleSwapResult",
    "SwapStallError",
    "conf_model_simple",
    "generate_null_networks",
    "generate_or_load_null",
    "null_cache_key",
    "randomize",
    "randomize_copy",
    "switch_connections",
    "switch_link_pair_ends",
    "untouched_edge_fraction",
    "validate_for_randomize",
]

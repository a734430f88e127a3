"""Null-model ensembles: independent randomized copies of one network."""

import logging
from collections.abc import Iterator

import numpy as np

from netrewire.config.experiment import RandomizerConfig
from netrewire.graph.network import Network
from netrewire.randomize.adaptive import randomize
from netrewire.randomize.simple import conf_model_simple
from netrewire.randomize.types import RandomizeResult, SimpleSwapResult
from netrewire.reproducibility.seed import make_rng, spawn_seeds

log = logging.getLogger(__name__)


def randomize_copy(
    network: Network,
    config: RandomizerConfig,
    rng: np.random.Generator,
) -> tuple[Network, RandomizeResult | SimpleSwapResult]:
    """Randomize a copy of `network` with the method selected in `config`.

    The input network is left untouched.
    """
    null = network.copy()
    if config.method == "simple":
        num_links = null.number_of_edges()
        repeats = config.repeats_per_link * num_links
        accepted = conf_model_simple(null, rng, repeats)
        return null, SimpleSwapResult(
            attempts=repeats, accepted=accepted, num_links=num_links
        )
    result = randomize(null, rng, config.rounds, swap_config=config.swap)
    return null, result


def generate_null_networks(
    network: Network,
    config: RandomizerConfig,
    n_samples: int | None = None,
) -> Iterator[tuple[int, Network, RandomizeResult | SimpleSwapResult]]:
    """Yield (sample, null_network, diagnostics) for independent null samples.

    Each sample draws from its own Generator spawned from config.seed, so
    sample k is the same no matter how many samples are requested.
    """
    count = config.n_samples if n_samples is None else n_samples
    for sample, seed in enumerate(spawn_seeds(config.seed, count)):
        log.info("Generating null sample %d/%d", sample + 1, count)
        null, diagnostics = randomize_copy(network, config, make_rng(seed))
        yield sample, null, diagnostics

"""Adaptive connectivity-preserving randomization with backup and rollback.

To rearrange a network while keeping every node's degree, pairs of edges
are repeatedly picked and their end nodes switched. One round is L accepted
switches, where L is the number of edges.

The network must stay connected. A full connectivity check is expensive,
so it runs once per round; each individual switch is only guarded by a
bounded frontier probe from both swapped endpoints (a component that breaks
off in one switch is generally small). If the full check still finds the
network disconnected, the round's backup is restored, the probe bound is
raised, and the round is redone. After a clean round the bound decays, so
the cheap probe settles at the smallest size that rarely lets a
disconnection through.

Starting from a network with strong community structure, 10 rounds are
usually enough to wash the structure out and 100 are plenty; 15 is a good
starting limit.
"""

import logging
from dataclasses import replace

import numpy as np

from netrewire.config.experiment import SwapConfig
from netrewire.graph.network import Network
from netrewire.randomize.swapper import switch_link_pair_ends
from netrewire.randomize.types import RandomizeResult

log = logging.getLogger(__name__)


def validate_for_randomize(network: Network, limit: int) -> list[str]:
    """Check randomize() preconditions.

    Returns:
        List of error strings (empty = network can be randomized).
    """
    errors: list[str] = []
    n = network.size()

    if network.number_of_edges() == 0:
        errors.append("Network has no edges")

    isolated = np.flatnonzero(network.degrees() == 0)
    if isolated.size:
        errors.append(
            f"{isolated.size} node(s) have degree 0 (first: {int(isolated[0])})"
        )

    if not errors and not network.is_connected():
        errors.append("Network is not connected")

    if not 0 < limit <= n:
        errors.append(f"limit must be in [1, {n}], got {limit}")

    return errors


def randomize(
    network: Network,
    rng: np.random.Generator,
    rounds: int,
    limit: int | None = None,
    swap_config: SwapConfig | None = None,
) -> RandomizeResult:
    """Mix the edges of a connected network in place, keeping degrees and connectivity.

    Args:
        network: Connected network with every node of degree >= 1 (mutated).
        rng: numpy random Generator; the only source of randomness.
        rounds: Number of rounds, each of L accepted switches.
        limit: Initial frontier probe bound; overrides swap_config.limit.
        swap_config: Limit tuning and attempt bound. Defaults to SwapConfig().

    Returns:
        RandomizeResult with per-round tries per switch and the final limit.

    Raises:
        ValueError: If the network or limit fails validate_for_randomize().
        SwapStallError: If a single switch exceeds swap_config.attempt_bound()
            draws.
    """
    cfg = swap_config if swap_config is not None else SwapConfig()
    if limit is not None:
        cfg = replace(cfg, limit=limit)
    if rounds < 0:
        raise ValueError(f"rounds must be >= 0, got {rounds}")

    errors = validate_for_randomize(network, cfg.limit)
    if errors:
        raise ValueError(
            f"Cannot randomize network: {'; '.join(errors)}"
        )

    net_size = network.size()
    num_links = network.number_of_edges()
    max_attempts = cfg.attempt_bound(num_links)
    limit = cfg.limit
    disconnection_found = False
    rollbacks = 0
    tries_per_switch: list[float] = []

    log.info(
        "Randomizing network (n=%d, edges=%d) for %d rounds, "
        "keeping the degree sequence and connectivity",
        net_size,
        num_links,
        rounds,
    )

    for round_idx in range(rounds):
        backup = network.copy()

        while True:
            tries = 0
            for _ in range(num_links):
                tries += switch_link_pair_ends(
                    network,
                    rng,
                    net_size,
                    limit,
                    max_attempts,
                    cfg.probe_by_layer,
                )

            if not network.is_connected():
                log.warning(
                    "Disconnected, using backup. %d/%d Limit was: %d",
                    round_idx + 1,
                    rounds,
                    limit,
                )
                network.restore(backup)
                # At n - 1 node steps the probe is exact; growing further
                # would reject every swap.
                limit = max(limit, min(limit + cfg.limit_step, net_size - 1))
                disconnection_found = True
                rollbacks += 1
                continue

            log.info(
                "Net OK %d/%d Limit was: %d (%.2f tries per switch)",
                round_idx + 1,
                rounds,
                limit,
                tries / num_links,
            )
            tries_per_switch.append(tries / num_links)
            break

        if disconnection_found:
            if rng.random() < cfg.limit_decrease_prob and limit > cfg.min_limit:
                limit = max(limit - cfg.limit_decay, cfg.min_limit)
        elif limit > cfg.min_limit:
            limit = max(limit - cfg.limit_decay, cfg.min_limit)

    log.info("Randomization finished (final limit %d)", limit)

    return RandomizeResult(
        tries_per_switch=tries_per_switch,
        final_limit=limit,
        rollbacks=rollbacks,
        disconnection_found=disconnection_found,
        accepted_swaps=rounds * num_links,
    )

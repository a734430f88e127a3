"""Randomizer configuration system with frozen, hashable, serializable dataclasses."""

from netrewire.config.experiment import (
    METHODS,
    MIN_ATTEMPTS,
    RandomizerConfig,
    SwapConfig,
)
from netrewire.config.defaults import DEFAULT_CONFIG
from netrewire.config.hashing import config_hash, network_hash, null_config_hash
from netrewire.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
    load_config,
    save_config,
)

__all__ = [
    "METHODS",
    "MIN_ATTEMPTS",
    "RandomizerConfig",
    "SwapConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "network_hash",
    "null_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
    "load_config",
    "save_config",
]

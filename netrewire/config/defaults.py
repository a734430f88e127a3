"""Default configuration — single source of truth for randomizer parameters."""

from netrewire.config.experiment import RandomizerConfig

# rounds=10, limit=15, limit_step=5, limit_decrease_prob=0.1, seed=42.
DEFAULT_CONFIG = RandomizerConfig()

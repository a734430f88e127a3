"""Randomizer configuration dataclasses — all frozen and slotted for immutability."""

from dataclasses import dataclass, field

METHODS: tuple[str, ...] = ("connected", "simple")

# Floor for the derived per-swap attempt bound on small networks.
MIN_ATTEMPTS = 10_000


@dataclass(frozen=True, slots=True)
class SwapConfig:
    """Adaptive frontier-probe tuning for the connectivity-preserving swapper."""

    limit: int = 15  # initial probe bound (steps)
    limit_step: int = 5  # growth after a rollback
    limit_decrease_prob: float = 0.1  # decay chance once a disconnection was seen
    limit_decay: int = 1  # decrement applied on a clean round
    min_limit: int = 1
    max_attempts: int | None = None  # draws per accepted swap; None = attempt_bound()
    attempts_per_link: int = 100  # scales the derived bound with the edge count
    probe_by_layer: bool = False  # probe step = one BFS layer instead of one node

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")
        if self.min_limit < 1:
            raise ValueError(f"min_limit must be >= 1, got {self.min_limit}")
        if self.limit_step < 0 or self.limit_decay < 0:
            raise ValueError(
                f"limit_step ({self.limit_step}) and limit_decay "
                f"({self.limit_decay}) must be non-negative"
            )
        if not 0.0 <= self.limit_decrease_prob <= 1.0:
            raise ValueError(
                f"limit_decrease_prob must be in [0, 1], "
                f"got {self.limit_decrease_prob}"
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(
                f"max_attempts must be >= 1 or None, got {self.max_attempts}"
            )
        if self.attempts_per_link < 1:
            raise ValueError(
                f"attempts_per_link must be >= 1, got {self.attempts_per_link}"
            )

    def attempt_bound(self, num_links: int) -> int:
        """Draws allowed per accepted swap on a network with `num_links` edges."""
        if self.max_attempts is not None:
            return self.max_attempts
        return max(MIN_ATTEMPTS, self.attempts_per_link * num_links)


@dataclass(frozen=True, slots=True)
class RandomizerConfig:
    """Top-level randomization run configuration.

    `method` selects between the connectivity-preserving randomizer
    ("connected") and the plain degree-preserving Markov chain ("simple").
    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations early.
    """

    swap: SwapConfig = field(default_factory=SwapConfig)
    method: str = "connected"
    rounds: int = 10  # 10 adequate, 100 plentiful
    repeats_per_link: int = 10  # simple sampler: attempts per edge
    n_samples: int = 1
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(
                f"method must be one of {METHODS}, got {self.method!r}"
            )
        if self.rounds < 0:
            raise ValueError(f"rounds must be >= 0, got {self.rounds}")
        if self.repeats_per_link < 0:
            raise ValueError(
                f"repeats_per_link must be >= 0, got {self.repeats_per_link}"
            )
        if self.n_samples < 1:
            raise ValueError(f"n_samples must be >= 1, got {self.n_samples}")

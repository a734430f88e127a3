"""Result containers and errors for network randomization."""

from dataclasses import dataclass, field


class RandomizationError(Exception):
    """Base class for failures that abort a randomization run."""


class SwapStallError(RandomizationError):
    """Raised when no acceptable swap is found within the attempt bound.

    Happens on networks with very few legal, connectivity-safe swaps (for
    example a star, where almost every candidate isolates a leaf).
    """


@dataclass(frozen=True, slots=True)
class RandomizeResult:
    """Diagnostics of one adaptive randomize() call.

    tries_per_switch[k] is the average number of attempts per accepted swap
    in the batch that completed round k (rolled-back batches are not
    recorded).
    """

    tries_per_switch: list[float] = field(default_factory=list)
    final_limit: int = 1
    rollbacks: int = 0
    disconnection_found: bool = False
    accepted_swaps: int = 0


@dataclass(frozen=True, slots=True)
class SimpleSwapResult:
    """Diagnostics of one conf_model_simple() call."""

    attempts: int
    accepted: int
    num_links: int

    @property
    def acceptance_rate(self) -> float:
        return self.accepted / self.attempts if self.attempts else 0.0

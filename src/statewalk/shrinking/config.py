"""Shrink configuration for walk minimization.

Provides a single frozen dataclass holding the limits of the greedy
minimize() driver.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from statewalk.constants import DEFAULT_MAX_CANDIDATES, DEFAULT_MAX_SHRINK_ROUNDS

__all__ = ["ShrinkConfig"]


@dataclass(frozen=True, slots=True)
class ShrinkConfig:
    """Immutable limits for minimize().

    Constructing ``ShrinkConfig()`` with no arguments produces a usable
    configuration.

    Attributes:
        max_rounds: Maximum number of accepted shrinks (default: 10000).
        max_candidates_per_round: Maximum candidates tested before a round
            gives up and the current walk is returned (default: 10000).

    Example:
        >>> config = ShrinkConfig(max_rounds=50)
        >>> config.max_candidates_per_round
        10000
    """

    max_rounds: int = DEFAULT_MAX_SHRINK_ROUNDS
    max_candidates_per_round: int = DEFAULT_MAX_CANDIDATES

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_rounds is negative or
                max_candidates_per_round is not positive.
        """
        if self.max_rounds < 0:
            msg = "max_rounds must be non-negative"
            raise ValueError(msg)
        if self.max_candidates_per_round <= 0:
            msg = "max_candidates_per_round must be positive"
            raise ValueError(msg)

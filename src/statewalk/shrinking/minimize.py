"""Greedy walk minimization.

Drives a shrinker the way a property-testing framework walks its shrink
tree: take the first candidate that still fails, then shrink that one,
until no candidate fails any more.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from itertools import islice

from statewalk.machine import Walk

from .config import ShrinkConfig

__all__ = ["minimize"]

logger = logging.getLogger(__name__)


def minimize(
    walk: Walk,
    shrinker: Callable[[Walk], Iterable[Walk]],
    still_fails: Callable[[Walk], bool],
    config: ShrinkConfig | None = None,
) -> Walk:
    """Return the smallest failing walk reachable by greedy shrinking.

    ``walk`` itself is assumed to fail; it is never re-tested.

    Args:
        walk: A walk that made the property fail
        shrinker: Produces candidate walks for a walk (lazily)
        still_fails: Re-runs the property; True if the candidate still fails
        config: Limits for the search (default: ShrinkConfig())

    Returns:
        The last accepted candidate, or ``walk`` if no candidate failed.

    Example:
        >>> fuzzer = build_walk_fuzzer(machine)
        >>> smallest = minimize(
        ...     failing_walk,
        ...     fuzzer.shrink,
        ...     lambda w: not prop(fuzzer.messages(w)),
        ... )
    """
    if config is None:
        config = ShrinkConfig()

    current = tuple(walk)
    for round_number in range(config.max_rounds):
        candidates = islice(shrinker(current), config.max_candidates_per_round)
        accepted = next((c for c in candidates if still_fails(c)), None)
        if accepted is None:
            logger.debug(
                "Shrinking stopped after %d round(s) at length %d",
                round_number,
                len(current),
            )
            return current
        logger.debug("Accepted shrink: %d -> %d transition(s)", len(current), len(accepted))
        current = tuple(accepted)

    logger.debug("Shrinking hit max_rounds=%d at length %d", config.max_rounds, len(current))
    return current

"""Random walk generation.

A walk is produced one weighted choice at a time: from the current state,
pick one of its declared steps; an end step stops the walk, a transition
step is recorded and followed.

No length cap is applied. A machine whose weights make ending unlikely
can produce very long walks; choosing weights that make termination
practically certain is the caller's responsibility.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from statewalk.machine import StateMachine, Step, Transition, Walk

from .choice import WeightedChooser

__all__ = ["generate", "step_options"]

logger = logging.getLogger(__name__)


def step_options(steps: tuple[Step, ...]) -> list[tuple[float, Step]]:
    """Build the weighted option list for one state's steps.

    End steps are listed first. The order does not change the distribution,
    but choosers that shrink towards their first option (DrawChooser) then
    shrink towards stopping early.

    Args:
        steps: The steps sharing one source state

    Returns:
        ``(probability, step)`` pairs, end steps first
    """
    ends = [(step.probability, step) for step in steps if step.is_end]
    moves = [(step.probability, step) for step in steps if not step.is_end]
    return ends + moves


def generate(machine: StateMachine, start: Hashable, chooser: WeightedChooser) -> Walk:
    """Generate one random walk through ``machine`` from ``start``.

    Args:
        machine: State machine to walk (never mutated)
        start: State the walk begins in
        chooser: Source of weighted random choices

    Returns:
        Transitions in the order they were taken. Empty if ``start`` ends
        immediately or declares no steps.

    Example:
        >>> m = StateMachine.from_parts(end("start"))
        >>> generate(m, "start", RandomChooser(seed=1))
        ()
    """
    state = start
    taken: list[Transition] = []
    while True:
        steps = machine.steps_from(state)
        if not steps:
            break
        chosen: Step = chooser.choose(step_options(steps))
        if chosen.transition is None:
            break
        taken.append(chosen.transition)
        state = chosen.transition.to

    logger.debug("Generated walk of %d transition(s) ending in %r", len(taken), state)
    return tuple(taken)

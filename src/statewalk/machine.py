"""State machine declarations.

A machine is declared as a flat list of steps. Each step is one outgoing
possibility of a state: either a weighted transition to another state, or
a weighted decision to stop there. The flat list is normalized once into
an adjacency mapping so that generation and analysis never rescan it.

Example:
    >>> machine = StateMachine.from_parts(
    ...     transition("start", "logging-in", "login"),
    ...     transition("logging-in", "done", "ok"),
    ...     end("done"),
    ... )
    >>> machine.initial_state
    'start'
    >>> [s.transition.to for s in machine.steps_from("start")]
    ['logging-in']

Python 3.13+.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType
from typing import Generic, TypeVar

from statewalk.constants import DEFAULT_WEIGHT
from statewalk.diagnostics import ErrorTemplate, InvalidWeightError

__all__ = [
    "MachinePart",
    "StateMachine",
    "Step",
    "Transition",
    "Walk",
    "end",
    "is_valid_walk",
    "transition",
    "walk_states",
]

S = TypeVar("S", bound=Hashable)
M = TypeVar("M")


@dataclass(frozen=True, slots=True)
class Transition(Generic[S, M]):
    """Directed edge data: destination state and the message that triggers it.

    Attributes:
        to: Destination state
        by: Message carried by the edge (never inspected)
    """

    to: S
    by: M


@dataclass(frozen=True, slots=True)
class Step(Generic[S, M]):
    """One declared outgoing possibility of a state.

    A step with ``transition=None`` declares ``source`` an end state, with
    ``probability`` as the relative weight of stopping there.

    Attributes:
        source: State the step leaves from
        probability: Relative weight among the steps sharing ``source``
        transition: Edge taken, or None for an end step
    """

    source: S
    probability: float
    transition: Transition[S, M] | None = None

    def __post_init__(self) -> None:
        """Validate the step weight.

        Raises:
            InvalidWeightError: If probability is not a positive finite number.
        """
        probability = self.probability
        if (
            isinstance(probability, bool)
            or not isinstance(probability, Real)
            or not math.isfinite(probability)
            or probability <= 0
        ):
            raise InvalidWeightError(ErrorTemplate.invalid_weight(self.source, probability))

    @property
    def is_end(self) -> bool:
        """True if this step stops the walk."""
        return self.transition is None


type Walk = tuple[Transition, ...]
"""Ordered transitions forming one path, interpreted from a start state."""


def transition(
    source: S, to: S, by: M, probability: float = DEFAULT_WEIGHT
) -> Step[S, M]:
    """Declare a weighted transition ``source --by--> to``."""
    return Step(source=source, probability=probability, transition=Transition(to=to, by=by))


def end(source: S, probability: float = DEFAULT_WEIGHT) -> Step[S, object]:
    """Declare ``source`` an end state with the given stopping weight."""
    return Step(source=source, probability=probability, transition=None)


type MachinePart = Step | StateMachine | Iterable[Step | StateMachine]
"""A fragment accepted by StateMachine.from_parts()."""


@dataclass(frozen=True, slots=True)
class StateMachine(Generic[S, M]):
    """Immutable, ordered collection of steps.

    Insertion order has no effect on the graph, except that the source of
    the first step is the machine's initial state. Several steps may share
    a source; together they define that state's out-edges and its chance
    of ending.

    Attributes:
        steps: All declared steps in declaration order
    """

    steps: tuple[Step[S, M], ...] = ()
    _outgoing: Mapping[S, tuple[Step[S, M], ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Build the adjacency mapping once."""
        outgoing: dict[S, list[Step[S, M]]] = {}
        for step in self.steps:
            if not isinstance(step, Step):
                msg = f"StateMachine steps must be Step instances, got {type(step).__name__}"
                raise TypeError(msg)
            outgoing.setdefault(step.source, []).append(step)
        frozen = {state: tuple(steps) for state, steps in outgoing.items()}
        object.__setattr__(self, "steps", tuple(self.steps))
        object.__setattr__(self, "_outgoing", MappingProxyType(frozen))

    @classmethod
    def from_parts(cls, *parts: MachinePart) -> StateMachine:
        """Flatten machine fragments into one machine, preserving order.

        Args:
            *parts: Steps, machines, or (nested) iterables of either

        Returns:
            A single StateMachine holding every step in order

        Example:
            >>> login = [transition("start", "in", "login"), end("in")]
            >>> StateMachine.from_parts(login, end("start")).initial_state
            'start'
        """
        return cls(steps=tuple(_flatten(parts)))

    @property
    def initial_state(self) -> S | None:
        """Source of the first step, or None for an empty machine."""
        return self.steps[0].source if self.steps else None

    @property
    def is_empty(self) -> bool:
        """True if no steps were declared."""
        return not self.steps

    @property
    def outgoing(self) -> Mapping[S, tuple[Step[S, M], ...]]:
        """Read-only mapping from state to its declared steps."""
        return self._outgoing

    def steps_from(self, state: S) -> tuple[Step[S, M], ...]:
        """Return the steps leaving ``state`` (empty if it declares none)."""
        return self._outgoing.get(state, ())

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step[S, M]]:
        return iter(self.steps)


_EXHAUSTED = object()


def _flatten(parts: Iterable[MachinePart]) -> Iterator[Step]:
    # Iterative to keep deeply nested fragment lists off the call stack.
    stack: list[Iterator[MachinePart]] = [iter(parts)]
    while stack:
        part = next(stack[-1], _EXHAUSTED)
        if part is _EXHAUSTED:
            stack.pop()
        elif isinstance(part, Step):
            yield part
        elif isinstance(part, StateMachine):
            yield from part.steps
        elif isinstance(part, Iterable) and not isinstance(part, str | bytes):
            stack.append(iter(part))
        else:
            msg = f"Cannot use {type(part).__name__} as a state machine part"
            raise TypeError(msg)


def walk_states(start: S, walk: Iterable[Transition[S, object]]) -> tuple[S, ...]:
    """Return the states visited by a walk, starting with ``start``.

    Example:
        >>> walk_states("a", (Transition("b", "go"), Transition("c", "go")))
        ('a', 'b', 'c')
    """
    return (start, *(t.to for t in walk))


def is_valid_walk(
    machine: StateMachine[S, object], start: S, walk: Iterable[Transition[S, object]]
) -> bool:
    """Check that a walk is a complete trace of ``machine`` from ``start``.

    Every transition must be declared from the state the walk is in, and
    the walk must stop in an end state or in a state with no steps.
    """
    state = start
    for taken in walk:
        if not any(step.transition == taken for step in machine.steps_from(state)):
            return False
        state = taken.to
    steps = machine.steps_from(state)
    return not steps or any(step.is_end for step in steps)

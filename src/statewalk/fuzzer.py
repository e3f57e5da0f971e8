"""Walk fuzzer: the public entry point.

``build_walk_fuzzer`` validates a machine once and wires generation and
shrinking together. A malformed machine does not raise at build time;
the returned fuzzer is marked invalid and carries a diagnostic, so the
problem is reported where the fuzzer is used, as a configuration error
of that fuzzer rather than as a test failure.

Example:
    >>> fuzzer = build_walk_fuzzer(
    ...     transition("start", "done", "login"),
    ...     end("done"),
    ... )
    >>> fuzzer.is_valid
    True
    >>> fuzzer.draw_messages(RandomChooser(seed=0))
    ['login']
    >>> build_walk_fuzzer().diagnostic.code.name
    'NO_STEPS'

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass

from statewalk.analysis.graph import end_states
from statewalk.core.ordering import format_states
from statewalk.diagnostics import Diagnostic, ErrorTemplate, InvalidMachineError
from statewalk.generation import RandomChooser, WeightedChooser, generate
from statewalk.machine import MachinePart, StateMachine, Transition, Walk
from statewalk.shrinking import ShrinkConfig, minimize, shrink
from statewalk.validation import validate_machine

__all__ = ["WalkFuzzer", "build_walk_fuzzer"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkFuzzer:
    """A validated machine ready to generate and shrink walks.

    Either valid (``diagnostic is None``) or invalid. Every walk operation
    on an invalid fuzzer raises InvalidMachineError carrying the diagnostic
    recorded at build time.

    Attributes:
        machine: The flattened state machine
        start: Initial state (source of the first step; None if empty)
        end_set: States that declare an end step
        diagnostic: Why the fuzzer is invalid, or None
        warnings: Non-fatal validation findings
    """

    machine: StateMachine
    start: Hashable | None
    end_set: frozenset[Hashable]
    diagnostic: Diagnostic | None = None
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if walks can be generated."""
        return self.diagnostic is None

    def _require_valid(self) -> None:
        if self.diagnostic is not None:
            raise InvalidMachineError(ErrorTemplate.invalid_fuzzer_used(self.diagnostic))

    def draw(self, chooser: WeightedChooser) -> Walk:
        """Generate one walk from the initial state.

        Raises:
            InvalidMachineError: If the fuzzer is invalid.
        """
        self._require_valid()
        return generate(self.machine, self.start, chooser)

    def draw_messages(self, chooser: WeightedChooser) -> list[object]:
        """Generate one walk and return its messages."""
        return self.messages(self.draw(chooser))

    def sample(self, seed: int | None = None) -> list[object]:
        """Generate one message sequence from a seeded RandomChooser."""
        return self.draw_messages(RandomChooser(seed=seed))

    @staticmethod
    def messages(walk: Iterable[Transition]) -> list[object]:
        """Project a walk onto the messages of its transitions, in order."""
        return [taken.by for taken in walk]

    def shrink(self, walk: Iterable[Transition]) -> Iterator[Walk]:
        """Return a lazy stream of smaller walks that remain valid traces.

        Raises:
            InvalidMachineError: If the fuzzer is invalid (raised immediately,
                not on first iteration).
        """
        self._require_valid()
        return shrink(self.end_set, walk, self.start)

    def shrink_messages(self, walk: Iterable[Transition]) -> Iterator[list[object]]:
        """Return the shrink stream projected onto message sequences."""
        return map(self.messages, self.shrink(walk))

    def minimize(
        self,
        walk: Iterable[Transition],
        fails: Callable[[list[object]], bool],
        config: ShrinkConfig | None = None,
    ) -> Walk:
        """Greedily shrink a failing walk.

        Args:
            walk: A walk whose messages made the property fail
            fails: True if a message sequence still makes the property fail
            config: Search limits (default: ShrinkConfig())

        Returns:
            The smallest failing walk found
        """
        self._require_valid()
        return minimize(
            tuple(walk),
            self.shrink,
            lambda candidate: fails(self.messages(candidate)),
            config,
        )


def build_walk_fuzzer(*parts: MachinePart) -> WalkFuzzer:
    """Build a walk fuzzer from machine fragments.

    Fragments are flattened in order; the source of the first step is the
    initial state. Machines with no steps or with dead-end states produce
    an invalid fuzzer instead of raising.

    Args:
        *parts: Steps, machines, or iterables of either

    Returns:
        WalkFuzzer, valid or carrying a diagnostic
    """
    machine = StateMachine.from_parts(*parts)
    result = validate_machine(machine)

    if not result.is_valid:
        diagnostic = result.errors[0]
        logger.warning("Invalid walk fuzzer: %s", diagnostic.format_error())
        return WalkFuzzer(
            machine=machine,
            start=machine.initial_state,
            end_set=end_states(machine),
            diagnostic=diagnostic,
            warnings=result.warnings,
        )

    for warning in result.warnings:
        logger.info("Walk fuzzer warning: %s", warning.message)

    logger.debug(
        "Built walk fuzzer: %d step(s), %d state(s) with steps, start %s",
        len(machine),
        len(machine.outgoing),
        format_states((machine.initial_state,)),
    )
    return WalkFuzzer(
        machine=machine,
        start=machine.initial_state,
        end_set=end_states(machine),
        warnings=result.warnings,
    )

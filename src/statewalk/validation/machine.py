"""State machine validation.

Provides standalone validation for machine definitions without building a
fuzzer. Useful in a test module's setup or a linter that checks machine
declarations.

Architecture:
    - validate_machine(): Main entry point, orchestrates validation passes
    - _check_dead_ends(): Pass 1 - States that can never reach an end state
    - _check_unreachable(): Pass 2 - States no walk from the start visits

Python 3.13+.
"""

import logging

from statewalk.analysis.graph import all_states, dead_ends, reachable_from
from statewalk.diagnostics import Diagnostic, ErrorTemplate, ValidationResult
from statewalk.machine import MachinePart, StateMachine

__all__ = ["validate_machine"]

logger = logging.getLogger(__name__)


def _check_dead_ends(machine: StateMachine) -> list[Diagnostic]:
    stuck = dead_ends(machine)
    if stuck:
        return [ErrorTemplate.dead_end_states(stuck)]
    return []


def _check_unreachable(machine: StateMachine) -> list[Diagnostic]:
    start = machine.initial_state
    declared = all_states(machine) | frozenset(machine.outgoing)
    unreachable = declared - reachable_from(start, machine)
    if unreachable:
        return [ErrorTemplate.unreachable_states(unreachable, start)]
    return []


def validate_machine(*parts: MachinePart) -> ValidationResult:
    """Validate a state machine definition.

    Args:
        *parts: Steps, machines, or iterables of either; flattened in order

    Returns:
        ValidationResult with errors (empty machine, dead ends) and
        warnings (states unreachable from the initial state)

    Example:
        >>> from statewalk import end, transition
        >>> result = validate_machine(transition("start", "stuck", "go"))
        >>> result.is_valid
        False
        >>> result.errors[0].code.name
        'DEAD_END_STATES'
    """
    machine = StateMachine.from_parts(*parts)

    if machine.is_empty:
        logger.debug("Validated machine: empty")
        return ValidationResult.invalid(errors=(ErrorTemplate.no_steps(),))

    errors = _check_dead_ends(machine)
    warnings = _check_unreachable(machine)

    logger.debug(
        "Validated machine: %d step(s), %d error(s), %d warning(s)",
        len(machine),
        len(errors),
        len(warnings),
    )

    if errors:
        return ValidationResult.invalid(errors=tuple(errors), warnings=tuple(warnings))
    return ValidationResult.valid(warnings=tuple(warnings))

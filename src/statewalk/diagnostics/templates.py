"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Hashable, Iterable

from statewalk.constants import MAX_DIAGNOSTIC_STATES
from statewalk.core.ordering import format_states, ordered_states

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def no_steps() -> Diagnostic:
        """State machine has no steps at all.

        Returns:
            Diagnostic for NO_STEPS
        """
        return Diagnostic(
            code=DiagnosticCode.NO_STEPS,
            message="No steps provided: the state machine is empty",
            hint="Declare at least one transition() or end() step",
        )

    @staticmethod
    def dead_end_states(states: Iterable[Hashable]) -> Diagnostic:
        """States that can never reach an end state.

        Args:
            states: The dead-end states (any order)

        Returns:
            Diagnostic for DEAD_END_STATES listing the states
        """
        listed = ordered_states(states)
        rendered = format_states(listed, limit=MAX_DIAGNOSTIC_STATES)
        msg = f"{len(listed)} state(s) cannot reach an end state: {rendered}"
        return Diagnostic(
            code=DiagnosticCode.DEAD_END_STATES,
            message=msg,
            hint="Add an end() step to these states or a transition towards an end state",
            states=listed,
        )

    @staticmethod
    def invalid_weight(state: Hashable, probability: object) -> Diagnostic:
        """Step declared with a weight that is not a positive finite number.

        Args:
            state: Source state of the offending step
            probability: The rejected weight

        Returns:
            Diagnostic for INVALID_WEIGHT
        """
        msg = (
            f"Step from {format_states((state,))} has invalid probability "
            f"{probability!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_WEIGHT,
            message=msg,
            hint="Probabilities are relative weights and must be positive finite numbers",
            states=(state,),
        )

    @staticmethod
    def invalid_fuzzer_used(reason: Diagnostic) -> Diagnostic:
        """An invalid fuzzer was asked for a walk.

        Args:
            reason: The diagnostic recorded when the fuzzer was built

        Returns:
            Diagnostic for INVALID_FUZZER_USED wrapping the original message
        """
        msg = f"Cannot use an invalid walk fuzzer: {reason.message}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_FUZZER_USED,
            message=msg,
            hint=reason.hint,
            states=reason.states,
        )

    @staticmethod
    def empty_choice() -> Diagnostic:
        """Weighted choice requested over no options.

        Returns:
            Diagnostic for EMPTY_CHOICE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CHOICE,
            message="Cannot make a weighted choice among zero options",
            hint="Only call choose() for states that have outgoing steps",
        )

    @staticmethod
    def unreachable_states(states: Iterable[Hashable], start: Hashable) -> Diagnostic:
        """Declared states that no walk from the start state can visit.

        Args:
            states: The unreachable states (any order)
            start: The machine's initial state

        Returns:
            Warning diagnostic for UNREACHABLE_STATES
        """
        listed = ordered_states(states)
        rendered = format_states(listed, limit=MAX_DIAGNOSTIC_STATES)
        msg = (
            f"{len(listed)} state(s) are never reached from "
            f"{format_states((start,))}: {rendered}"
        )
        return Diagnostic(
            code=DiagnosticCode.UNREACHABLE_STATES,
            message=msg,
            hint="Walks never visit these states; check the order of steps or add transitions",
            states=listed,
            severity="warning",
        )

"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for state machine validation
and walk generation.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Machine errors (invalid machine definitions)
        2000-2999: Usage errors (invalid use of a fuzzer or chooser)
        3000-3999: Machine warnings (legal but suspicious definitions)
    """

    # Machine errors (1000-1999)
    NO_STEPS = 1001
    DEAD_END_STATES = 1002
    INVALID_WEIGHT = 1003

    # Usage errors (2000-2999)
    INVALID_FUZZER_USED = 2001
    EMPTY_CHOICE = 2002

    # Machine warnings (3000-3999)
    UNREACHABLE_STATES = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools. Diagnostics
    are values: an invalid fuzzer carries one instead of raising at build
    time.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        states: States the diagnostic refers to, in listing order
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    states: tuple[Hashable, ...] = ()
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DEAD_END_STATES]: 1 state(s) cannot reach an end state: 'stuck'
              = help: Add an end() step to these states or a transition towards an end state

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

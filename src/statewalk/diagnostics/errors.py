"""statewalk exception hierarchy with structured diagnostics.

All exceptions may store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class StateWalkError(Exception):
    """Base exception for all statewalk errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StateWalkError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidMachineError(StateWalkError):
    """An invalid fuzzer was asked to produce or shrink a walk.

    Building a fuzzer never raises for a malformed machine; the problem is
    recorded on the fuzzer and this error surfaces it on first use.
    """


class InvalidWeightError(StateWalkError, ValueError):
    """Step probability is zero, negative, or not a finite number.

    Raised at step construction time. Weights are relative, so any
    positive finite value is accepted.
    """

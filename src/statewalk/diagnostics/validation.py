"""Unified validation result for state machine validation.

Consolidates feedback from the validation passes:
- Shape errors: empty machine, dead-end states
- Reachability warnings: states no walk can visit

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Unified validation result for a state machine.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        errors: Diagnostics that make the machine unusable
        warnings: Informational diagnostics

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result = ValidationResult.invalid(errors=(ErrorTemplate.no_steps(),))
        >>> result.error_count
        1
    """

    errors: tuple[Diagnostic, ...]
    warnings: tuple[Diagnostic, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @property
    def first_error(self) -> Diagnostic | None:
        """Return the first error, or None when the machine is valid."""
        return self.errors[0] if self.errors else None

    @staticmethod
    def valid(warnings: tuple[Diagnostic, ...] = ()) -> "ValidationResult":
        """Create a valid result, optionally carrying warnings."""
        return ValidationResult(errors=(), warnings=warnings)

    @staticmethod
    def invalid(
        errors: tuple[Diagnostic, ...],
        warnings: tuple[Diagnostic, ...] = (),
    ) -> "ValidationResult":
        """Create an invalid result.

        Args:
            errors: Tuple of error diagnostics (must not be empty)
            warnings: Tuple of warning diagnostics (default: empty)

        Returns:
            ValidationResult with provided errors/warnings

        Raises:
            ValueError: If errors is empty
        """
        if not errors:
            msg = "invalid() requires at least one error"
            raise ValueError(msg)
        return ValidationResult(errors=errors, warnings=warnings)

    def format(self, *, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with a summary line followed by details.
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        result = self if include_warnings else ValidationResult(self.errors, ())
        return DiagnosticFormatter().format_validation_result(result)

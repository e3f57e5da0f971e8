"""Diagnostic system for statewalk errors.

Provides structured error diagnostics with codes, hints and state listings.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import InvalidMachineError, InvalidWeightError, StateWalkError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidMachineError",
    "InvalidWeightError",
    "OutputFormat",
    "StateWalkError",
    "ValidationResult",
]

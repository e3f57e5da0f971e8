"""Validation utilities for state machine definitions.

Separated from the fuzzer so machine definitions can be checked on their
own.

Python 3.13+.
"""

from statewalk.validation.machine import (
    validate_machine,
)

__all__ = [
    "validate_machine",
]

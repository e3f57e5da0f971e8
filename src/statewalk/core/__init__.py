"""Core utilities shared across the machine, analysis and diagnostics layers.

Dependency order:

    core <- diagnostics <- machine <- analysis <- generation/shrinking

Exports:
    ordered_states: Deterministic ordering for opaque hashable states
    format_states: Human-readable state listing for diagnostics

Python 3.13+.
"""

from .ordering import format_states, ordered_states

__all__ = ["format_states", "ordered_states"]

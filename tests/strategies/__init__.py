"""Hypothesis strategies for statewalk property-based testing.

Usage:
    from tests.strategies import terminating_machines, random_choosers
    from tests.strategies.machines import STUCK, dead_end_machines

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - terminating_machines, dead_end_machines
"""

from .machines import STUCK, dead_end_machines, random_choosers, terminating_machines

__all__ = [
    "STUCK",
    "dead_end_machines",
    "random_choosers",
    "terminating_machines",
]

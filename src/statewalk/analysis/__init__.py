"""Graph analysis utilities for state machine validation.

Provides reachability algorithms used to detect dead-end states before
any walk is generated.

Python 3.13+.
"""

from .graph import (
    all_states,
    dead_ends,
    end_states,
    reachable_from,
    states_reaching_end,
    states_with_edge_to,
)

__all__ = [
    "all_states",
    "dead_ends",
    "end_states",
    "reachable_from",
    "states_reaching_end",
    "states_with_edge_to",
]

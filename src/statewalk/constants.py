"""Shared constants for statewalk.

Centralized defaults used across the machine, shrinking and diagnostics
packages. Placing constants here avoids circular imports between those
packages.

Constants are grouped by domain:
- Weights: Default relative weight of a declared step
- Shrink limits: Bounds for the greedy minimization driver
- Diagnostic limits: Size of state listings in error messages

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Weights
    "DEFAULT_WEIGHT",
    # Shrink limits
    "DEFAULT_MAX_SHRINK_ROUNDS",
    "DEFAULT_MAX_CANDIDATES",
    # Diagnostic limits
    "MAX_DIAGNOSTIC_STATES",
]

# ============================================================================
# WEIGHTS
# ============================================================================

# Relative weight used by transition() and end() when none is given.
# Weights of the steps leaving one state are compared with each other only;
# they are not required to sum to 1.
DEFAULT_WEIGHT: float = 1.0

# ============================================================================
# SHRINK LIMITS
# ============================================================================

# Maximum number of accepted shrinks applied by minimize().
# Every accepted candidate is strictly shorter than its parent, so a walk of
# length n can never need more than n rounds. The bound only matters for
# walks longer than this value.
DEFAULT_MAX_SHRINK_ROUNDS: int = 10_000

# Maximum number of candidates tested per round before minimize() gives up.
# Cycle removal yields at most two candidates per position plus one
# truncation, so this comfortably covers walks of a few thousand steps.
DEFAULT_MAX_CANDIDATES: int = 10_000

# ============================================================================
# DIAGNOSTIC LIMITS
# ============================================================================

# Maximum number of states spelled out in a diagnostic message.
# Machines generated from large enums can have hundreds of dead ends; the
# remainder is summarised as "... and N more".
MAX_DIAGNOSTIC_STATES: int = 20

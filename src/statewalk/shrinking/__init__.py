"""Walk shrinking.

Exports:
    shrink: Lazy stream of smaller walks (truncation and cycle removal)
    minimize: Greedy driver applying shrink until no candidate fails
    ShrinkConfig: Limits for minimize()

Python 3.13+.
"""

from .config import ShrinkConfig
from .cycles import shrink
from .minimize import minimize

__all__ = ["ShrinkConfig", "minimize", "shrink"]

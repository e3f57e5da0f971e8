"""Walk generation for state machines.

Exports:
    generate: Produce one random walk from a start state
    WeightedChooser: Protocol for the weighted random choice primitive
    RandomChooser: Chooser backed by random.Random
    DrawChooser: Chooser backed by Hypothesis draws

Python 3.13+.
"""

from .choice import DrawChooser, RandomChooser, WeightedChooser
from .walk import generate, step_options

__all__ = [
    "DrawChooser",
    "RandomChooser",
    "WeightedChooser",
    "generate",
    "step_options",
]

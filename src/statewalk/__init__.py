"""statewalk - Random walks through declared state machines for property-based tests.

Declares a finite state machine as weighted steps, generates random walks
that obey the declared transitions, and shrinks failing walks by cutting
them short at end states or splicing out cycles. Every generated and shrunk
walk is a valid trace of the machine.

Public API:
    transition - Declare a weighted transition step
    end - Declare a weighted end step
    StateMachine - Immutable, normalized collection of steps
    build_walk_fuzzer - Validate a machine and build a WalkFuzzer
    WalkFuzzer - Generates, shrinks and minimizes walks
    walks / message_sequences - Hypothesis strategies over a machine
    validate_machine - Standalone machine validation

Exceptions:
    StateWalkError - Base exception class
    InvalidMachineError - An invalid fuzzer was used
    InvalidWeightError - A step was declared with an invalid probability

Submodules:
    statewalk.analysis - Reachability and dead-end detection
    statewalk.generation - Walk generation and weighted choosers
    statewalk.shrinking - Cycle-removing shrinker and minimize()
    statewalk.diagnostics - Diagnostic codes, templates and formatting
"""

from .diagnostics import InvalidMachineError, InvalidWeightError, StateWalkError
from .fuzzer import WalkFuzzer, build_walk_fuzzer
from .machine import StateMachine, Step, Transition, Walk, end, transition
from .strategies import message_sequences, walks
from .validation import validate_machine

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    # importlib.metadata is stdlib on every supported Python (3.13+)
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("statewalk")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidMachineError",
    "InvalidWeightError",
    "StateMachine",
    "StateWalkError",
    "Step",
    "Transition",
    "Walk",
    "WalkFuzzer",
    "__version__",
    "build_walk_fuzzer",
    "end",
    "message_sequences",
    "transition",
    "validate_machine",
    "walks",
]

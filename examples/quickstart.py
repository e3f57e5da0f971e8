"""Quickstart example for statewalk.

This example declares a small login flow as a weighted state machine,
draws random walks through it, and shrinks a failing walk.

Note: Examples use seeded choosers so the printed walks are reproducible.
"""

from enum import Enum

from statewalk import InvalidMachineError, build_walk_fuzzer, end, transition, validate_machine
from statewalk.generation import RandomChooser


class State(Enum):
    START = "start"
    LOGGING_IN = "logging_in"
    DONE = "done"


login = [
    transition(State.START, State.LOGGING_IN, "submit"),
    transition(State.LOGGING_IN, State.LOGGING_IN, "retry", 0.8),
    transition(State.LOGGING_IN, State.START, "cancel", 0.1),
    transition(State.LOGGING_IN, State.DONE, "success", 0.1),
    transition(State.DONE, State.START, "logout", 0.1),
    end(State.DONE, 0.9),
]

# Example 1: Drawing walks
print("=" * 50)
print("Example 1: Drawing Walks")
print("=" * 50)

fuzzer = build_walk_fuzzer(login)
for seed in range(3):
    print(fuzzer.sample(seed=seed))
# Output: message lists such as ['submit', 'retry', 'retry', 'success']

# Example 2: Relative weights
print("\n" + "=" * 50)
print("Example 2: Relative Weights")
print("=" * 50)

# Weights only need to be positive; 8:1:1 behaves like 0.8:0.1:0.1.
heavy = build_walk_fuzzer(
    transition("start", "start", "again", 8),
    transition("start", "done", "finish", 1),
    end("start", 1),
    end("done"),
)
lengths = [len(heavy.sample(seed=seed)) for seed in range(1000)]
print(f"Average walk length: {sum(lengths) / len(lengths):.1f}")
# Output: roughly 4.5 transitions per walk

# Example 3: Shrinking a failing walk
print("\n" + "=" * 50)
print("Example 3: Shrinking a Failing Walk")
print("=" * 50)


def session_ok(messages: list[object]) -> bool:
    """A buggy check: fails whenever a retry happened."""
    return "retry" not in messages


walk = next(
    w
    for w in (fuzzer.draw(RandomChooser(seed=seed)) for seed in range(1000))
    if not session_ok(fuzzer.messages(w))
)
print(f"Failing walk:   {fuzzer.messages(walk)}")
smallest = fuzzer.minimize(walk, lambda messages: not session_ok(messages))
print(f"Minimized walk: {fuzzer.messages(smallest)}")
# Output: Minimized walk: ['submit', 'retry', 'success']

# Example 4: Invalid machines
print("\n" + "=" * 50)
print("Example 4: Invalid Machines")
print("=" * 50)

result = validate_machine(transition("start", "stuck", "go"))
print(result.format())
# Output: Validation failed: 1 error(s), 0 warning(s)

broken = build_walk_fuzzer(transition("start", "stuck", "go"))
print(f"is_valid: {broken.is_valid}")
try:
    broken.sample(seed=0)
except InvalidMachineError as e:
    print(e)
# Output: error[INVALID_FUZZER_USED]: Cannot use an invalid walk fuzzer: ...

"""Property-Based Testing Examples for statewalk.

This example demonstrates how to drive Hypothesis property tests with
walks through a declared state machine. Each walk is a sequence of
messages an application could receive; Hypothesis generates them from
the declared weights and shrinks failing ones.

Learn more about property-based testing:
- Hypothesis documentation: https://hypothesis.readthedocs.io/

Run this example:
    python examples/property_based_testing.py

Python 3.13+.
"""

# pylint: disable=no-value-for-parameter
# Justification: Hypothesis's @given decorator injects test parameters at runtime.

from __future__ import annotations

from enum import Enum

from hypothesis import find, given, settings

from statewalk import build_walk_fuzzer, end, message_sequences, transition, walks
from statewalk.generation import RandomChooser


class State(Enum):
    START = "start"
    LOGGING_IN = "logging_in"
    DONE = "done"


class Session:
    """Toy system under test: counts logins and failed attempts."""

    def __init__(self) -> None:
        self.logged_in = False
        self.attempts = 0
        self.logins = 0

    def handle(self, message: str) -> None:
        match message:
            case "submit":
                self.attempts += 1
            case "retry":
                self.attempts += 1
            case "cancel":
                self.attempts = 0
            case "success":
                self.logged_in = True
                self.logins += 1
                self.attempts = 0
            case "logout":
                self.logged_in = False


LOGIN = [
    transition(State.START, State.LOGGING_IN, "submit"),
    transition(State.LOGGING_IN, State.LOGGING_IN, "retry", 0.8),
    transition(State.LOGGING_IN, State.START, "cancel", 0.1),
    transition(State.LOGGING_IN, State.DONE, "success", 0.1),
    transition(State.DONE, State.START, "logout", 0.1),
    end(State.DONE, 0.9),
]


# ==============================================================================
# Example 1: Invariants over message sequences
# ==============================================================================


def example_1_session_invariants() -> None:
    """Property: every generated session ends logged in with no pending attempts."""
    print("=" * 70)
    print("Example 1: Session Invariants")
    print("=" * 70)

    @given(messages=message_sequences(LOGIN))
    @settings(max_examples=100)
    def test_session_ends_logged_in(messages: list[str]) -> None:
        session = Session()
        for message in messages:
            session.handle(message)
        # Every walk stops in Done, which is only entered through success.
        assert session.logged_in
        assert session.attempts == 0

    test_session_ends_logged_in()
    print("Property verified: sessions end logged in\n")


# ==============================================================================
# Example 2: Walks keep their states
# ==============================================================================


def example_2_walk_states() -> None:
    """Property: walks carry destination states alongside messages."""
    print("=" * 70)
    print("Example 2: Walks With States")
    print("=" * 70)

    @given(walk=walks(LOGIN))
    @settings(max_examples=100)
    def test_last_state_is_done(walk) -> None:  # type: ignore[no-untyped-def]
        assert walk[-1].to is State.DONE

    test_last_state_is_done()
    print("Property verified: walks end in Done\n")


# ==============================================================================
# Example 3: Hypothesis shrinks walks
# ==============================================================================


def example_3_hypothesis_shrinking() -> None:
    """Find the smallest session with two logins."""
    print("=" * 70)
    print("Example 3: Minimal Failing Session")
    print("=" * 70)

    def two_logins(messages: list[str]) -> bool:
        session = Session()
        for message in messages:
            session.handle(message)
        return session.logins >= 2

    smallest = find(message_sequences(LOGIN), two_logins, settings=settings(database=None))
    print(f"Smallest session with two logins: {smallest}\n")
    # Output: ['submit', 'success', 'logout', 'submit', 'success']


# ==============================================================================
# Example 4: Shrinking without Hypothesis
# ==============================================================================


def example_4_cycle_removal() -> None:
    """Show the candidates the cycle-removing shrinker offers."""
    print("=" * 70)
    print("Example 4: Cycle-Removing Shrinker")
    print("=" * 70)

    fuzzer = build_walk_fuzzer(LOGIN)
    long_walk = next(
        w for w in (fuzzer.draw(RandomChooser(seed=seed)) for seed in range(1000)) if len(w) >= 6
    )
    print(f"Walk: {fuzzer.messages(long_walk)}")
    for candidate in fuzzer.shrink_messages(long_walk):
        print(f"  candidate: {candidate}")
    print()


# ==============================================================================
# Main - Run All Examples
# ==============================================================================


def main() -> None:
    """Run all property-based testing examples."""
    print("\n" + "=" * 70)
    print("PROPERTY-BASED TESTING EXAMPLES FOR STATEWALK")
    print("=" * 70)
    print()

    example_1_session_invariants()
    example_2_walk_states()
    example_3_hypothesis_shrinking()
    example_4_cycle_removal()

    print("=" * 70)
    print("ALL PROPERTY-BASED TESTS COMPLETED")
    print("=" * 70)
    print()
    print("Key Takeaways:")
    print("1. Declare the flows your system supports as weighted steps")
    print("2. Every generated walk follows declared transitions to an end state")
    print("3. Failing walks shrink by cutting loops, so they stay valid flows")
    print()


if __name__ == "__main__":
    main()

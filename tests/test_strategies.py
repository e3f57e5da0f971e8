"""Tests for the Hypothesis strategies walks() and message_sequences()."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, event, find, given, settings
from hypothesis import strategies as st
from hypothesis.errors import InvalidArgument

from statewalk import StateMachine, build_walk_fuzzer, end, message_sequences, transition, walks
from statewalk.analysis.graph import end_states
from statewalk.machine import Walk, is_valid_walk, walk_states
from statewalk.strategies import _length_bucket
from tests.helpers.login import LOGIN_MACHINE, LOGIN_STEPS, SUBMIT, SUCCESS, Msg, State
from tests.strategies import terminating_machines

LOGIN_FUZZER = build_walk_fuzzer(LOGIN_STEPS)

_SUPPRESSED = [HealthCheck.too_slow, HealthCheck.data_too_large]

# ============================================================================
# UNIT TESTS
# ============================================================================


class TestLengthBucket:
    """Tests for walk length event buckets."""

    @pytest.mark.parametrize(
        ("length", "bucket"),
        [(0, "0"), (1, "1"), (2, "2-5"), (5, "2-5"), (6, "6-20"), (20, "6-20"), (21, "21+")],
    )
    def test_bucket_boundaries(self, length: int, bucket: str) -> None:
        """Lengths fall into fixed buckets."""
        assert _length_bucket(length) == bucket


class TestInvalidStrategies:
    """Invalid machines produce strategies that fail when drawn from."""

    def test_empty_machine_strategy_raises_invalid_argument(self) -> None:
        """The diagnostic is reported as a strategy configuration error."""

        @given(walks())
        def draw_walk(walk: Walk) -> None:
            pass

        with pytest.raises(InvalidArgument, match="NO_STEPS"):
            draw_walk()

    def test_dead_end_strategy_raises_invalid_argument(self) -> None:
        """Dead ends are named in the error."""

        @given(message_sequences(transition("start", "stuck", "go")))
        def draw_messages(messages: list[object]) -> None:
            pass

        with pytest.raises(InvalidArgument, match="cannot reach an end state"):
            draw_messages()

    def test_building_invalid_strategy_does_not_raise(self) -> None:
        """Strategies are built eagerly but fail lazily."""
        strategy = walks(transition("start", "stuck", "go"))
        assert strategy is not None


class TestShrinkingThroughHypothesis:
    """Hypothesis shrinks walks drawn through DrawChooser."""

    def test_find_minimal_walk_with_retry(self) -> None:
        """The smallest walk containing a retry is submit, retry, success."""
        result = find(
            message_sequences(LOGIN_FUZZER),
            lambda messages: Msg.RETRY in messages,
            settings=settings(max_examples=500, database=None, suppress_health_check=_SUPPRESSED),
        )
        assert result == [Msg.SUBMIT, Msg.RETRY, Msg.SUCCESS]

    def test_find_minimal_walk_overall(self) -> None:
        """Any walk shrinks to the direct login."""
        result = find(
            walks(LOGIN_FUZZER),
            lambda _walk: True,
            settings=settings(database=None, suppress_health_check=_SUPPRESSED),
        )
        assert result == (SUBMIT, SUCCESS)


class TestExactWeights:
    """exact_weights=True makes step frequencies follow the declared weights."""

    def test_light_option_stays_rare(self) -> None:
        """A 1:99 choice picks the light step close to 1% of the time."""
        machine = [
            transition("start", "a", "light", 1),
            transition("start", "b", "heavy", 99),
            end("a"),
            end("b"),
        ]
        first_messages: list[object] = []

        @given(message_sequences(*machine, exact_weights=True))
        @settings(max_examples=400, database=None, suppress_health_check=_SUPPRESSED)
        def collect(messages: list[object]) -> None:
            first_messages.append(messages[0])

        collect()

        assert len(first_messages) >= 200
        assert first_messages.count("light") / len(first_messages) < 0.05

    @given(walk=walks(LOGIN_STEPS, exact_weights=True))
    def test_exact_weight_walks_valid(self, walk: Walk) -> None:
        """Walks generated from a drawn Random are complete login traces."""
        assert is_valid_walk(LOGIN_MACHINE, State.START, walk)
        assert walk_states(State.START, walk)[-1] == State.DONE

    def test_exact_weights_invalid_machine_raises(self) -> None:
        """Invalid machines still fail when drawn from."""

        @given(walks(transition("start", "stuck", "go"), exact_weights=True))
        def draw_walk(walk: Walk) -> None:
            pass

        with pytest.raises(InvalidArgument, match="DEAD_END_STATES"):
            draw_walk()


# ============================================================================
# PROPERTY TESTS
# ============================================================================


class TestLoginStrategies:
    """Strategies over the login machine."""

    @given(walk=walks(LOGIN_STEPS))
    def test_login_walks_valid(self, walk: Walk) -> None:
        """Every drawn walk is a complete login trace."""
        assert is_valid_walk(LOGIN_MACHINE, State.START, walk)
        assert walk[0] == SUBMIT
        assert walk_states(State.START, walk)[-1] == State.DONE

    @given(messages=message_sequences(LOGIN_STEPS))
    def test_login_messages_start_with_submit(self, messages: list[object]) -> None:
        """Walks open with submit and reach Done only through success."""
        event(f"message_count={min(len(messages), 10)}")
        assert messages[0] == Msg.SUBMIT
        assert Msg.SUCCESS in messages

    @given(messages=message_sequences(LOGIN_FUZZER))
    def test_strategy_accepts_prebuilt_fuzzer(self, messages: list[object]) -> None:
        """A WalkFuzzer can be passed directly."""
        assert messages[0] == Msg.SUBMIT

    @given(walk=walks(end("start")))
    def test_immediate_end_strategy(self, walk: Walk) -> None:
        """A machine that only ends draws empty walks."""
        assert walk == ()


class TestGeneratedMachineStrategies:
    """Strategies over generated machines."""

    @given(machine=terminating_machines(), data=st.data())
    def test_drawn_walks_valid(self, machine: StateMachine, data: st.DataObject) -> None:
        """Walks drawn through Hypothesis are valid traces ending in an end state."""
        walk = data.draw(walks(machine))
        start = machine.initial_state
        assert is_valid_walk(machine, start, walk)
        assert walk_states(start, walk)[-1] in end_states(machine)

"""Tests for machine module: steps, transitions and StateMachine normalization."""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from statewalk import InvalidWeightError, StateMachine, Step, Transition, end, transition
from statewalk.diagnostics import DiagnosticCode
from statewalk.machine import is_valid_walk, walk_states
from tests.helpers.login import (
    CANCEL,
    LOGIN_MACHINE,
    RETRY,
    SUBMIT,
    SUCCESS,
    State,
)

# ============================================================================
# UNIT TESTS - STEP CONSTRUCTION
# ============================================================================


class TestStepConstruction:
    """Tests for transition() and end() constructors."""

    def test_transition_builds_step_with_edge(self) -> None:
        """transition() carries destination and message."""
        step = transition("a", "b", "go", 0.5)
        assert step.source == "a"
        assert step.probability == 0.5
        assert step.transition == Transition(to="b", by="go")
        assert not step.is_end

    def test_end_builds_step_without_edge(self) -> None:
        """end() declares an end step."""
        step = end("a", 2)
        assert step.transition is None
        assert step.is_end
        assert step.probability == 2

    def test_default_weight_is_one(self) -> None:
        """Omitted probability defaults to 1.0."""
        assert transition("a", "b", "go").probability == 1.0
        assert end("a").probability == 1.0

    @pytest.mark.parametrize("weight", [0, 0.0, -1, -0.5, math.inf, math.nan])
    def test_invalid_weights_rejected(self, weight: float) -> None:
        """Zero, negative and non-finite weights are caller errors."""
        with pytest.raises(InvalidWeightError) as exc_info:
            transition("a", "b", "go", weight)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_WEIGHT

    def test_boolean_weight_rejected(self) -> None:
        """True is an int subclass but not a weight."""
        with pytest.raises(InvalidWeightError):
            end("a", True)

    def test_string_weight_rejected(self) -> None:
        """Non-numeric weights are rejected."""
        with pytest.raises(InvalidWeightError):
            Step(source="a", probability="1")  # type: ignore[arg-type]

    def test_invalid_weight_is_value_error(self) -> None:
        """InvalidWeightError can be caught as ValueError."""
        with pytest.raises(ValueError, match="invalid probability"):
            end("a", -1)

    @given(weight=st.floats(min_value=1e-300, max_value=1e300))
    def test_any_positive_finite_weight_accepted(self, weight: float) -> None:
        """Weights are relative; any positive finite value is legal."""
        assert end("a", weight).probability == weight


# ============================================================================
# UNIT TESTS - STATE MACHINE
# ============================================================================


class TestStateMachine:
    """Tests for StateMachine normalization and flattening."""

    def test_empty_machine(self) -> None:
        """A machine without steps has no initial state."""
        machine = StateMachine.from_parts()
        assert machine.is_empty
        assert machine.initial_state is None
        assert len(machine) == 0

    def test_initial_state_is_first_source(self) -> None:
        """The source of the first declared step is the initial state."""
        machine = StateMachine.from_parts(end("z"), transition("a", "z", "go"))
        assert machine.initial_state == "z"

    def test_steps_grouped_by_source_in_order(self) -> None:
        """steps_from() keeps declaration order per state."""
        first = transition("a", "b", 1)
        second = end("b")
        third = transition("a", "c", 2)
        machine = StateMachine.from_parts(first, second, third)
        assert machine.steps_from("a") == (first, third)
        assert machine.steps_from("b") == (second,)

    def test_unknown_state_has_no_steps(self) -> None:
        """States without steps return an empty tuple."""
        assert LOGIN_MACHINE.steps_from("nowhere") == ()

    def test_from_parts_flattens_nested_fragments(self) -> None:
        """Steps, lists, tuples and machines flatten in order."""
        a = transition("a", "b", 1)
        b = transition("b", "c", 2)
        c = end("c")
        inner = StateMachine.from_parts(b)
        machine = StateMachine.from_parts([a, [inner]], (c,))
        assert machine.steps == (a, b, c)

    def test_from_parts_rejects_non_steps(self) -> None:
        """Anything that is not a step fragment is a TypeError."""
        with pytest.raises(TypeError, match="state machine part"):
            StateMachine.from_parts([transition("a", "b", 1), 42])

    def test_from_parts_rejects_strings(self) -> None:
        """Strings are iterable but never machine fragments."""
        with pytest.raises(TypeError):
            StateMachine.from_parts("ab")

    def test_constructor_rejects_non_steps(self) -> None:
        """Direct construction validates step types."""
        with pytest.raises(TypeError, match="Step instances"):
            StateMachine(steps=("not a step",))  # type: ignore[arg-type]

    def test_machine_is_iterable_and_comparable(self) -> None:
        """Machines iterate over steps and compare by steps."""
        steps = [transition("a", "b", 1), end("b")]
        assert list(StateMachine.from_parts(steps)) == steps
        assert StateMachine.from_parts(steps) == StateMachine.from_parts(*steps)

    def test_outgoing_is_read_only(self) -> None:
        """The adjacency mapping cannot be mutated."""
        with pytest.raises(TypeError):
            LOGIN_MACHINE.outgoing["x"] = ()  # type: ignore[index]


# ============================================================================
# UNIT TESTS - WALK HELPERS
# ============================================================================


class TestWalkHelpers:
    """Tests for walk_states() and is_valid_walk()."""

    def test_walk_states_lists_visited_states(self) -> None:
        """States start with the start state and follow destinations."""
        walk = (SUBMIT, RETRY, SUCCESS)
        assert walk_states(State.START, walk) == (
            State.START,
            State.LOGGING_IN,
            State.LOGGING_IN,
            State.DONE,
        )

    def test_valid_login_walk(self) -> None:
        """A walk following declared edges and ending in Done is valid."""
        assert is_valid_walk(LOGIN_MACHINE, State.START, (SUBMIT, RETRY, SUCCESS))

    def test_walk_stopping_outside_end_state_invalid(self) -> None:
        """Stopping in LoggingIn is not a complete walk."""
        assert not is_valid_walk(LOGIN_MACHINE, State.START, (SUBMIT,))

    def test_walk_with_undeclared_edge_invalid(self) -> None:
        """Cancel is not declared from Start."""
        assert not is_valid_walk(LOGIN_MACHINE, State.START, (CANCEL,))

    def test_walk_into_state_without_steps_is_complete(self) -> None:
        """A state with no steps forces the walk to stop."""
        machine = StateMachine.from_parts(transition("a", "sink", "go"))
        assert is_valid_walk(machine, "a", (Transition("sink", "go"),))

"""Graph algorithms for state machine validation.

Provides reachability analysis over a declared state machine: which
states exist, which may end a walk, which can eventually reach an end,
and which cannot (dead ends). All functions are pure and never mutate
the machine.

Python 3.13+.
"""

from collections import deque
from collections.abc import Hashable

from statewalk.machine import StateMachine

__all__ = [
    "all_states",
    "dead_ends",
    "end_states",
    "reachable_from",
    "states_reaching_end",
    "states_with_edge_to",
]


def all_states(machine: StateMachine) -> frozenset[Hashable]:
    """Return every state that some transition leads to.

    States that are only ever a step source (typically the initial state)
    are not included; the caller supplies those separately.

    Args:
        machine: State machine to inspect

    Returns:
        Set of transition destinations
    """
    return frozenset(
        step.transition.to for step in machine.steps if step.transition is not None
    )


def end_states(machine: StateMachine) -> frozenset[Hashable]:
    """Return the states that declare an end step.

    Args:
        machine: State machine to inspect

    Returns:
        Set of sources of steps without a transition
    """
    return frozenset(step.source for step in machine.steps if step.transition is None)


def states_with_edge_to(target: Hashable, machine: StateMachine) -> frozenset[Hashable]:
    """Return the states with at least one transition into ``target``.

    Args:
        target: Destination state
        machine: State machine to inspect

    Returns:
        Set of sources of steps whose transition leads to ``target``
    """
    return frozenset(
        step.source
        for step in machine.steps
        if step.transition is not None and step.transition.to == target
    )


def states_reaching_end(machine: StateMachine) -> frozenset[Hashable]:
    """Return every state with a path (possibly empty) to an end state.

    Computes the least fixed point of "end states, plus every state with
    an edge into the set". Uses a worklist over a reverse adjacency index
    built once, so each state is expanded at most once.

    Args:
        machine: State machine to inspect

    Returns:
        Set of states from which termination is possible

    Example:
        >>> m = StateMachine.from_parts(
        ...     transition("a", "b", "go"), transition("b", "c", "go"), end("c")
        ... )
        >>> sorted(states_reaching_end(m))
        ['a', 'b', 'c']

    Complexity:
        Time: O(V + E) where V = states, E = transitions
        Space: O(V + E) for the reverse index
    """
    predecessors: dict[Hashable, set[Hashable]] = {}
    for step in machine.steps:
        if step.transition is not None:
            predecessors.setdefault(step.transition.to, set()).add(step.source)

    reaching = set(end_states(machine))
    worklist = deque(reaching)
    while worklist:
        state = worklist.popleft()
        for source in predecessors.get(state, ()):
            if source not in reaching:
                reaching.add(source)
                worklist.append(source)

    return frozenset(reaching)


def dead_ends(machine: StateMachine) -> frozenset[Hashable]:
    """Return every state in the machine that cannot reach an end state.

    Covers transition destinations and step sources alike, so a source
    without incoming edges (such as the initial state) is still reported
    when it cannot terminate. A destination with no steps at all is a
    dead end unless it is itself declared an end state.

    Args:
        machine: State machine to inspect

    Returns:
        Set of dead-end states; empty iff every state that can be entered
        has some path to termination.

    Example:
        >>> m = StateMachine.from_parts(transition("start", "stuck", "go"))
        >>> sorted(dead_ends(m))
        ['start', 'stuck']
    """
    declared = all_states(machine) | frozenset(machine.outgoing)
    return frozenset(declared - states_reaching_end(machine))


def reachable_from(start: Hashable, machine: StateMachine) -> frozenset[Hashable]:
    """Return every state a walk starting at ``start`` could visit.

    Breadth-first forward reachability, including ``start`` itself.

    Args:
        start: Initial state
        machine: State machine to inspect

    Returns:
        Set of states reachable from ``start``
    """
    seen = {start}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        for step in machine.steps_from(state):
            if step.transition is not None and step.transition.to not in seen:
                seen.add(step.transition.to)
                queue.append(step.transition.to)
    return frozenset(seen)

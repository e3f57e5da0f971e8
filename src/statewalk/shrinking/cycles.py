"""Cycle-removing walk shrinker.

Produces simpler walks from a walk that made a test fail. Every candidate
is the original walk with a tail cut off or a loop spliced out, so it is
still a trace of the same machine from the same start state:

- Truncation: if the walk passes through an end state, stopping there is
  already a complete walk.
- Cycle removal: if the walk leaves a state and later returns to it, the
  excursion between the two visits can be dropped.

Candidates are yielded lazily, position by position from the front of the
walk. At each position truncation comes first, then cycle removal up to
the nearest return, then up to the farthest one. The
consumer pulls only as many as it needs.

Python 3.13+.
"""

from collections.abc import Container, Hashable, Iterable, Iterator

from statewalk.machine import Transition, Walk

__all__ = ["shrink"]


def shrink(
    end_set: Container[Hashable],
    walk: Iterable[Transition],
    start: Hashable,
) -> Iterator[Walk]:
    """Yield walks strictly shorter than ``walk`` that remain valid traces.

    Args:
        end_set: States where a walk may stop (see analysis.end_states)
        walk: The walk to simplify
        start: State the walk starts in

    Yields:
        Candidate walks. For a loop leaving ``state`` at position ``i``, the
        excision up to the first return to ``state`` is yielded first and,
        when different, the one up to the last return after it.

    Example:
        >>> a_to_b, b_to_b, b_to_c = (Transition("b", 1), Transition("b", 2), Transition("c", 3))
        >>> list(shrink({"c"}, (a_to_b, b_to_b, b_to_c), "a"))
        [(Transition(to='b', by=1), Transition(to='c', by=3))]
    """
    transitions = tuple(walk)
    state = start
    for position, taken in enumerate(transitions):
        previous = transitions[:position]

        if state in end_set:
            yield previous

        nearest = _first_return(transitions, position, state)
        if nearest is not None:
            yield previous + transitions[nearest + 1 :]
            farthest = _last_return(transitions, state)
            if farthest != nearest:
                yield previous + transitions[farthest + 1 :]

        state = taken.to


def _first_return(transitions: Walk, position: int, state: Hashable) -> int | None:
    for index in range(position, len(transitions)):
        if transitions[index].to == state:
            return index
    return None


def _last_return(transitions: Walk, state: Hashable) -> int:
    # Only called once _first_return found a match.
    index = len(transitions) - 1
    while transitions[index].to != state:
        index -= 1
    return index

"""Hypothesis strategies for state machine walks.

Turns a walk fuzzer into a Hypothesis ``SearchStrategy``. Every weighted
choice goes through Hypothesis draws, so failing walks are replayed from
the example database and shrunk by Hypothesis itself. Hypothesis biases
those draws towards simple values, so step frequencies only roughly follow
the weights; pass ``exact_weights=True`` when they must match.

An invalid machine yields a strategy that raises ``InvalidArgument`` with
the formatted diagnostic as soon as it is drawn from, the same way
Hypothesis reports its own misconfigured strategies.

Example:
    >>> from hypothesis import given
    >>> login = message_sequences(
    ...     transition("start", "in", "login"),
    ...     transition("in", "start", "logout"),
    ...     end("in"),
    ... )
    >>> @given(login)
    ... def test_session(messages):
    ...     assert messages[0] == "login"

Events emitted (HypoFuzz-Optimized):
    - ``walk_length={bucket}``: Length of the generated walk

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.errors import InvalidArgument

from statewalk.fuzzer import WalkFuzzer, build_walk_fuzzer
from statewalk.generation import DrawChooser, RandomChooser, WeightedChooser
from statewalk.machine import MachinePart, Walk

__all__ = ["message_sequences", "walks"]


def _as_fuzzer(parts: tuple[MachinePart | WalkFuzzer, ...]) -> WalkFuzzer:
    if len(parts) == 1 and isinstance(parts[0], WalkFuzzer):
        return parts[0]
    return build_walk_fuzzer(*parts)  # type: ignore[arg-type]


def _length_bucket(length: int) -> str:
    if length <= 1:
        return str(length)
    if length <= 5:
        return "2-5"
    if length <= 20:
        return "6-20"
    return "21+"


@st.composite
def _fuzzer_walks(draw: st.DrawFn, fuzzer: WalkFuzzer, exact_weights: bool = False) -> Walk:
    if fuzzer.diagnostic is not None:
        raise InvalidArgument(fuzzer.diagnostic.format_error())
    chooser: WeightedChooser
    if exact_weights:
        chooser = RandomChooser(draw(st.randoms(use_true_random=True)))
    else:
        chooser = DrawChooser(draw)
    walk = fuzzer.draw(chooser)
    event(f"walk_length={_length_bucket(len(walk))}")
    return walk


def walks(
    *parts: MachinePart | WalkFuzzer, exact_weights: bool = False
) -> st.SearchStrategy[Walk]:
    """Strategy producing walks (tuples of Transition).

    By default every choice is a Hypothesis draw, which shrinks well but only
    roughly follows the weights. With ``exact_weights=True`` each walk is
    generated from a single drawn ``random.Random``, so step frequencies match
    the weights; Hypothesis can then only shrink the seed, not the walk.

    Args:
        *parts: A single WalkFuzzer, or machine fragments to build one from
        exact_weights: Choose steps with probabilities exactly proportional
            to their weights

    Returns:
        Strategy drawing one walk from the machine's initial state
    """
    return _fuzzer_walks(_as_fuzzer(parts), exact_weights)


def message_sequences(
    *parts: MachinePart | WalkFuzzer, exact_weights: bool = False
) -> st.SearchStrategy[list[object]]:
    """Strategy producing the message sequences of walks.

    Args:
        *parts: A single WalkFuzzer, or machine fragments to build one from
        exact_weights: Same as for walks()

    Returns:
        Strategy drawing a list of messages, in walk order
    """
    fuzzer = _as_fuzzer(parts)
    return _fuzzer_walks(fuzzer, exact_weights).map(fuzzer.messages)

"""Weighted choice primitives.

Walk generation needs exactly one random primitive: pick one value from a
non-empty list of ``(weight, value)`` pairs. Choosers implement it on top
of different randomness sources:

- RandomChooser: the standard library ``random.Random`` (seedable)
- DrawChooser: a Hypothesis ``draw`` function, so Hypothesis records,
  replays and shrinks every choice

Python 3.13+.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, TypeVar

from hypothesis import strategies as st

from statewalk.diagnostics import ErrorTemplate, StateWalkError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["DrawChooser", "RandomChooser", "WeightedChooser"]

T = TypeVar("T")


class WeightedChooser(Protocol):
    """Protocol for weighted random choice.

    Weights are relative: they must be positive but need not sum to 1.
    """

    def choose(self, options: Sequence[tuple[float, T]]) -> T:
        """Return one value, chosen with probability proportional to its weight.

        Raises:
            StateWalkError: If options is empty.
        """
        ...  # pragma: no cover  # Protocol stub - not executable


def _check_options(options: Sequence[tuple[float, object]]) -> None:
    if not options:
        raise StateWalkError(ErrorTemplate.empty_choice())


class RandomChooser:
    """Weighted choice backed by ``random.Random``.

    Example:
        >>> chooser = RandomChooser(seed=42)
        >>> chooser.choose([(1.0, "only")])
        'only'
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        """Initialize RandomChooser.

        Args:
            rng: Random instance to draw from (a new one if omitted)
            seed: Seed for the new Random instance; ignored when rng is given
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def choose(self, options: Sequence[tuple[float, T]]) -> T:
        _check_options(options)
        if len(options) == 1:
            return options[0][1]
        weights = [weight for weight, _ in options]
        values = [value for _, value in options]
        return self._rng.choices(values, weights=weights, k=1)[0]


class DrawChooser:
    """Weighted choice driven by Hypothesis draws.

    Draws a point in ``[0, total)`` and selects the option whose cumulative
    weight interval contains it. Hypothesis shrinks the point towards zero,
    which selects the first option, so callers should list the options they
    want preferred while shrinking first.

    Hypothesis does not draw floats uniformly: it favours zero, the bounds
    and simple values. Choices therefore only roughly follow the weights,
    and a light first option is picked far more often than its weight says.
    Use RandomChooser when the distribution itself matters.

    Used inside ``@st.composite`` strategies:

        @st.composite
        def walks(draw):
            return generate(machine, start, DrawChooser(draw))
    """

    __slots__ = ("_draw",)

    def __init__(self, draw: Callable[[st.SearchStrategy[float]], float]) -> None:
        self._draw = draw

    def choose(self, options: Sequence[tuple[float, T]]) -> T:
        _check_options(options)
        if len(options) == 1:
            return options[0][1]
        total = sum(weight for weight, _ in options)
        point = self._draw(
            st.floats(min_value=0.0, max_value=total, exclude_max=True, allow_nan=False)
        )
        cumulative = 0.0
        for weight, value in options:
            cumulative += weight
            if point < cumulative:
                return value
        # Rounding can leave point just above the last cumulative sum.
        return options[-1][1]

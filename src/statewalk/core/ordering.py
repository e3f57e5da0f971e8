"""Deterministic ordering of opaque state values.

States only need to be hashable. Diagnostics and tests still want a stable
listing, so states are sorted naturally when they support it and by their
repr otherwise.

Python 3.13+.
"""

from collections.abc import Hashable, Iterable
from enum import Enum
from typing import TypeVar

__all__ = ["format_states", "ordered_states"]

S = TypeVar("S", bound=Hashable)


def ordered_states(states: Iterable[S]) -> tuple[S, ...]:
    """Return states as a tuple in a deterministic order.

    Args:
        states: Any iterable of hashable states (duplicates are dropped)

    Returns:
        Tuple sorted by natural ordering, or by ``repr`` when the states
        are not mutually comparable (e.g. plain Enum members, mixed types).

    Example:
        >>> ordered_states({"b", "a"})
        ('a', 'b')
    """
    unique = set(states)
    try:
        return tuple(sorted(unique))  # type: ignore[type-var]
    except TypeError:
        return tuple(sorted(unique, key=repr))


def format_states(states: Iterable[Hashable], *, limit: int | None = None) -> str:
    """Render states as a comma-separated listing.

    Enum members are shown by name; everything else by repr.

    Args:
        states: States to render, listed in the given order
        limit: Maximum number of states spelled out (None for all)

    Returns:
        Listing such as ``"Start, Stuck"`` or ``"'a', 'b' ... and 3 more"``
    """
    items = list(states)
    shown = items if limit is None else items[:limit]
    rendered = ", ".join(_render(state) for state in shown)
    hidden = len(items) - len(shown)
    if hidden > 0:
        rendered += f" ... and {hidden} more"
    return rendered


def _render(state: Hashable) -> str:
    if isinstance(state, Enum):
        return state.name
    return repr(state)

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Hashable, Tuple

from ..errors import InvalidInput

Coalition = Tuple[Hashable, ...]


def canonicalize_coalition(value: Any) -> Coalition:
    """Return the canonical (sorted, duplicate-free) tuple for a coalition.

    ``value`` may be any collection of players: tuple, list, set, frozenset
    or another iterable. A bare string is not accepted as a coalition since
    its characters would silently become players.
    """
    if isinstance(value, (str, bytes)):
        msg = f"Coalition must be a collection of players, got {type(value).__name__}: {value!r}"
        raise InvalidInput(msg)
    if not isinstance(value, Iterable):
        msg = f"Coalition must be a collection of players, got {value!r}"
        raise InvalidInput(msg)

    members = list(value)
    if len(set(members)) != len(members):
        msg = f"Coalition {value!r} lists the same player more than once."
        raise InvalidInput(msg)
    return sort_players(members)


def sort_players(players: Iterable[Hashable]) -> Coalition:
    try:
        return tuple(sorted(players))
    except TypeError as exc:
        msg = f"Players must be mutually comparable: {exc}"
        raise InvalidInput(msg) from exc


def with_player(coalition: Coalition, player: Hashable) -> Coalition:
    """Add ``player`` to an already canonical coalition."""
    return sort_players((*coalition, player))

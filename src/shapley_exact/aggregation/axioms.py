from __future__ import annotations

import math
from itertools import combinations
from typing import Hashable, Iterator, Mapping

from ..errors import MissingCoalitionValue
from ..model.game import EMPTY_COALITION, Game
from ..utils.coalition_encoding import Coalition, with_player


def check_efficiency(
    game: Game,
    values: Mapping[Hashable, float],
    tol: float = 1e-9,
) -> bool:
    """Sum of values over the roster equals v(N) - v(empty)."""
    grand = game.roster
    surplus = _worth(game, grand, None) - _worth(game, EMPTY_COALITION, None)
    total = sum(values[p] for p in game.players)
    return math.isclose(total, surplus, rel_tol=tol, abs_tol=tol)


def are_interchangeable(game: Game, i: Hashable, j: Hashable) -> bool:
    """v(S + i) == v(S + j) for every S containing neither player."""
    others = [p for p in game.roster if p not in (i, j)]
    for s in _subsets(others):
        if _worth(game, with_player(s, i), i) != _worth(game, with_player(s, j), j):
            return False
    return True


def is_null_player(game: Game, i: Hashable) -> bool:
    """Adding ``i`` never changes the worth of any coalition."""
    others = [p for p in game.roster if p != i]
    for s in _subsets(others):
        if _worth(game, with_player(s, i), i) != _worth(game, s, i):
            return False
    return True


def check_symmetry(
    game: Game,
    values: Mapping[Hashable, float],
    tol: float = 1e-9,
) -> bool:
    for i, j in combinations(game.roster, 2):
        if not are_interchangeable(game, i, j):
            continue
        if not math.isclose(values[i], values[j], rel_tol=tol, abs_tol=tol):
            return False
    return True


def check_null_player(
    game: Game,
    values: Mapping[Hashable, float],
    tol: float = 0.0,
) -> bool:
    for i in game.roster:
        if is_null_player(game, i) and abs(values[i]) > tol:
            return False
    return True


def _subsets(players: list[Hashable]) -> Iterator[Coalition]:
    for k in range(len(players) + 1):
        yield from combinations(players, k)


def _worth(game: Game, coalition: Coalition, player: Hashable) -> float:
    value = game.values.get(coalition)
    if value is None:
        raise MissingCoalitionValue(coalition, player)
    return value

from __future__ import annotations

from typing import Any, Hashable, Iterable, Optional

import pandas as pd

from ..errors import InvalidInput
from ..utils.coalition_encoding import canonicalize_coalition, sort_players
from .game import Game


def game_from_table(
    df: pd.DataFrame,
    players: Optional[Iterable[Hashable]] = None,
    coalition_column: str = "coalition",
    value_column: str = "value",
) -> Game:
    """Build a Game from a table with one row per coalition.

    Rows whose value is missing (NaN/None) are skipped, so the coalition
    counts as absent. Rows are applied top to bottom: when two rows name the
    same coalition the later one wins. If ``players`` is not given, the
    roster is every player appearing in some coalition.
    """
    for col in (coalition_column, value_column):
        if col not in df.columns:
            msg = f"Input table must contain '{col}' column."
            raise InvalidInput(msg)

    values: dict[Any, Any] = {}
    for coalition, value in zip(df[coalition_column], df[value_column]):
        if pd.isna(value):
            continue
        values[canonicalize_coalition(coalition)] = value

    if players is None:
        players = sort_players(_infer_players_from_coalitions(values))
    return Game.from_mapping(players, values)


def _infer_players_from_coalitions(coalitions: Iterable[Iterable[Hashable]]) -> set[Hashable]:
    players: set[Hashable] = set()
    for c in coalitions:
        players.update(c)
    return players

from __future__ import annotations

import pandas as pd
import pytest

from shapley_exact.errors import InvalidInput
from shapley_exact.indices.shapley import shapley_values
from shapley_exact.model.transforms import game_from_table


def test_game_from_table() -> None:
    df = pd.DataFrame(
        {
            "coalition": [(1,), (2,), (2, 1)],
            "value": [10.0, 20.0, 30.0],
        }
    )
    game = game_from_table(df)
    assert game.players == (1, 2)
    assert game.values[(1, 2)] == 30.0
    assert shapley_values(game) == {1: 10.0, 2: 20.0}


def test_game_from_table_skips_missing_values_and_keeps_last_row() -> None:
    df = pd.DataFrame(
        {
            "players": [(1,), (1, 2), (2, 1), (2,)],
            "worth": [1.0, 5.0, 6.0, None],
        }
    )
    game = game_from_table(df, players=[1, 2], coalition_column="players", value_column="worth")
    assert game.values[(1, 2)] == 6.0
    assert (2,) not in game.values


def test_game_from_table_requires_columns() -> None:
    df = pd.DataFrame({"coalition": [(1,)]})
    with pytest.raises(InvalidInput):
        game_from_table(df)

from __future__ import annotations

from typing import Any, Hashable, Iterable, Optional

import pandas as pd

from ..indices.shapley import ShapleyEngine


def shapley_table(
    engine: ShapleyEngine,
    players: Optional[Iterable[Hashable]] = None,
) -> pd.DataFrame:
    """One row per player with its exact Shapley value."""
    values = engine.shapley_values(players)
    rows: list[dict[str, Any]] = [
        {"player": pid, "shapley": value} for pid, value in values.items()
    ]
    return pd.DataFrame(rows, columns=["player", "shapley"])

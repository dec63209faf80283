from __future__ import annotations

from .errors import InvalidInput, MissingCoalitionValue, ShapleyError
from .indices.shapley import ShapleyEngine, shapley_value, shapley_values
from .model.game import Game, construct

__all__ = [
    "Game",
    "InvalidInput",
    "MissingCoalitionValue",
    "ShapleyEngine",
    "ShapleyError",
    "construct",
    "shapley_value",
    "shapley_values",
]

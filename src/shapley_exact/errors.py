from __future__ import annotations

from typing import Any, Hashable


class ShapleyError(Exception):
    """Base class for errors raised by shapley_exact."""


class InvalidInput(ShapleyError, ValueError):
    """Malformed roster or coalition-worth data given to ``construct``."""


class MissingCoalitionValue(ShapleyError, ValueError):
    """A coalition needed by a Shapley query has no worth in the game."""

    def __init__(self, coalition: tuple[Any, ...], player: Hashable) -> None:
        self.coalition = coalition
        self.player = player
        msg = (
            f"Missing worth for coalition {coalition!r} "
            f"(required for player {player!r})."
        )
        super().__init__(msg)

from __future__ import annotations

import math
from itertools import combinations
from pathlib import Path
from typing import Dict, Hashable, Iterable, List, Optional

from ..config_loader import EngineConfig, load_engine_config
from ..errors import MissingCoalitionValue
from ..model.game import Game
from ..utils.coalition_encoding import Coalition, with_player
from ..utils.logging_utils import configure_logging, get_logger

logger = get_logger(__name__)


def coalition_size_weights(n: int) -> List[float]:
    """Shapley weights ``k! (n-k-1)! / n!`` for coalition sizes ``k = 0..n-1``.

    Factorials are exact integers, so each weight is a single rounding of an
    exact ratio.
    """
    factorials = [math.factorial(k) for k in range(n + 1)]
    total_factorial = factorials[n]
    return [
        factorials[k] * factorials[n - k - 1] / total_factorial
        for k in range(n)
    ]


class ShapleyEngine:
    """Exact Shapley values over a :class:`Game`.

    Each query enumerates every subset of the roster without the queried
    player, i.e. 2^(n-1) subsets (2^n for a player outside the roster), with
    two worth lookups per subset. Cost is exponential in the roster size;
    do not expect polynomial behaviour on large rosters.

    The engine only reads the game, so one engine (or one game) can serve
    concurrent queries.
    """

    def __init__(self, game: Game, config: Optional[EngineConfig] = None) -> None:
        self.game = game
        self.config = config if config is not None else EngineConfig()
        self._roster = game.roster
        self._weights = coalition_size_weights(len(self._roster))
        if len(self._roster) > self.config.warn_player_count:
            logger.warning(
                "Roster has %d players; each Shapley query enumerates up to 2^%d coalitions.",
                len(self._roster),
                len(self._roster),
            )

    @classmethod
    def from_config(cls, game: Game, config_path: Path) -> "ShapleyEngine":
        """Engine using the ``engine:`` section of a YAML file.

        When the section names a ``logging_config``, logging is configured
        from it first.
        """
        config = load_engine_config(config_path)
        if config.logging_config is not None:
            configure_logging(config.logging_config)
        return cls(game, config)

    def shapley_value(self, player: Hashable) -> float:
        """Return the Shapley value of ``player``.

        ``player`` does not have to be in the roster; an unknown player is
        normally rejected because its singleton coalition has no worth.

        Raises :class:`MissingCoalitionValue` as soon as a coalition needed
        by the formula is absent from the game.
        """
        others = [p for p in self._roster if p != player]
        total = 0.0
        n = len(self._roster)
        for k in range(len(others) + 1):
            # size n only occurs for a player outside the roster and has no weight
            weight = self._weights[k] if k < n else None
            for subset in combinations(others, k):
                without_i = self._worth(subset, player)
                with_i = self._worth(with_player(subset, player), player)
                if weight is not None:
                    total += weight * (with_i - without_i)

        logger.debug("Shapley value of player %r: %r", player, total)
        return total

    def shapley_values(self, players: Optional[Iterable[Hashable]] = None) -> Dict[Hashable, float]:
        """Shapley value of each roster player (or of ``players``)."""
        targets = list(players) if players is not None else list(self.game.players)
        return {p: self.shapley_value(p) for p in targets}

    def _worth(self, coalition: Coalition, player: Hashable) -> float:
        try:
            return self.game.values[coalition]
        except KeyError:
            raise MissingCoalitionValue(coalition, player) from None


def shapley_value(game: Game, player: Hashable) -> float:
    return ShapleyEngine(game).shapley_value(player)


def shapley_values(game: Game) -> Dict[Hashable, float]:
    return ShapleyEngine(game).shapley_values()

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Hashable, Iterable, Mapping, Optional, Tuple

from ..errors import InvalidInput
from ..utils.coalition_encoding import Coalition, canonicalize_coalition, sort_players
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

EMPTY_COALITION: Coalition = ()


@dataclass(frozen=True)
class Game:
    """A TU game: a player roster and the worth of each coalition.

    ``values`` is keyed by canonical coalitions (sorted tuples) and always
    holds the empty coalition. Instances are read-only once built; use
    :meth:`from_mapping` (or :func:`construct`) rather than the raw
    constructor so keys are canonicalized.
    """

    players: Tuple[Hashable, ...]
    values: Mapping[Coalition, float] = field(hash=False)

    @property
    def n_players(self) -> int:
        return len(self.players)

    @property
    def roster(self) -> Coalition:
        """The players in canonical order (the grand coalition)."""
        return sort_players(self.players)

    def value(self, coalition: Iterable[Hashable]) -> Optional[float]:
        """Worth of ``coalition`` in any member order, or ``None`` if absent."""
        return self.values.get(canonicalize_coalition(coalition))

    def __contains__(self, coalition: Any) -> bool:
        return canonicalize_coalition(coalition) in self.values

    @classmethod
    def from_mapping(
        cls,
        players: Iterable[Hashable],
        values: Mapping[Any, Any],
    ) -> "Game":
        roster = tuple(players)
        if len(set(roster)) != len(roster):
            msg = f"Player roster contains duplicates: {roster!r}"
            raise InvalidInput(msg)
        sort_players(roster)

        canonical: dict[Coalition, float] = {}
        for raw_key, raw_value in values.items():
            key = canonicalize_coalition(raw_key)
            if key in canonical:
                logger.debug("Coalition %r supplied more than once; keeping the later worth.", key)
            canonical[key] = _to_worth(key, raw_value)

        if EMPTY_COALITION not in canonical:
            canonical[EMPTY_COALITION] = 0.0

        return cls(players=roster, values=MappingProxyType(canonical))


def construct(players: Iterable[Hashable], coalition_worth: Mapping[Any, Any]) -> Game:
    """Build a :class:`Game`, canonicalizing every coalition key.

    Raises :class:`InvalidInput` for duplicate roster entries or malformed
    coalition keys. Coalitions missing from ``coalition_worth`` are not
    reported here; they surface when a Shapley query needs them.
    """
    return Game.from_mapping(players, coalition_worth)


def _to_worth(coalition: Coalition, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        msg = f"Worth of coalition {coalition!r} is not a number: {value!r}"
        raise InvalidInput(msg) from exc

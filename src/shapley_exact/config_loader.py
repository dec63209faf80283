from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

DEFAULT_WARN_PLAYER_COUNT = 20


@dataclass(frozen=True)
class EngineConfig:
    # Rosters larger than this log a warning; 2^n lookups per query.
    warn_player_count: int = DEFAULT_WARN_PLAYER_COUNT
    logging_config: Optional[Path] = None


def load_config(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        msg = "Configuration file must contain a mapping at top level."
        raise ValueError(msg)
    return data


def engine_config_from_mapping(section: Mapping[str, Any]) -> EngineConfig:
    known = {f.name for f in fields(EngineConfig)}
    unknown = set(section) - known
    if unknown:
        msg = f"Unknown engine configuration keys: {sorted(unknown)}"
        raise ValueError(msg)

    warn = section.get("warn_player_count", DEFAULT_WARN_PLAYER_COUNT)
    if isinstance(warn, bool) or not isinstance(warn, int) or warn < 0:
        msg = f"warn_player_count must be a non-negative integer, got {warn!r}"
        raise ValueError(msg)

    log_cfg = section.get("logging_config")
    return EngineConfig(
        warn_player_count=warn,
        logging_config=Path(log_cfg) if log_cfg is not None else None,
    )


def load_engine_config(path: Path) -> EngineConfig:
    """Read the ``engine:`` section of a YAML file into an EngineConfig."""
    cfg = load_config(path)
    section = cfg.get("engine") or {}
    if not isinstance(section, dict):
        msg = "'engine' section must be a mapping."
        raise ValueError(msg)
    return engine_config_from_mapping(section)

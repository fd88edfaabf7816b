# ataxx_engine/config.py
from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from typing import Optional

from .board import SIDE

# Bound used to seed alpha/beta at the root.
INFTY = 2**31 - 1
# Magnitude of a decided game. Search adds the remaining depth to it, so the
# gap to INFTY caps the usable depth.
WINNING_VALUE = INFTY - 20


@dataclass
class SearchConfig:
    max_depth: int = 3
    winning_value: int = WINNING_VALUE
    seed: int = 0  # kept for reproducible setups; the search itself is deterministic

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.winning_value <= SIDE * SIDE:
            raise ValueError(
                f"winning_value {self.winning_value} does not exceed every material score"
            )
        if self.winning_value + self.max_depth >= INFTY:
            raise ValueError(
                f"max_depth {self.max_depth} leaves no headroom between "
                f"winning_value {self.winning_value} and {INFTY}"
            )


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "ataxx.toml") -> Config:
        if not os.path.exists(path):
            return Config()
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        known = {fld.name for fld in fields(SearchConfig)}
        search_raw = raw.get("search", {})
        search = SearchConfig(**{k: v for k, v in search_raw.items() if k in known})
        return Config(search=search, log_level=raw.get("log_level", "INFO"))


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from TOML, then apply environment overrides.

    The file defaults to $ATAXX_CONFIG_TOML or ``ataxx.toml``; a missing file
    yields the defaults. $ATAXX_SEARCH_DEPTH and $ATAXX_LOG_LEVEL override
    the loaded values.
    """
    cfg = Config.load_from_toml(path or os.environ.get("ATAXX_CONFIG_TOML", "ataxx.toml"))
    override_depth = os.environ.get("ATAXX_SEARCH_DEPTH")
    if override_depth:
        cfg.search = replace(cfg.search, max_depth=int(override_depth))
    override_level = os.environ.get("ATAXX_LOG_LEVEL")
    if override_level:
        cfg.log_level = override_level
    return cfg

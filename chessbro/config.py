# chessbro/config.py
import logging
import os
import tomllib
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# Material values in whole pawns. The king never leaves the board, so it counts 0.
PIECE_VALUES = {
    "PAWN": 1,
    "KNIGHT": 3,
    "BISHOP": 3,
    "ROOK": 5,
    "QUEEN": 9,
    "KING": 0,
}

# Larger than any reachable material imbalance.
CHECKMATE_VALUE = 10000

# Bounds for the SearchDepth option, in full moves.
MIN_SEARCH_DEPTH = 1
MAX_SEARCH_DEPTH = 64


def parse_depth(value) -> Optional[int]:
    """Return `value` as a search depth, or None unless it is an integer in range."""
    try:
        depth = int(str(value).strip())
    except ValueError:
        return None
    if not MIN_SEARCH_DEPTH <= depth <= MAX_SEARCH_DEPTH:
        return None
    return depth


@dataclass
class SearchConfig:
    depth: int = 2  # full moves; one full move is two plies
    use_alpha_beta: bool = True
    use_transposition: bool = True


@dataclass
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())
    checkmate_value: int = CHECKMATE_VALUE


@dataclass
class UIConfig:
    engine_name: str = "ChessBro"
    engine_author: str = "ChessBro developers"
    emit_search_info: bool = True
    api_port: int = 8000


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Unknown config key %s.%s in %s", section, k, path)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


def apply_env_overrides(cfg: Config, environ: Mapping[str, str] = os.environ) -> Config:
    """Apply $CHESSBRO_SEARCH_DEPTH on top of `cfg`. Bad values are logged and ignored."""
    raw = environ.get("CHESSBRO_SEARCH_DEPTH")
    if raw:
        depth = parse_depth(raw)
        if depth is None:
            logger.warning("Ignoring invalid CHESSBRO_SEARCH_DEPTH=%r", raw)
        else:
            cfg.search.depth = depth
    return cfg


# single globally importable config instance
CONFIG = apply_env_overrides(
    Config.load_from_toml(os.environ.get("CHESSBRO_CONFIG_TOML", "config.toml")))

import logging
import os
from typing import Mapping, Optional


def resolve_level(name: Optional[str], default: int) -> int:
    """Numeric level for a name such as ``debug``; ``default`` when unknown or empty."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(default_level: int = logging.INFO, env: Optional[Mapping[str, str]] = None) -> int:
    """Set up the root logger for maze generation and return the level in effect.

    MAZEGEN_LOG_LEVEL overrides ``default_level``. Generators log per-run timing
    at DEBUG, the factory logs its choices at INFO.
    """
    env = os.environ if env is None else env
    level = resolve_level(env.get("MAZEGEN_LOG_LEVEL"), default_level)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)-7s %(name)s: %(message)s")
    # basicConfig is a no-op once handlers exist; the level must still follow the env.
    logging.getLogger().setLevel(level)
    return level

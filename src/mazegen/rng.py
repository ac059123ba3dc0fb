from __future__ import annotations

import hashlib
import logging
import random
import secrets
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RNGManager:
    """Per-generation random sources derived from one master seed.

    ``context_rng("maze", topology, algorithm)`` hashes the master seed and
    the context with BLAKE2b, so the same seed yields the same maze for a
    given topology and algorithm while different contexts get unrelated
    streams. Without a seed a random one is drawn and logged.
    """

    master_seed: Optional[int] = None
    _resolved: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        seed = self.master_seed
        if seed is None:
            seed = secrets.randbits(64)
            logger.info("No maze seed provided; drew seed %d", seed)
        elif seed < 0:
            raise ValueError("Seed must be non-negative")
        object.__setattr__(self, "_resolved", seed)

    @property
    def seed(self) -> int:
        """The master seed in effect, drawn or given."""
        return self._resolved

    def derive_seed(self, *context: str) -> int:
        data = "\x1f".join((str(self._resolved),) + context).encode("utf-8")
        derived = int.from_bytes(hashlib.blake2b(data, digest_size=8).digest(), "big")
        logger.debug("Derived seed for %s -> %d", "/".join(context), derived)
        return derived

    def context_rng(self, *context: str) -> random.Random:
        return random.Random(self.derive_seed(*context))

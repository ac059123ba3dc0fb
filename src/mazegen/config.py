from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TOPOLOGIES = ("rect", "hexa", "tri", "ring")
BIASES = ("northeast", "southeast", "southwest", "northwest")
GROWING_STRATEGIES = ("random", "newest", "oldest")


class MazeConfigModel(BaseModel):
    """Schema of a maze settings file. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    algorithm: str = Field("recursive_backtracker", description="Generator name or alias")
    topology: str = Field("rect", description="One of rect, hexa, tri, ring")
    width: int = Field(20, ge=0)
    height: int = Field(20, ge=0)
    rings: int = Field(8, ge=0, description="Ring count for the ring topology")
    seed: Optional[int] = Field(None, ge=0)
    bias: str = Field("northeast", description="Diagonal bias for binary tree and sidewinder")
    room_max_rows: int = Field(1, ge=1)
    room_max_cols: int = Field(1, ge=1)
    join_probability: float = Field(0.5, ge=0.0, le=1.0)
    carry_probability: float = Field(1 / 3, ge=0.0, le=1.0)
    growing_strategy: str = "random"

    @field_validator("algorithm")
    @classmethod
    def normalize_algorithm(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("algorithm must not be empty")
        return v

    @field_validator("topology")
    @classmethod
    def check_topology(cls, v: str) -> str:
        return _check_choice("topology", v, TOPOLOGIES)

    @field_validator("bias")
    @classmethod
    def check_bias(cls, v: str) -> str:
        return _check_choice("bias", v, BIASES)

    @field_validator("growing_strategy")
    @classmethod
    def check_growing_strategy(cls, v: str) -> str:
        return _check_choice("growing_strategy", v, GROWING_STRATEGIES)


def _check_choice(name: str, value: str, choices: Tuple[str, ...]) -> str:
    value = value.strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got {value!r}")
    return value


def _as_seed(raw: str) -> int:
    raw = raw.strip()
    return int(raw, 16) if raw.lower().startswith("0x") else int(raw)


@dataclass
class GenerationSettings:
    """Parameters for one maze generation.

    ``width``/``height`` size the rect, hexa and tri grids; ``rings`` sizes the
    ring grid. Algorithm-specific knobs are ignored by the other algorithms.
    """

    algorithm: str = "recursive_backtracker"
    topology: str = "rect"
    width: int = 20
    height: int = 20
    rings: int = 8
    seed: Optional[int] = None
    bias: str = "northeast"
    room_max_rows: int = 1
    room_max_cols: int = 1
    join_probability: float = 0.5
    carry_probability: float = 1 / 3
    growing_strategy: str = "random"

    def validate(self) -> "GenerationSettings":
        """Run the settings through the schema; returns the normalized copy."""
        return self.from_mapping(asdict(self))

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "GenerationSettings":
        try:
            model = MazeConfigModel.model_validate(dict(data or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid maze settings: {e}") from e
        return cls(**model.model_dump())

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GenerationSettings":
        env = os.environ if env is None else env
        mapping: Dict[str, Tuple[str, Callable[[str], Any]]] = {
            "MAZEGEN_ALGO": ("algorithm", str),
            "MAZEGEN_TOPOLOGY": ("topology", str),
            "MAZEGEN_WIDTH": ("width", int),
            "MAZEGEN_HEIGHT": ("height", int),
            "MAZEGEN_RINGS": ("rings", int),
            "MAZEGEN_SEED": ("seed", _as_seed),
            "MAZEGEN_BIAS": ("bias", str),
        }
        data: Dict[str, Any] = {}
        for env_key, (field_name, caster) in mapping.items():
            raw = env.get(env_key)
            if raw is None or raw == "":
                continue
            try:
                data[field_name] = caster(raw)
            except ValueError as e:
                logger.error("Invalid env for %s=%r: %s", env_key, raw, e)
                raise ConfigurationError(f"Invalid value for {env_key}: {raw!r}") from e
        settings = cls.from_mapping(data)
        logger.debug("Settings from env: %s", settings)
        return settings

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "GenerationSettings":
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Settings file not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {path} must hold a mapping")
        # Allow the settings to sit under a top-level ``maze:`` section.
        if set(data) == {"maze"} and isinstance(data["maze"], dict):
            data = data["maze"]
        settings = cls.from_mapping(data)
        logger.info("Loaded maze settings from %s", path)
        return settings

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path

import yaml


class HealthPolicy(str, Enum):
    FIXED = "fixed"
    RANDOM = "random"


class TraitPolicy(str, Enum):
    FIXED_SPLIT = "fixed-split"
    RANDOM = "random"


@dataclass
class HealthConfig:
    policy: HealthPolicy = HealthPolicy.FIXED
    fixed_amount: int = 3
    # Half-open [min, max) like the random policy draws.
    random_range: tuple[int, int] = (1, 5)


@dataclass
class TraitConfig:
    policy: TraitPolicy = TraitPolicy.FIXED_SPLIT


@dataclass
class SimulationConfig:
    starting_organisms: int = 20
    offspring_per_pair: int = 1
    search_attempt_factor: int = 4
    seed: int = 42
    config_version: str = "v1"
    health: HealthConfig = field(default_factory=HealthConfig)
    traits: TraitConfig = field(default_factory=TraitConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


@dataclass
class AppConfig:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    advance_limit: int = 100


def _enum_value(enum_cls, value, default):
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Unknown {enum_cls.__name__} '{value}' (expected one of: {choices})") from None


def _pair(value, default: tuple[int, int]) -> tuple[int, int]:
    if value is None:
        return default
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return (_int("random_range", value[0]), _int("random_range", value[1]))
    raise ValueError(f"random_range must be a [min, max] pair, got {value!r}")


def _int(name: str, value) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _section(cls, name: str, raw: dict, ints: set[str]) -> dict:
    allowed = {f.name for f in fields(cls)}
    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ValueError(f"Unknown {name} keys: {', '.join(unknown)}")
    return {k: _int(k, v) if k in ints else v for k, v in raw.items()}


def validate_config(config: SimulationConfig) -> SimulationConfig:
    if config.starting_organisms < 0:
        raise ValueError("starting_organisms must be >= 0")
    if config.offspring_per_pair < 0:
        raise ValueError("offspring_per_pair must be >= 0")
    if config.search_attempt_factor < 1:
        raise ValueError("search_attempt_factor must be >= 1")
    health = config.health
    if health.policy == HealthPolicy.FIXED and health.fixed_amount < 1:
        raise ValueError("health.fixed_amount must be >= 1")
    if health.policy == HealthPolicy.RANDOM and health.random_range[0] < 1:
        raise ValueError("health.random_range minimum must be >= 1")
    return config


def load_config(raw: dict) -> SimulationConfig:
    default_health = HealthConfig()
    health_raw = dict(raw.get("health", {}) or {})
    health_values = _section(HealthConfig, "health", health_raw, {"fixed_amount"})
    health = HealthConfig(
        policy=_enum_value(HealthPolicy, health_values.pop("policy", None), default_health.policy),
        random_range=_pair(health_values.pop("random_range", None), default_health.random_range),
        **health_values,
    )
    traits_values = _section(TraitConfig, "traits", dict(raw.get("traits", {}) or {}), set())
    traits = TraitConfig(
        policy=_enum_value(TraitPolicy, traits_values.pop("policy", None), TraitConfig().policy),
        **traits_values,
    )
    sim_raw = {k: v for k, v in raw.items() if k not in {"health", "traits"}}
    sim_values = _section(
        SimulationConfig,
        "simulation",
        sim_raw,
        {"starting_organisms", "offspring_per_pair", "search_attempt_factor", "seed"},
    )
    if "config_version" in sim_values:
        sim_values["config_version"] = str(sim_values["config_version"])
    return validate_config(SimulationConfig(health=health, traits=traits, **sim_values))

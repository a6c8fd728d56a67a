from __future__ import annotations

from typing import Callable

from ..core.config import HealthPolicy, SimulationConfig, TraitPolicy
from ..core.organism import Trait
from ..core.rng import DeterministicRng


def select_health(config: SimulationConfig, rng: DeterministicRng) -> int:
    health = config.health
    if health.policy == HealthPolicy.RANDOM:
        low, high = health.random_range
        return rng.next_int_range(low, high)
    return health.fixed_amount


def select_founder_trait(config: SimulationConfig, rng: DeterministicRng, index: int) -> Trait:
    if config.traits.policy == TraitPolicy.RANDOM:
        return Trait.A if rng.next_int(2) == 0 else Trait.B
    # First half of the founder batch is B, the rest A.
    if index >= config.starting_organisms // 2:
        return Trait.A
    return Trait.B


def health_selector(config: SimulationConfig, rng: DeterministicRng) -> Callable[[], int]:
    return lambda: select_health(config, rng)


def founder_trait_selector(config: SimulationConfig, rng: DeterministicRng) -> Callable[[int], Trait]:
    return lambda index: select_founder_trait(config, rng, index)

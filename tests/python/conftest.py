import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from hatchery.sim.core.config import HealthConfig, HealthPolicy, SimulationConfig, TraitConfig, TraitPolicy  # noqa: E402


def make_config(
    starting_organisms: int = 4,
    health: int = 3,
    offspring_per_pair: int = 1,
    seed: int = 11,
    trait_policy: TraitPolicy = TraitPolicy.FIXED_SPLIT,
) -> SimulationConfig:
    return SimulationConfig(
        starting_organisms=starting_organisms,
        offspring_per_pair=offspring_per_pair,
        seed=seed,
        health=HealthConfig(policy=HealthPolicy.FIXED, fixed_amount=health),
        traits=TraitConfig(policy=trait_policy),
    )


@pytest.fixture
def config_factory():
    return make_config

from collections import Counter

from hatchery.sim.core.config import HealthConfig, HealthPolicy, SimulationConfig, TraitConfig, TraitPolicy
from hatchery.sim.core.organism import Trait
from hatchery.sim.core.rng import DeterministicRng
from hatchery.sim.systems.selection import select_founder_trait, select_health


def test_rng_reset_replays_sequence():
    rng = DeterministicRng(99)
    first = [rng.next_int(100) for _ in range(10)]
    rng.reset()
    assert [rng.next_int(100) for _ in range(10)] == first


def test_rng_empty_inputs():
    rng = DeterministicRng(1)
    assert rng.sample_choice([]) is None
    assert rng.next_int_range(4, 4) == 4
    assert rng.next_int_range(5, 2) == 5


def test_fixed_split_assigns_b_then_a():
    config = SimulationConfig(starting_organisms=5)
    rng = DeterministicRng(0)
    traits = [select_founder_trait(config, rng, index) for index in range(5)]
    assert traits == [Trait.B, Trait.B, Trait.A, Trait.A, Trait.A]


def test_random_trait_policy_only_draws_primaries_a_and_b():
    config = SimulationConfig(traits=TraitConfig(policy=TraitPolicy.RANDOM))
    rng = DeterministicRng(3)
    counts = Counter(select_founder_trait(config, rng, index) for index in range(200))
    assert set(counts) == {Trait.A, Trait.B}


def test_health_policies():
    fixed = SimulationConfig(health=HealthConfig(policy=HealthPolicy.FIXED, fixed_amount=9))
    assert select_health(fixed, DeterministicRng(0)) == 9

    ranged = SimulationConfig(health=HealthConfig(policy=HealthPolicy.RANDOM, random_range=(2, 5)))
    rng = DeterministicRng(0)
    draws = {select_health(ranged, rng) for _ in range(200)}
    assert draws == {2, 3, 4}

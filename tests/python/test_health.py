from hatchery.sim.core.organism import Trait
from hatchery.sim.core.registry import OrganismRegistry
from hatchery.sim.systems.health import process_death, tick_all_active
from hatchery.sim.systems.inheritance import inherit_trait


def _registry_with(healths):
    registry = OrganismRegistry()
    registry.open_generation(0)
    organisms = [
        registry.create_founder(lambda _i: Trait.A, lambda h=health: h, index)
        for index, health in enumerate(healths)
    ]
    return registry, organisms


def test_tick_decrements_all_and_only_marks():
    registry, organisms = _registry_with([1, 2, 3])
    dying = tick_all_active(registry)

    assert [o.health for o in organisms] == [0, 1, 2]
    assert dying == [organisms[0]]
    # Decay does not remove anything by itself.
    assert organisms[0].alive
    assert registry.counters.active == 3


def test_tick_covers_every_generation():
    registry, (first, second) = _registry_with([5, 5])
    registry.open_generation(1)

    child = registry.create_offspring(first, second, 1, inherit_trait, lambda: 1)
    dying = tick_all_active(registry)
    assert dying == [child]
    assert first.health == 4


def test_death_unpairs_partner():
    registry, (first, second, _third) = _registry_with([1, 3, 3])
    registry.assign_partners(first, second)

    for organism in tick_all_active(registry):
        process_death(registry, organism)

    assert not first.alive
    assert second.partner_id is None
    assert second.pair_id is None
    assert second in registry.available(0)
    assert registry.pairs == {}
    assert registry.counters.dead == 1
    assert registry.counters.active == 2
    assert registry.counters.by_trait[Trait.A] == 2


def test_death_alone_returns_no_partner():
    registry, (only,) = _registry_with([1])
    tick_all_active(registry)
    assert process_death(registry, only) is None
    assert registry.active(0) == []
    assert registry.available(0) == []


def test_both_partners_dying_in_one_tick():
    registry, (first, second) = _registry_with([1, 1])
    registry.assign_partners(first, second)
    for organism in tick_all_active(registry):
        process_death(registry, organism)

    assert registry.pairs == {}
    assert registry.active(0) == []
    assert registry.available(0) == []
    assert registry.counters.active == 0
    assert registry.counters.dead == 2

from __future__ import annotations

from typing import Callable, Dict, Iterator, List

from ..systems import lineage
from ..types.metrics import PopulationCounters
from .organism import Organism, Pair, Trait

TraitRule = Callable[[Trait, Trait], Trait]


class OrganismRegistry:
    """Every organism ever created, indexed by integer handle.

    Organisms are grouped by generation into an *active* pool (alive) and an
    *available* pool (alive and unpaired). Pairs are global and keyed by pair id.
    Counters are updated in the same call that changes pool membership.
    """

    def __init__(self) -> None:
        self._organisms: Dict[int, Organism] = {}
        self._active: Dict[int, List[int]] = {}
        self._available: Dict[int, List[int]] = {}
        self._pairs: Dict[int, Pair] = {}
        self._counters = PopulationCounters()
        self._next_id = 0
        self._next_pair_id = 0

    @property
    def counters(self) -> PopulationCounters:
        return self._counters

    @property
    def pairs(self) -> Dict[int, Pair]:
        return self._pairs

    def __len__(self) -> int:
        return len(self._organisms)

    def __iter__(self) -> Iterator[Organism]:
        return iter(self._organisms.values())

    def get(self, organism_id: int) -> Organism:
        return self._organisms[organism_id]

    def generations(self) -> List[int]:
        return sorted(self._active)

    def active(self, generation: int) -> List[Organism]:
        return [self._organisms[oid] for oid in self._active.get(generation, ())]

    def available(self, generation: int) -> List[Organism]:
        return [self._organisms[oid] for oid in self._available.get(generation, ())]

    def available_ids(self, generation: int) -> List[int]:
        return self._available.setdefault(generation, [])

    def partner_of(self, organism: Organism) -> Organism | None:
        if organism.partner_id is None:
            return None
        return self._organisms[organism.partner_id]

    def open_generation(self, generation: int) -> None:
        self._active[generation] = []
        self._available[generation] = []

    def create_founder(
        self,
        trait_selector: Callable[[int], Trait],
        health_selector: Callable[[], int],
        index: int,
    ) -> Organism:
        organism = self._allocate(0, trait_selector(index), health_selector())
        organism.lineage = lineage.founder_lineage(organism.id)
        self._insert(organism)
        return organism

    def create_offspring(
        self,
        parent_a: Organism,
        parent_b: Organism,
        generation: int,
        trait_rule: TraitRule,
        health_selector: Callable[[], int],
    ) -> Organism:
        organism = self._allocate(generation, trait_rule(parent_a.trait, parent_b.trait), health_selector())
        organism.lineage = lineage.offspring_lineage(parent_a, parent_b, organism.id)
        self._insert(organism)
        return organism

    def remove_from_active(self, organism: Organism) -> None:
        if not organism.alive:
            raise RuntimeError(f"{organism.name} is already dead")
        pool = self._active[organism.generation]
        pool.remove(organism.id)
        available = self._available.get(organism.generation, [])
        if organism.id in available:
            available.remove(organism.id)
        organism.alive = False
        self._counters.record_death(organism.trait)

    def assign_partners(self, first: Organism, second: Organism) -> Pair:
        self._next_pair_id += 1
        pair = Pair(id=self._next_pair_id, first=first.id, second=second.id)
        first.partner_id = second.id
        second.partner_id = first.id
        first.pair_id = pair.id
        second.pair_id = pair.id
        self._pairs[pair.id] = pair
        available = self._available[first.generation]
        available.remove(first.id)
        available.remove(second.id)
        return pair

    def release_partner(self, organism: Organism) -> Organism | None:
        """Clear ``organism``'s pair and return its partner to the available pool."""
        partner = self.partner_of(organism)
        if partner is None:
            return None
        partner.partner_id = None
        partner.pair_id = None
        self._available.setdefault(partner.generation, []).append(partner.id)
        self._pairs.pop(organism.pair_id, None)
        organism.partner_id = None
        organism.pair_id = None
        return partner

    def _allocate(self, generation: int, trait: Trait, health: int) -> Organism:
        self._next_id += 1
        return Organism(
            id=self._next_id,
            name=f"Organism_{self._next_id}",
            generation=generation,
            trait=trait,
            health=health,
        )

    def _insert(self, organism: Organism) -> None:
        self._organisms[organism.id] = organism
        self._active.setdefault(organism.generation, []).append(organism.id)
        self._available.setdefault(organism.generation, []).append(organism.id)
        self._counters.record_birth(organism.trait)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..core.organism import Trait


@dataclass(slots=True)
class PopulationCounters:
    created: int = 0
    active: int = 0
    dead: int = 0
    by_trait: Dict[Trait, int] = field(default_factory=lambda: {trait: 0 for trait in Trait})

    def record_birth(self, trait: Trait) -> None:
        self.created += 1
        self.active += 1
        self.by_trait[trait] = self.by_trait.get(trait, 0) + 1

    def record_death(self, trait: Trait) -> None:
        self.active = self._decremented("active", self.active)
        self.by_trait[trait] = self._decremented(f"{trait.value} trait", self.by_trait.get(trait, 0))
        self.dead += 1

    def copy(self) -> "PopulationCounters":
        return PopulationCounters(
            created=self.created,
            active=self.active,
            dead=self.dead,
            by_trait=dict(self.by_trait),
        )

    def as_dict(self) -> Dict[str, object]:
        return {
            "created": self.created,
            "active": self.active,
            "dead": self.dead,
            "by_trait": {trait.value: count for trait, count in self.by_trait.items()},
        }

    @staticmethod
    def _decremented(name: str, value: int) -> int:
        if value <= 0:
            raise RuntimeError(f"{name} counter would go negative")
        return value - 1


@dataclass(slots=True)
class GenerationMetrics:
    generation: int
    births: int
    deaths: int
    new_pairs: int
    active_pairs: int
    unpaired: int
    lineage_rejections: int
    created: int
    active: int
    dead: int
    trait_counts: Dict[str, int]
    tick_duration_ms: float = 0.0

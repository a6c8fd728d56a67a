from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Trait(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    NONE = "none"


@dataclass(slots=True)
class Organism:
    id: int
    name: str
    generation: int
    trait: Trait
    health: int
    # Ancestor handles plus the organism's own id; fixed at creation.
    lineage: frozenset[int] = frozenset()
    partner_id: Optional[int] = None
    pair_id: Optional[int] = None
    alive: bool = True

    @property
    def is_paired(self) -> bool:
        return self.partner_id is not None


@dataclass(frozen=True, slots=True)
class Pair:
    id: int
    first: int
    second: int

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.organism import Organism


def founder_lineage(organism_id: int) -> frozenset[int]:
    return frozenset((organism_id,))


def offspring_lineage(parent_a: Organism, parent_b: Organism, child_id: int) -> frozenset[int]:
    return parent_a.lineage | parent_b.lineage | {child_id}


def shared_ancestors(first: Organism, second: Organism) -> frozenset[int]:
    return first.lineage & second.lineage


def are_related(first: Organism, second: Organism) -> bool:
    return not first.lineage.isdisjoint(second.lineage)

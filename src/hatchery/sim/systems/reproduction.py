from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List

from ..core.organism import Organism
from .inheritance import inherit_trait

if TYPE_CHECKING:
    from ..core.registry import OrganismRegistry

logger = logging.getLogger(__name__)


def produce_offspring(
    registry: OrganismRegistry,
    generation: int,
    offspring_per_pair: int,
    health_selector: Callable[[], int],
) -> List[Organism]:
    births: List[Organism] = []
    # Pairs are never cleared here; a couple keeps breeding until one partner dies.
    for pair in list(registry.pairs.values()):
        first = registry.get(pair.first)
        second = registry.get(pair.second)
        for _ in range(offspring_per_pair):
            child = registry.create_offspring(first, second, generation, inherit_trait, health_selector)
            logger.debug("%s had an offspring with %s: %s", first.name, second.name, child.name)
            births.append(child)
    return births

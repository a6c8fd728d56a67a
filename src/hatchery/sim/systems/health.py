from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from ..core.organism import Organism

if TYPE_CHECKING:
    from ..core.registry import OrganismRegistry

logger = logging.getLogger(__name__)


def tick_all_active(registry: OrganismRegistry) -> List[Organism]:
    """Decrement every active organism's health and return those now at or below zero.

    Nothing is removed here; the caller hands each returned organism to
    :func:`process_death` in the returned order.
    """
    dying: List[Organism] = []
    for generation in registry.generations():
        for organism in registry.active(generation):
            organism.health -= 1
            if organism.health <= 0:
                dying.append(organism)
    return dying


def process_death(registry: OrganismRegistry, organism: Organism) -> Organism | None:
    """Unpair ``organism`` (returning its partner to the available pool) and retire it.

    Returns the widowed partner, if any.
    """
    partner = registry.release_partner(organism)
    if partner is not None:
        logger.info("%s died, leaving %s with no partner", organism.name, partner.name)
    else:
        logger.info("%s died alone", organism.name)
    registry.remove_from_active(organism)
    return partner

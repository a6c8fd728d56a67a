from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from ..core.organism import Organism, Pair
from ..core.rng import DeterministicRng
from . import lineage

if TYPE_CHECKING:
    from ..core.registry import OrganismRegistry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PairingReport:
    formed: List[Pair] = field(default_factory=list)
    unpaired: List[int] = field(default_factory=list)
    lineage_rejections: int = 0


def find_partners(
    registry: OrganismRegistry,
    rng: DeterministicRng,
    attempt_factor: int = 4,
) -> PairingReport:
    """Greedy randomised matching within each generation.

    Generations are visited in ascending order and seekers in active-pool
    order. Each unpaired seeker samples its own generation's available pool
    at most ``attempt_factor * len(active pool)`` times.
    """
    report = PairingReport()
    for generation in registry.generations():
        seekers = registry.active(generation)
        max_attempts = attempt_factor * len(seekers)
        for seeker in seekers:
            if seeker.is_paired:
                continue
            if len(registry.available_ids(generation)) < 2:
                report.unpaired.append(seeker.id)
                continue
            partner = _search(registry, rng, seeker, generation, max_attempts, report)
            if partner is None:
                logger.info("%s found no partner after %d attempts", seeker.name, max_attempts)
                report.unpaired.append(seeker.id)
                continue
            pair = registry.assign_partners(seeker, partner)
            logger.info("%s partnered with %s (pair %d)", seeker.name, partner.name, pair.id)
            report.formed.append(pair)
    return report


def _search(
    registry: OrganismRegistry,
    rng: DeterministicRng,
    seeker: Organism,
    generation: int,
    max_attempts: int,
    report: PairingReport,
) -> Organism | None:
    available = registry.available_ids(generation)
    for _ in range(max_attempts):
        candidate = registry.get(rng.sample_choice(available))
        if candidate.id == seeker.id or candidate.is_paired:
            logger.debug("rejected %s for %s", candidate.name, seeker.name)
            continue
        if lineage.are_related(seeker, candidate):
            report.lineage_rejections += 1
            logger.debug(
                "family history match %s between %s and %s",
                sorted(lineage.shared_ancestors(seeker, candidate)),
                seeker.name,
                candidate.name,
            )
            continue
        return candidate
    return None

from __future__ import annotations

from ..types.metrics import GenerationMetrics, PopulationCounters
from .pairing import PairingReport


def create_metrics(
    generation: int,
    births: int,
    deaths: int,
    active_pairs: int,
    report: PairingReport,
    counters: PopulationCounters,
    duration_ms: float,
) -> GenerationMetrics:
    return GenerationMetrics(
        generation=generation,
        births=births,
        deaths=deaths,
        new_pairs=len(report.formed),
        active_pairs=active_pairs,
        unpaired=len(report.unpaired),
        lineage_rejections=report.lineage_rejections,
        created=counters.created,
        active=counters.active,
        dead=counters.dead,
        trait_counts={trait.value: count for trait, count in counters.by_trait.items()},
        tick_duration_ms=duration_ms,
    )

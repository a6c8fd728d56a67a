from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from time import perf_counter
from typing import Any, Callable, Dict, List, Optional

from ..systems import health, metrics as metrics_system, pairing, reproduction, selection
from ..types.metrics import GenerationMetrics, PopulationCounters
from ..types.snapshot import Snapshot, SnapshotMetadata
from .config import SimulationConfig, validate_config
from .organism import Organism
from .registry import OrganismRegistry
from .rng import DeterministicRng

logger = logging.getLogger(__name__)


class SchedulerPhase(str, Enum):
    IDLE = "Idle"
    DECAYING = "Decaying"
    PAIRING = "Pairing"
    REPRODUCING = "Reproducing"


@dataclass
class SimulationState:
    registry: OrganismRegistry
    generation: int = 0


def bootstrap_state(config: SimulationConfig, rng: DeterministicRng) -> SimulationState:
    state = SimulationState(registry=OrganismRegistry())
    state.registry.open_generation(0)
    trait_selector = selection.founder_trait_selector(config, rng)
    health_selector = selection.health_selector(config, rng)
    for index in range(config.starting_organisms):
        state.registry.create_founder(trait_selector, health_selector, index)
    return state


def step_generation(
    state: SimulationState,
    config: SimulationConfig,
    rng: DeterministicRng,
    on_phase: Optional[Callable[[SchedulerPhase], None]] = None,
) -> GenerationMetrics:
    """Run one full tick: decay, deaths, pairing, pool rollover, reproduction."""
    start = perf_counter()
    registry = state.registry

    state.generation += 1
    if on_phase is not None:
        on_phase(SchedulerPhase.DECAYING)
    dying = health.tick_all_active(registry)
    for organism in dying:
        health.process_death(registry, organism)

    if on_phase is not None:
        on_phase(SchedulerPhase.PAIRING)
    report = pairing.find_partners(registry, rng, config.search_attempt_factor)

    if on_phase is not None:
        on_phase(SchedulerPhase.REPRODUCING)
    registry.open_generation(state.generation)
    births = reproduction.produce_offspring(
        registry,
        state.generation,
        config.offspring_per_pair,
        selection.health_selector(config, rng),
    )

    elapsed_ms = (perf_counter() - start) * 1000.0
    return metrics_system.create_metrics(
        state.generation,
        len(births),
        len(dying),
        len(registry.pairs),
        report,
        registry.counters,
        elapsed_ms,
    )


class Simulation:
    def __init__(self, config: SimulationConfig):
        self._config = validate_config(config)
        self._rng = DeterministicRng(config.seed)
        self._phase = SchedulerPhase.IDLE
        self._metrics: GenerationMetrics | None = None
        self._history: List[GenerationMetrics] = []
        self._phase_listeners: List[Callable[[SchedulerPhase], None]] = []
        self._state = bootstrap_state(self._config, self._rng)

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def generation(self) -> int:
        return self._state.generation

    @property
    def phase(self) -> SchedulerPhase:
        return self._phase

    @property
    def registry(self) -> OrganismRegistry:
        return self._state.registry

    @property
    def counters(self) -> PopulationCounters:
        return self._state.registry.counters.copy()

    @property
    def metrics(self) -> GenerationMetrics | None:
        return self._metrics

    @property
    def history(self) -> List[GenerationMetrics]:
        return list(self._history)

    def add_phase_listener(self, listener: Callable[[SchedulerPhase], None]) -> None:
        """Call ``listener`` with each phase as a tick enters it."""
        self._phase_listeners.append(listener)

    def reset(self) -> None:
        self._rng.reset()
        self._phase = SchedulerPhase.IDLE
        self._metrics = None
        self._history.clear()
        self._state = bootstrap_state(self._config, self._rng)

    def advance_generation(self) -> GenerationMetrics:
        if self._phase != SchedulerPhase.IDLE:
            raise RuntimeError(f"generation tick already in progress ({self._phase.value})")
        try:
            metrics = step_generation(self._state, self._config, self._rng, on_phase=self._enter)
        finally:
            self._phase = SchedulerPhase.IDLE
        logger.info(
            "generation %d: %d born, %d died, %d new pairs, %d unpaired, %d active",
            metrics.generation,
            metrics.births,
            metrics.deaths,
            metrics.new_pairs,
            metrics.unpaired,
            metrics.active,
        )
        self._metrics = metrics
        self._history.append(metrics)
        return metrics

    def snapshot(self) -> Snapshot:
        registry = self._state.registry
        metadata = SnapshotMetadata(
            seed=self._config.seed,
            config_version=self._config.config_version,
            starting_organisms=self._config.starting_organisms,
            offspring_per_pair=self._config.offspring_per_pair,
        )
        return Snapshot(
            generation=self._state.generation,
            counters=registry.counters.as_dict(),
            metrics=self._metrics,
            organisms=[self._organism_snapshot(organism) for organism in registry if organism.alive],
            pairs=[asdict(pair) for pair in registry.pairs.values()],
            metadata=metadata,
        )

    def _enter(self, phase: SchedulerPhase) -> None:
        self._phase = phase
        for listener in self._phase_listeners:
            listener(phase)

    @staticmethod
    def _organism_snapshot(organism: Organism) -> Dict[str, Any]:
        return {
            "id": organism.id,
            "name": organism.name,
            "generation": organism.generation,
            "trait": organism.trait.value,
            "health": organism.health,
            "partner": organism.partner_id,
            "pair": organism.pair_id,
            "lineage": sorted(organism.lineage),
        }

from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Optional

from ..sim.core.config import SimulationConfig
from ..sim.core.organism import Trait
from ..sim.core.simulation import Simulation
from ..sim.types.metrics import GenerationMetrics

logger = logging.getLogger(__name__)

_HEADER = [
    "generation",
    "created",
    "active",
    "dead",
    "births",
    "deaths",
    "new_pairs",
    "active_pairs",
    "unpaired",
    "lineage_rejections",
    *(f"trait_{trait.value}" for trait in Trait),
    "tick_ms",
]


def _format_row(metrics: GenerationMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.generation,
        metrics.created,
        metrics.active,
        metrics.dead,
        metrics.births,
        metrics.deaths,
        metrics.new_pairs,
        metrics.active_pairs,
        metrics.unpaired,
        metrics.lineage_rejections,
        *(metrics.trait_counts.get(trait.value, 0) for trait in Trait),
        f"{tick_ms:.3f}",
    ]


def _load_config(config_path: Optional[Path], seed: Optional[int]) -> SimulationConfig:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    return config


def run_headless(
    generations: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    config_path: Optional[Path] = None,
    summary_path: Optional[Path] = None,
) -> Simulation:
    config = _load_config(config_path, seed)
    simulation = Simulation(config)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    peak_active = (simulation.counters.active, 0)
    extinct_at: Optional[int] = None
    try:
        for _ in range(generations):
            metrics = simulation.advance_generation()
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
            if writer:
                writer.writerow(_format_row(metrics, tick_ms))
            if metrics.active > peak_active[0]:
                peak_active = (metrics.active, metrics.generation)
            if metrics.active == 0 and extinct_at is None:
                extinct_at = metrics.generation
                logger.info("population extinct at generation %d", extinct_at)
    finally:
        if csv_file:
            csv_file.close()

    if summary_path:
        counters = simulation.counters
        summary = {
            "generations": generations,
            "seed": config.seed,
            "config_version": config.config_version,
            "final": counters.as_dict(),
            "peak_active": {"value": peak_active[0], "generation": peak_active[1]},
            "extinct_at": extinct_at,
            "total_pairs": sum(m.new_pairs for m in simulation.history),
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))
    return simulation


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless generation simulation")
    parser.add_argument("--generations", type=int, default=20)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML simulation config")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write per-generation counters")
    parser.add_argument("--summary", type=Path, default=None, help="JSON file to write a run summary")
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")
    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    run_headless(
        args.generations,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        config_path=args.config,
        summary_path=args.summary,
    )


if __name__ == "__main__":
    main()

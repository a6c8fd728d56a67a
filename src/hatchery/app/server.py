from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import List

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from ..sim.core.config import AppConfig, SimulationConfig
from ..sim.core.simulation import Simulation
from ..sim.types.metrics import GenerationMetrics

logger = logging.getLogger(__name__)


class SimulationController:
    """Serialises external advance triggers so each generation tick runs alone."""

    def __init__(self, config: SimulationConfig, advance_limit: int = 100):
        self.config = config
        self.simulation = Simulation(config)
        self.advance_limit = max(1, advance_limit)
        self._lock = asyncio.Lock()

    async def advance(self, count: int = 1) -> List[GenerationMetrics]:
        count = max(1, min(self.advance_limit, int(count)))
        async with self._lock:
            return [self.simulation.advance_generation() for _ in range(count)]

    async def reset(self) -> None:
        async with self._lock:
            self.simulation.reset()
        logger.info("Simulation reset")

    def status(self) -> dict:
        metrics = self.simulation.metrics
        return {
            "generation": self.simulation.generation,
            "phase": self.simulation.phase.value,
            "counters": self.simulation.counters.as_dict(),
            "metrics": asdict(metrics) if metrics is not None else None,
        }


def _app_config() -> AppConfig:
    config_path = os.environ.get("HATCHERY_CONFIG")
    if config_path:
        return AppConfig(simulation=SimulationConfig.from_yaml(Path(config_path)))
    return AppConfig()


_config = _app_config()
app = FastAPI(title="Hatchery Generation Simulation")
controller = SimulationController(_config.simulation, advance_limit=_config.advance_limit)


@app.get("/api/status")
async def status() -> JSONResponse:
    return JSONResponse(controller.status())


@app.get("/api/snapshot")
async def snapshot() -> JSONResponse:
    return JSONResponse(asdict(controller.simulation.snapshot()))


@app.post("/api/control/advance")
async def advance(payload: dict | None = None) -> JSONResponse:
    count = (payload or {}).get("count", 1)
    results = await controller.advance(count)
    return JSONResponse(
        {
            "generation": controller.simulation.generation,
            "metrics": [asdict(metrics) for metrics in results],
            "counters": controller.simulation.counters.as_dict(),
        }
    )


@app.post("/api/control/reset")
async def reset_simulation() -> JSONResponse:
    await controller.reset()
    return JSONResponse(controller.status())


__all__ = ["app", "controller", "SimulationController"]

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .metrics import GenerationMetrics


@dataclass(slots=True)
class Snapshot:
    generation: int
    counters: Dict[str, Any]
    metrics: Optional[GenerationMetrics]
    organisms: List[Dict[str, Any]]
    pairs: List[Dict[str, int]]
    metadata: "SnapshotMetadata"


@dataclass(slots=True)
class SnapshotMetadata:
    seed: int
    config_version: str
    starting_organisms: int
    offspring_per_pair: int

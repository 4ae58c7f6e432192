from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any, List, Sequence

from ..config import SimConfig, DEMO_GEOMETRIES
from ..utils.logging import get_logger
from .cache import SetAssociativeCache, HitInfo
from .geometry import CacheGeometry

logger = get_logger(__name__)

@dataclass
class RunResult:
    """Outcome of feeding one trace through one cache."""
    label: str
    geometry: CacheGeometry
    info: HitInfo

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "geometry": self.geometry.to_dict(),
            "stats": self.info.to_dict(),
        }


def simulate(trace: Sequence[int], geometry: CacheGeometry, label: str = "",
             fill_updates_recency: bool = True) -> RunResult:
    """Builds a fresh cache for ``geometry`` and runs ``trace`` through it."""
    cache = SetAssociativeCache(geometry, fill_updates_recency=fill_updates_recency)
    info = cache.process_requests(trace)
    label = label or f"{geometry.num_sets}x{geometry.associativity}"
    logger.info(f"{label}: {len(trace)} accesses, {info.misses} misses, {info.hits} hits ({info.hit_rate:.2%})")
    return RunResult(label=label, geometry=geometry, info=info)


def run(trace: Sequence[int], config: SimConfig) -> List[RunResult]:
    """
    Runs the simulation for a trace and configuration.

    This is the main entry point for single-geometry runs; the geometry is
    validated here, before any address is processed.
    """
    geometry = config.geometry()
    logger.info(f"Simulating {geometry.describe()}")
    return [simulate(trace, geometry, fill_updates_recency=config.fill_updates_recency)]


def run_demo(trace: Sequence[int], config: SimConfig | None = None) -> List[RunResult]:
    """Runs ``trace`` through each of the four 128-byte demonstration caches."""
    fill_updates_recency = config.fill_updates_recency if config else True
    results = []
    for i, (line_size, num_sets, associativity) in enumerate(DEMO_GEOMETRIES, start=1):
        geometry = CacheGeometry(line_size=line_size, num_sets=num_sets, associativity=associativity)
        results.append(simulate(trace, geometry, label=f"Test {i}",
                                fill_updates_recency=fill_updates_recency))
    return results

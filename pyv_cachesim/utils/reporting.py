from __future__ import annotations
import json
from pathlib import Path
from typing import List, Dict, Any
from ..config import SimConfig
from ..runtime.simulator import RunResult
from . import viz

def generate_report_json(results: List[RunResult], config: SimConfig) -> Dict[str, Any]:
    """Generates a JSON-compatible dictionary from the simulation results."""
    runs = [result.to_dict() for result in results]

    total_hits = sum(result.info.hits for result in results)
    total_misses = sum(result.info.misses for result in results)
    total_accesses = total_hits + total_misses

    return {
        "runs": runs,
        "total_hits": total_hits,
        "total_misses": total_misses,
        "total_accesses": total_accesses,
        "config": config.__dict__,
    }

def print_summary(results: List[RunResult]):
    """Prints a per-configuration banner and miss/hit counts."""
    for result in results:
        print("-" * 95)
        print(f"Beginning {result.label}: {result.geometry.describe()}\n")
        print(f"Number of Cache Misses: {result.info.misses}")
        print(f"Number of Cache Hits: {result.info.hits}")
        print(f"Hit Rate: {result.info.hit_rate:.2%}\n")

def generate_report(results: List[RunResult], config: SimConfig):
    """Generates all report artifacts."""
    report_data = generate_report_json(results, config)
    output_dir = Path(config.report_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    with open(output_dir / "report.json", "w") as f:
        json.dump(report_data, f, indent=4)

    chart_path = Path(config.chart) if config.chart else output_dir / "report.html"
    chart_path.parent.mkdir(parents=True, exist_ok=True)
    viz.export_hit_miss_chart(report_data['runs'], str(chart_path))

    print_summary(results)
    print(viz.export_hit_miss_ascii(report_data['runs']))

    print(f"Reports generated in {output_dir.absolute()}")

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import yaml
from pathlib import Path

from .runtime.geometry import CacheGeometry
from .utils.logging import get_logger

logger = get_logger(__name__)

# (line_size, num_sets, associativity) of the four 128-byte demonstration caches
DEMO_GEOMETRIES: List[Tuple[int, int, int]] = [
    (16, 8, 1),  # direct mapped
    (16, 4, 2),
    (16, 2, 4),
    (16, 1, 8),  # fully associative
]

@dataclass
class SimConfig:
    """PyV-CacheSim configuration."""
    # Trace file; empty means the built-in demonstration trace
    trace: str = ""

    # Config file
    config_file: str = ""

    # Reporting
    report_dir: str = "out/default_run"
    chart: str = ""
    log_level: str = "INFO"

    # Cache geometry
    line_size: int = 16
    num_sets: int = 8
    associativity: int = 1
    address_bits: int = 16

    # Replacement bookkeeping: mark a line most recently used when it is filled on a miss
    fill_updates_recency: bool = True

    def geometry(self) -> CacheGeometry:
        """Builds (and validates) the cache geometry described by this config."""
        return CacheGeometry(
            line_size=self.line_size,
            num_sets=self.num_sets,
            associativity=self.associativity,
            address_bits=self.address_bits,
        )

    def update_from_yaml(self, yaml_path: str):
        """Updates config fields from a YAML file."""
        with open(yaml_path, 'r') as f:
            yaml_config = yaml.safe_load(f) or {}
        for key, value in yaml_config.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                logger.warning(f"Ignoring unknown config key '{key}' in {yaml_path}")

    @classmethod
    def from_args(cls, args) -> SimConfig:
        """Factory method to create a SimConfig from parsed argparse arguments."""
        config = cls()

        # 1. Load from YAML config file if provided
        if hasattr(args, 'config') and args.config:
            config.config_file = args.config
            if Path(config.config_file).exists():
                config.update_from_yaml(config.config_file)
            else:
                logger.warning(f"Config file {config.config_file} not found.")

        # 2. Override with command-line arguments
        arg_dict = vars(args)
        for key, value in arg_dict.items():
            if value is not None and hasattr(config, key):
                setattr(config, key, value)

        return config

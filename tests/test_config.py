import yaml
import argparse
from pathlib import Path
import pytest
from pyv_cachesim.config import SimConfig, DEMO_GEOMETRIES
from pyv_cachesim.runtime.errors import InvalidGeometry

def test_config_yaml_loading(tmp_path: Path):
    """Tests that config is loaded correctly from a YAML file."""
    yaml_content = {
        'num_sets': 2,
        'associativity': 4,
        'fill_updates_recency': False
    }
    yaml_file = tmp_path / "test.yaml"
    with open(yaml_file, 'w') as f:
        yaml.dump(yaml_content, f)

    # Simulate args parsed from CLI, where only config and trace are provided
    args = argparse.Namespace(config=str(yaml_file), trace="demo.trace", num_sets=None, associativity=None)

    config = SimConfig.from_args(args)

    assert config.num_sets == 2
    assert config.associativity == 4
    assert config.fill_updates_recency is False
    assert config.trace == "demo.trace"
    assert config.config_file == str(yaml_file)

def test_config_cli_override(tmp_path: Path):
    """Tests that CLI arguments override YAML settings."""
    yaml_content = {
        'num_sets': 2,
        'associativity': 4,
        'line_size': 32
    }
    yaml_file = tmp_path / "test.yaml"
    with open(yaml_file, 'w') as f:
        yaml.dump(yaml_content, f)

    # Simulate args parsed from CLI, with values overriding the YAML
    args = argparse.Namespace(
        config=str(yaml_file),
        trace=None,
        num_sets=8,       # Override
        associativity=1   # Override
    )

    config = SimConfig.from_args(args)

    assert config.num_sets == 8          # Overridden value
    assert config.associativity == 1     # Overridden value
    assert config.line_size == 32        # Value from YAML

def test_config_missing_file_keeps_defaults(caplog):
    args = argparse.Namespace(config="does/not/exist.yaml", trace=None)

    config = SimConfig.from_args(args)

    assert config.num_sets == SimConfig().num_sets
    assert "not found" in caplog.text

def test_config_unknown_yaml_key_is_ignored(tmp_path: Path, caplog):
    yaml_file = tmp_path / "test.yaml"
    yaml_file.write_text("ways: 4\nassociativity: 2\n")

    config = SimConfig()
    config.update_from_yaml(str(yaml_file))

    assert config.associativity == 2
    assert not hasattr(config, "ways")
    assert "ways" in caplog.text

def test_config_empty_yaml(tmp_path: Path):
    yaml_file = tmp_path / "empty.yaml"
    yaml_file.write_text("")

    config = SimConfig()
    config.update_from_yaml(str(yaml_file))

    assert config == SimConfig()

def test_config_geometry():
    """Tests that the geometry is built from, and validated against, the config fields."""
    # given
    config = SimConfig(line_size=16, num_sets=4, associativity=2)

    # when
    geometry = config.geometry()

    # then
    assert geometry.capacity_bytes == 128
    assert geometry.tag_bits == 10

    config.line_size = 24
    with pytest.raises(InvalidGeometry):
        config.geometry()

def test_demo_geometries_are_all_128_bytes():
    assert len(DEMO_GEOMETRIES) == 4
    for line_size, num_sets, associativity in DEMO_GEOMETRIES:
        assert line_size * num_sets * associativity == 128

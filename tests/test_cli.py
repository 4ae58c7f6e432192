import json
from pathlib import Path
import pytest
from pyv_cachesim.cli.main import build_parser, main


def test_parser_run_defaults_are_none():
    """Unset CLI options must stay None so YAML values are not overridden."""
    args = build_parser().parse_args(["run"])

    assert args.trace is None
    assert args.num_sets is None
    assert args.associativity is None
    assert args.fill_updates_recency is None


def test_parser_hit_only_flag():
    args = build_parser().parse_args(["demo", "--hit-only-recency"])
    assert args.fill_updates_recency is False


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_demo_command(tmp_path: Path, capsys):
    main(["demo", "--report", str(tmp_path)])

    out = capsys.readouterr().out
    assert "Beginning Test 4: 128 byte 8-way associative cache with 16 bytes per line (fully associative)" in out
    assert "Exiting Program . . . ." in out

    report = json.loads((tmp_path / "report.json").read_text())
    assert [(r["stats"]["misses"], r["stats"]["hits"]) for r in report["runs"]] == [
        (23, 9), (19, 13), (17, 15), (16, 16)
    ]


def test_run_command_with_trace_and_yaml(tmp_path: Path):
    trace_file = tmp_path / "loop.trace"
    trace_file.write_text("0x0000 0x0010 0x0020\n0x0000 0x0010 0x0020\n")
    yaml_file = tmp_path / "cache.yaml"
    yaml_file.write_text("line_size: 16\nnum_sets: 1\nassociativity: 2\n")

    main(["run", str(trace_file), "-c", str(yaml_file), "--report", str(tmp_path / "out")])

    report = json.loads((tmp_path / "out" / "report.json").read_text())
    run = report["runs"][0]
    assert run["label"] == "1x2"
    # Three lines cycling through two ways never hit under LRU
    assert run["stats"] == {"hits": 0, "misses": 6, "accesses": 6, "hit_rate": 0.0}


def test_run_command_cli_geometry_overrides_yaml(tmp_path: Path):
    trace_file = tmp_path / "loop.trace"
    trace_file.write_text("0x0000 0x0010 0x0020\n0x0000 0x0010 0x0020\n")
    yaml_file = tmp_path / "cache.yaml"
    yaml_file.write_text("num_sets: 1\nassociativity: 2\n")

    main(["run", str(trace_file), "-c", str(yaml_file), "--ways", "4",
          "--report", str(tmp_path)])

    report = json.loads((tmp_path / "report.json").read_text())
    assert report["runs"][0]["stats"]["hits"] == 3
    assert report["config"]["associativity"] == 4

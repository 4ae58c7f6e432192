from __future__ import annotations
import argparse
from ..trace.loader import DEMO_TRACE, load_trace
from ..runtime.simulator import run as run_sim, run_demo
from ..config import SimConfig
from ..utils.logging import get_logger
from ..utils.reporting import generate_report


def _load(config: SimConfig):
    if config.trace:
        return load_trace(config.trace)
    return list(DEMO_TRACE)


def cmd_run(args):
    """Handles the 'run' command."""
    # Create simulator config from args
    config = SimConfig.from_args(args)
    logger = get_logger("pyv_cachesim", config.log_level)
    logger.debug(f"Simulator configuration: {config}")

    trace = _load(config)
    results = run_sim(trace, config)
    generate_report(results, config)


def cmd_demo(args):
    """Handles the 'demo' command."""
    config = SimConfig.from_args(args)
    get_logger("pyv_cachesim", config.log_level)

    results = run_demo(_load(config), config)
    generate_report(results, config)
    print("Exiting Program . . . .")


def build_parser():
    p = argparse.ArgumentParser(
        prog="pyv-cachesim",
        description="PyV-CacheSim: set-associative cache simulator with MRU-matrix LRU",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # Arguments shared by both commands (default=None to allow override from YAML)
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--config", type=str, default=None,
                        help="Path to YAML config file to override defaults")
    common.add_argument("--report", type=str, default=None, dest="report_dir",
                        help="Directory to save simulation reports")
    common.add_argument("--chart", type=str, default=None,
                        help="Path to save the hit/miss chart HTML file")
    common.add_argument("--log-level", type=str, default=None, dest="log_level",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (DEBUG traces every reference)")
    common.add_argument("--hit-only-recency", action="store_const", const=False,
                        default=None, dest="fill_updates_recency",
                        help="Do not mark a line most recently used when it is filled on a miss")

    # --- Run Command ---
    pr = sub.add_parser("run", parents=[common], help="Simulate one cache geometry on a trace",
                        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    pr.add_argument("trace", nargs='?', default=None,
                    help="Path to address trace file (demonstration trace if omitted)")

    geometry_group = pr.add_argument_group('Cache Geometry Arguments')
    geometry_group.add_argument("--line-size", type=int, default=None, dest="line_size",
                                help="Bytes per cache line (power of two)")
    geometry_group.add_argument("--sets", type=int, default=None, dest="num_sets",
                                help="Number of sets (power of two)")
    geometry_group.add_argument("--ways", type=int, default=None, dest="associativity",
                                help="Associativity (ways per set)")
    geometry_group.add_argument("--address-bits", type=int, default=None, dest="address_bits",
                                help="Width of the address space in bits")
    pr.set_defaults(func=cmd_run)

    # --- Demo Command ---
    pdemo = sub.add_parser("demo", parents=[common],
                           help="Run the four 128-byte demonstration caches",
                           formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    pdemo.add_argument("trace", nargs='?', default=None,
                       help="Path to address trace file (demonstration trace if omitted)")
    pdemo.set_defaults(func=cmd_demo)

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()

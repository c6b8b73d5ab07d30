"""
sumcheck-core - Command Line Entry Point

Runs the scripted prover demo over one of the preset fields.

Run with:
    python -m sumcheck_core.main --preset test --seed 7
    sumcheck-demo --preset bls12-381 --log-level DEBUG
"""

import argparse
import logging
import sys
from dataclasses import replace

from .prover.config import PRESETS
from .prover.demo import format_rounds, run_demo

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sumcheck-demo",
        description="Run the prover round by round on 3*x^2*y + 5*y^2 + 7.",
    )
    parser.add_argument("--preset", choices=sorted(PRESETS), default="test",
                        help="field preset (default: test, Z_97)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random challenges")
    parser.add_argument("--log-level", default=None,
                        help="logging level, e.g. DEBUG or INFO")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = PRESETS[args.preset](seed=args.seed)
    if args.log_level is not None:
        try:
            config = replace(config, log_level=args.log_level)
        except ValueError as e:
            parser.error(str(e))
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print(config.summary())
    print()

    result = run_demo(config)
    print(format_rounds(result))
    print()
    print(f"f(r) = {result.final_value}")
    print(f"s_last(r_last) = {result.last_round_value}")

    if not result.consistent:
        _logger.warning("last round polynomial disagrees with f at the challenge point")
    return 0


if __name__ == "__main__":
    sys.exit(main())

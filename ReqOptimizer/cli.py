#!/bin/python
"""
Command-line entry point: select profit-maximizing requirements within a fixed cost.

Example:
    reqopt requirements.json --budget 500
    reqopt requirements.csv --budget 500 --greedy --json
"""
import argparse
import json
import sys
from typing import List, Optional

from Core.problem import SelectionResult

from .core.config import add_optimizer_args, config_from_args
from .core.optimizer import Optimizer
from .core.utils import setup_logging
from .io import read_requirements


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Select the requirements that maximize perceived profit without exceeding a fixed cost."
    )
    parser.add_argument("requirements", help="Path to a .json or .csv requirements file")
    parser.add_argument(
        "--budget",
        "-b",
        type=int,
        required=True,
        help="Fixed cost the selected requirements may not exceed",
    )
    add_optimizer_args(parser)
    parser.add_argument("--log-dir", default=None, help="Also append log lines to <log-dir>/optimize_logs.log")
    parser.add_argument("--json", action="store_true", help="Print the selection as JSON")
    return parser


def format_report(result: SelectionResult) -> str:
    algorithm = result.algorithm.capitalize()
    lines = [f"Algorithm used: {algorithm}", f"Chosen requirements ({len(result)}):"]
    for idx, req in enumerate(result.chosen, start=1):
        label = req.name or f"#{idx}"
        lines.append(f"  - {label}: cost={req.cost}, profit={req.profit}")
    lines.append(f"Total cost: {result.total_cost} / {result.budget}")
    lines.append(f"Total profit: {result.total_profit}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging("optimize", "requirements", log_dir=args.log_dir)

    try:
        config = config_from_args(args)
        requirements = read_requirements(args.requirements)
        result = Optimizer(config, logger=logger).optimize(requirements, args.budget)
    except ValueError as exc:  # SchemaError, InvalidInputError, bad config
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())

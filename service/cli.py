#!/usr/bin/env python3
"""
Network grader CLI

Reads a network design from a JSON file, grades it and prints the
sub-score table and feedback. The file may hold either the request body
(``{"network": {...}}``) or the network object itself. ``--config`` names a
JSON object of ScoringConfig setting overrides.

Exit status: 0 when the design passes, 1 when it does not, 2 when an input
file cannot be read, the configuration is invalid or the network cannot be
evaluated.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape

from scoring import NetworkTopologyScorer, ScoringConfig, ScoringError
from utils.logging_utils import setup_logging, print_analysis_result

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Grade a network topology design",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("path", help="Path to a JSON network description")
    p.add_argument("--config", default=None, help="JSON file of scoring setting overrides")
    p.add_argument("--threshold", type=int, default=None, help="Override the pass threshold")
    p.add_argument("--json", action="store_true", help="Print the raw response body instead of a table")
    p.add_argument("--log-level", default="WARNING", help="Logging level for the grader packages")
    return p.parse_args(argv)


def load_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_network(path: Path) -> Dict[str, Any]:
    """Load the network object from a request body or bare network file."""
    data = load_json(path)
    if isinstance(data, dict) and "network" in data:
        return data["network"]
    return data


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    console = Console()

    try:
        network = load_network(Path(args.path))
        overrides = load_json(Path(args.config)) if args.config else {}
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[bold red]Cannot read input: {escape(str(e))}[/bold red]")
        return EXIT_ERROR

    logger.info(f"Grading network from {args.path}")
    try:
        config = ScoringConfig.from_dict(overrides)
        if args.threshold is not None:
            config.update_settings(pass_threshold=args.threshold)
        result = NetworkTopologyScorer(config).evaluate(network)
    except ScoringError as e:
        console.print(f"[bold red]{escape(e.message)}[/bold red]")
        return EXIT_ERROR

    if args.json:
        console.print_json(json.dumps(result.to_response()))
    else:
        print_analysis_result(result, console=console, title=Path(args.path).name)

    return EXIT_PASSED if result.passed else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())

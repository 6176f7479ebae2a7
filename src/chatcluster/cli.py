"""Summary: Command-line interface for ChatCluster.

Importance: Provides a local entry point for clustering exported chat logs.
Alternatives: Use the HTTP API for every workflow.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chatcluster.app import build_services
from chatcluster.config import AppConfig
from chatcluster.errors import ChatClusterError
from chatcluster.rule_sets import list_rule_sets


def build_parser() -> argparse.ArgumentParser:
    """Summary: Build the CLI argument parser.

    Importance: Defines supported commands for local operation.
    Alternatives: Use a CLI framework like Typer or Click.
    """

    parser = argparse.ArgumentParser(description="ChatCluster CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    cluster = subparsers.add_parser("cluster", help="Cluster a JSON array of chat messages")
    cluster.add_argument("path", nargs="?", default="-", help="Input file, or - for stdin")
    cluster.add_argument("--rule-set", type=str, default=None)
    cluster.add_argument("--indent", type=int, default=2)

    summarize = subparsers.add_parser("summarize", help="Summarize clustered chat messages")
    summarize.add_argument("path", nargs="?", default="-", help="Input file, or - for stdin")
    summarize.add_argument("--rule-set", type=str, default=None)

    subparsers.add_parser("list-rule-sets", help="List keyword rule sets")

    return parser


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def run_cli(argv: list[str] | None = None) -> int:
    """Summary: Execute CLI commands based on arguments.

    Importance: Maps boundary errors to a non-zero exit status.
    Alternatives: Let exceptions propagate with a traceback.
    """

    parser = build_parser()
    args = parser.parse_args(argv)
    config = AppConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "list-rule-sets":
        for rule_set in list_rule_sets():
            print(f"{rule_set.name}: {', '.join(rule_set.labels)}")
        return 0

    try:
        services = build_services(config, rule_set=args.rule_set)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        payload = _read_input(args.path)
        if args.command == "cluster":
            print(services.clustering.cluster_json(payload, indent=args.indent))
        elif args.command == "summarize":
            print(services.clustering.summarize(payload)["summary"])
    except (ChatClusterError, OSError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()

"""
Command line interface for UI tree path queries.

Evaluates path expressions against a JSON snapshot or a directory tree.
"""

import argparse
import sys
from typing import List, Optional

from .core.errors import PathQueryError
from .core.evaluator import PathEvaluator
from .core.pattern import quote
from .nodes.base import PathNode, PathRoot, describe_node
from .nodes.filesystem import FileNode
from .nodes.process import ProcessNode, ProcessRoot
from .nodes.snapshot import SnapshotRoot
from .types.models import QueryResult
from .utils.config import load_settings
from .utils.logger import PathQueryLogger, configure_logging


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ui-tree-paths",
        description="Select nodes of a labelled tree with path expressions",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=None,
        help="Increase logging verbosity (repeat up to 3 times)",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        help="Read settings from this .env file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("query", "Print the nodes selected by a path"),
        ("describe", "Print the name and parameters of the selected nodes"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("path", help="Path expression")
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument("--snapshot", type=str, help="JSON file with one snapshot or a list")
        source.add_argument("--dir", type=str, help="Directory to start from")
        source.add_argument("--processes", action="store_true", help="Query the running processes")
        sub.add_argument(
            "--single",
            type=str,
            metavar="KIND",
            help="Fail if more than one node matches; KIND names the node in the error",
        )
        sub.add_argument("--json", action="store_true", help="Print JSON output")

    sub = subparsers.add_parser("quote", help="Quote a value for literal matching")
    sub.add_argument("value", help="Value to quote")

    return parser.parse_args(args)


def _clamp_verbose(count: Optional[int]) -> Optional[int]:
    if count is None:
        return None
    return min(count, 3)


def load_root(parsed: argparse.Namespace) -> PathRoot:
    """Build the root named on the command line."""
    if parsed.snapshot:
        return SnapshotRoot.from_json_file(parsed.snapshot)
    if parsed.processes:
        return ProcessRoot()
    return FileNode(parsed.dir)


def format_node(node: PathNode) -> str:
    """Render a node on one line."""
    if isinstance(node, FileNode):
        return str(node.path)
    if isinstance(node, ProcessNode):
        return f"{node.pid}\t{node.node_name}"
    return node.node_name


def run_query(parsed: argparse.Namespace, evaluator: PathEvaluator) -> int:
    """Run the ``query`` and ``describe`` commands."""
    root = load_root(parsed)
    if parsed.single:
        node = evaluator.evaluate_single(root, parsed.path, parsed.single)
        nodes = [node] if node is not None else []
    else:
        nodes = evaluator.evaluate(parsed.path, root)

    if parsed.json:
        result = QueryResult(
            path=parsed.path,
            count=len(nodes),
            nodes=[describe_node(node) for node in nodes],
            single=bool(parsed.single) or None,
        )
        print(result.model_dump_json(indent=2, exclude_none=True))
        return 0

    for node in nodes:
        print(format_node(node))
        if parsed.command == "describe":
            for name, value in describe_node(node).non_empty().items():
                print(f"  {name}={value}")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    if parsed.command == "quote":
        print(quote(parsed.value))
        return 0

    try:
        settings = load_settings(parsed.env_file, {"verbose": _clamp_verbose(parsed.verbose)})
    except PathQueryError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    logger = PathQueryLogger(configure_logging(settings.verbose), settings.verbose)
    evaluator = PathEvaluator(settings, logger.child(component="cli"))

    try:
        return run_query(parsed, evaluator)
    except PathQueryError as e:
        logger.debug("cli:error", "Query failed", **e.details)
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

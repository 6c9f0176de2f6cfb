#!/usr/bin/env python3
"""
CLI entry point for rebuilding a tree from a relations file.

Usage:
    reltree relations.json -o tree.dot
    python3 -m reltree.main relations.json --format ascii
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .models import Node
from .tree import deserialize, load_relations, render_ascii, render_debug, render_json, write_dot


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Rebuild a tree from parent/child relations and dump it as Graphviz dot."
    )
    parser.add_argument(
        "relations",
        help="JSON file holding an array of {\"id\", \"parent_id\"} objects",
    )
    parser.add_argument(
        "--output", "-o",
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--format",
        choices=["dot", "ascii", "json", "debug"],
        default="dot",
        help="Output format (default: dot)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Load relations, rebuild the tree and render it."""
    args = parse_args(argv)
    relations_path = Path(args.relations)

    if not relations_path.exists():
        print(f"Error: path '{relations_path}' does not exist", file=sys.stderr)
        sys.exit(1)

    try:
        relations = load_relations(relations_path)
    except (OSError, ValueError) as e:
        print(f"Error: could not read relations from '{relations_path}': {e}", file=sys.stderr)
        sys.exit(1)

    result = deserialize(relations)
    if result.root is None:
        print(f"Error: {result.error.message}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                _write(result.root, args.format, f)
        else:
            _write(result.root, args.format, sys.stdout)
    except OSError as e:
        print(f"Error: could not write output: {e}", file=sys.stderr)
        sys.exit(1)

    if not result.ok:
        # Partial tree was still written
        unresolved = ", ".join(result.error.metadata.get("unresolved", []))
        print(f"Warning: {result.error.message}: {unresolved}", file=sys.stderr)
        sys.exit(1)


def _write(root: Node, format_type: str, stream) -> None:
    if format_type == "dot":
        write_dot(root, stream)
    elif format_type == "ascii":
        stream.write(render_ascii(root) + "\n")
    elif format_type == "json":
        stream.write(render_json(root) + "\n")
    else:
        stream.write(render_debug(root) + "\n")


if __name__ == "__main__":
    main()

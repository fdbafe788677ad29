# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run the normalizer over JSON exported from the store.
#
# COMMANDS:
# ---------
# 1. Normalize records (stdin or file) and print JSON:
#    python -m graphnorm.cli normalize records.json --schema user.json --clean
#    python -m graphnorm.cli normalize - --save users-2026-10
#
# 2. Show node / leaf / repeated-reference counts of a graph:
#    python -m graphnorm.cli stats records.json
#
# 3. Print a saved snapshot:
#    python -m graphnorm.cli show users-2026-10
#
# ==============================================

import argparse
import json
import logging
import sys
from typing import Any, Optional

from .config import get_config
from .errors import GraphNormError
from .export.json_export import dumps
from .normalization import clean_orient_attributes, rewrite_ids_recursive
from .persistence import SnapshotStore
from .traversal import ProcessedSet, for_each_nested, reduce_nested_objects


def _load_json(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def normalize_graph(records: Any, schema: Optional[dict] = None, clean: bool = False) -> Any:
    """Rewrite ids across the graph; optionally strip driver attributes afterwards."""
    result = rewrite_ids_recursive(records, schema)
    if clean:
        for record in (result if isinstance(result, list) else [result]):
            clean_orient_attributes(record, schema)
    return result


def graph_stats(graph: Any, root_key: str = "_root") -> dict:
    """Count containers, leaves and repeated references of a graph."""
    def _count_node(acc, node, key):
        if isinstance(node, dict):
            acc["objects"] += 1
        elif isinstance(node, list):
            acc["arrays"] += 1
        return acc

    stats = reduce_nested_objects(graph, _count_node, {"objects": 0, "arrays": 0}, root_key)
    stats["leaves"] = 0
    stats["repeated_references"] = 0

    def _count_leaf(value, key, parent):
        stats["leaves"] += 1

    def _count_repeat(value, key, parent):
        stats["repeated_references"] += 1

    for_each_nested(graph, _count_leaf, ProcessedSet(), _count_repeat)
    return stats


def cmd_normalize(args) -> int:
    config = get_config()
    records = _load_json(args.path)
    schema = _load_json(args.schema) if args.schema else None

    result = normalize_graph(records, schema, args.clean)

    if args.save:
        path = SnapshotStore().save(args.save, result)
        print(f"Saved snapshot to {path}", file=sys.stderr)

    print(dumps(result, indent=config.output.json_indent,
                placeholder=config.traversal.circular_placeholder))
    return 0


def cmd_stats(args) -> int:
    config = get_config()
    stats = graph_stats(_load_json(args.path), config.traversal.root_key)
    for name, count in stats.items():
        print(f"{name}: {count}")
    return 0


def cmd_show(args) -> int:
    config = get_config()
    graph = SnapshotStore().load(args.name)
    print(json.dumps(graph, indent=config.output.json_indent))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="graphnorm", description="Normalize record graphs fetched from the store.")
    sub = p.add_subparsers(dest="command", required=True)

    normalize = sub.add_parser("normalize", help="Rewrite @rid/rid to id across a JSON graph")
    normalize.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    normalize.add_argument("--schema", help="JSON file with the collection schema")
    normalize.add_argument("--clean", action="store_true", help="Strip '@' attributes and unexpanded edges from top-level records")
    normalize.add_argument("--save", metavar="NAME", help="Also store the result as a snapshot")
    normalize.set_defaults(func=cmd_normalize)

    stats = sub.add_parser("stats", help="Count nodes, leaves and repeated references")
    stats.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    stats.set_defaults(func=cmd_stats)

    show = sub.add_parser("show", help="Print a saved snapshot")
    show.add_argument("name")
    show.set_defaults(func=cmd_show)

    return p


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_config().log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except (GraphNormError, OSError, ValueError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

"""
CLI entrypoint for MeSH tree queries.

This script performs the following steps:
- loads .env and configs/meshtree.yaml (both optional)
- loads the configured MeSH tree file, or the embedded excerpt
- runs a single query or export command
- prints query results as JSON on stdout (logs go to stderr / log file)
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from application import (
    build_term_report,
    dump_mesh_tree_json,
    log_term_report_summary,
    write_locations_table,
    write_term_report,
)
from domain.mesh import MeshTree, MeshTreeError
from infrastructure.config import TreeConfig, load_tree_config
from infrastructure.constants import CONFIG_FILE, ENV_FILE
from infrastructure.io import load_default_mesh_tree, load_mesh_tree, read_terms
from infrastructure.observability import configure_logging, set_log_context

logger = logging.getLogger(__name__)

TERM_COMMANDS = ("contains", "depth", "explode", "parents", "reference")
LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Query a MeSH tree")
    p.add_argument(
        "--config",
        type=str,
        default=str(CONFIG_FILE),
        help="Path to meshtree.yaml (default: configs/meshtree.yaml; skipped if missing)",
    )
    p.add_argument("--env", type=str, default=str(ENV_FILE), help="Path to .env file (default: .env)")
    p.add_argument("--tree-file", type=str, default=None, help="MeSH tree file; overrides config and env")
    p.add_argument("--log-file", type=str, default=None, help="Rotating log file; overrides config")
    p.add_argument("--console-level", type=str, default="WARNING", choices=LEVELS, help="Console log level")
    p.add_argument("--file-level", type=str, default="DEBUG", choices=LEVELS, help="File log level")

    sub = p.add_subparsers(dest="command", required=True)
    for name in TERM_COMMANDS:
        sp = sub.add_parser(name, help=f"{name} for a MeSH term")
        sp.add_argument("term", help="MeSH heading (case-insensitive)")

    sp = sub.add_parser("dump", help="Write the tree and location index as JSON")
    sp.add_argument("out", help="Output JSON path")

    sp = sub.add_parser("table", help="Write one row per (heading, tree number) as CSV")
    sp.add_argument("out", help="Output CSV path")

    sp = sub.add_parser("report", help="Look up every term in a list (.txt/.csv/.xlsx)")
    sp.add_argument("terms_file", help="Term list file")
    sp.add_argument("--term-col", default=None, help="Column holding terms (tables only; default: first)")
    sp.add_argument("--out", default=None, help="Optional CSV output path")

    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> TreeConfig:
    config_path = Path(args.config)
    cfg = load_tree_config(config_path if config_path.exists() else None)

    updates = {}
    if args.tree_file:
        updates["tree_file"] = Path(args.tree_file)
    if args.log_file:
        updates["log_file"] = Path(args.log_file)
    return cfg.model_copy(update=updates) if updates else cfg


def _load(cfg: TreeConfig) -> MeshTree:
    if cfg.tree_file is None:
        return load_default_mesh_tree()
    return load_mesh_tree(cfg.tree_file, encoding=cfg.encoding)


def _run_term_command(mesh: MeshTree, command: str, term: str) -> object:
    if command == "contains":
        return mesh.contains(term)
    if command == "depth":
        return mesh.depth(term)
    if command == "explode":
        return mesh.explode(term)
    if command == "parents":
        return mesh.parents(term)
    if command == "reference":
        return [ref.model_dump(mode="json") for ref in mesh.reference(term)]
    raise ValueError(f"Unsupported command: {command}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    try:
        cfg = _resolve_config(args)
    except (ValueError, FileNotFoundError) as e:
        # ValidationError is a ValueError
        logger.error("Invalid configuration: %s", e)
        return 1

    configure_logging(
        log_file=cfg.log_file,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(
        source=str(cfg.tree_file) if cfg.tree_file is not None else "default",
        command=args.command,
    )

    try:
        mesh = _load(cfg)
    except MeshTreeError as e:
        logger.error("Could not load MeSH tree: %s", e)
        return 1

    if args.command in TERM_COMMANDS:
        result = _run_term_command(mesh, args.command, args.term)
        print(json.dumps(result, ensure_ascii=False, indent=2))
    elif args.command == "dump":
        dump_mesh_tree_json(mesh, Path(args.out))
    elif args.command == "table":
        write_locations_table(mesh, Path(args.out))
    elif args.command == "report":
        terms = read_terms(Path(args.terms_file), column=args.term_col)
        df = build_term_report(mesh, terms)
        log_term_report_summary(df)
        if args.out:
            write_term_report(df, Path(args.out))
        else:
            print(df.to_json(orient="records", force_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

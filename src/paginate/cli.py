"""CLI entrypoint for paginate."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from paginate.builder import build
from paginate.clauses import normalize
from paginate.config.loader import get_endpoint, load_config
from paginate.database.executor import fetch_page
from paginate.database.sqlite_client import read_session
from paginate.errors import PaginateError
from paginate.models import PaginateConfig, Query
from paginate.utils.logging import get_logger
from paginate.where import like_keys
from paginate.wildcard import patch_like_query

logger = get_logger(__name__)


def _parse_where(pairs: Optional[List[str]], policy: PaginateConfig) -> Dict[str, Any]:
    """
    Parse repeated key=value flags.

    Values for LIKE filters stay strings so they can be wildcard patched;
    other values are read as YAML scalars (numbers, booleans, dates).
    """
    like = like_keys(policy)
    where_args: Dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid --where value {pair!r}, expected key=value")
        if normalize(key) in like or not raw:
            value = raw
        else:
            value = yaml.safe_load(raw)
            if isinstance(value, (dict, list)):
                value = raw
        where_args[key] = value
    return where_args


def _query_from_args(args: argparse.Namespace, policy: PaginateConfig) -> Query:
    return Query(
        select=args.select or [],
        where_args=_parse_where(args.where, policy),
        page_size=args.page_size,
        page=args.page,
        order_by=args.order_by or [],
        search=args.search or "",
    )


def _load_endpoint(args: argparse.Namespace):
    config = load_config(Path(args.config) if args.config else None)
    return get_endpoint(config, args.endpoint)


def _prepare(args: argparse.Namespace):
    endpoint = _load_endpoint(args)
    query = _query_from_args(args, endpoint.policy)
    if args.patch_like:
        query = patch_like_query(endpoint.policy, query)
    return endpoint, query


def _print_error(error: PaginateError) -> None:
    print(json.dumps({"error": error.to_dict()}), file=sys.stderr)


def cmd_build(args: argparse.Namespace) -> int:
    """Print the bound query for an endpoint without running it."""
    endpoint, query = _prepare(args)
    try:
        bound = build(endpoint.policy, query)
    except PaginateError as e:
        _print_error(e)
        return 2
    sql, sql_args = bound.to_sql(endpoint.table)
    output = bound.model_dump()
    output["sql"] = sql
    output["sql_args"] = sql_args
    print(json.dumps(output, indent=2, default=str))
    return 0


def cmd_query(args: argparse.Namespace) -> int:
    """Run a query against a SQLite database and print the page."""
    endpoint, query = _prepare(args)
    try:
        with read_session(args.db) as session:
            page = fetch_page(session, endpoint.table, endpoint.policy, query)
    except PaginateError as e:
        _print_error(e)
        return 2
    print(json.dumps(page.model_dump(), indent=2, default=str))
    return 0


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=str,
        help="Path to endpoints config (default: paginate.config.yaml)",
    )
    parser.add_argument(
        "--endpoint",
        type=str,
        required=True,
        help="Endpoint name from the config",
    )
    parser.add_argument("--page", type=int, default=1, help="Page number, starting at 1 (default: 1)")
    parser.add_argument("--page-size", type=int, default=0, help="Rows per page (default: endpoint default)")
    parser.add_argument("--select", action="append", help="Column to select (repeatable)")
    parser.add_argument("--order-by", action="append", help='Ordering like "name" or "age desc" (repeatable)')
    parser.add_argument("--where", action="append", help="Filter as key=value (repeatable)")
    parser.add_argument("--search", type=str, help="Search term applied to all LIKE filters")
    parser.add_argument(
        "--patch-like",
        action="store_true",
        help='Wrap LIKE arguments and the search term in "%%"',
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Whitelist-driven search and pagination")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    build_parser = subparsers.add_parser("build", help="Print the bound query as JSON")
    _add_query_arguments(build_parser)
    build_parser.set_defaults(func=cmd_build)

    query_parser = subparsers.add_parser("query", help="Run a query against a SQLite database")
    query_parser.add_argument("--db", type=str, required=True, help="Path to SQLite database")
    _add_query_arguments(query_parser)
    query_parser.set_defaults(func=cmd_query)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except Exception as e:
        logger.error(f"Error running command '{args.command}': {e}", exc_info=True)
        raise


if __name__ == "__main__":
    sys.exit(main())

"""CLI entry point — encode and send a Solr search from the command line.

Examples::

    solrquery -e http://localhost:8983/solr/films q=loch rows=5
    solrquery -c solrquery.yaml -e library q=edinburgh fq=type:book fq=year:2001
    solrquery --dry-run -e suggester suggest=true suggest.q=el
"""

from __future__ import annotations

import argparse
import sys

from solrquery.exceptions import SolrQueryError


def parse_params(items: list[str]) -> list[tuple[str, str]]:
    """Parse ``KEY=VALUE`` arguments into ordered pairs; keys may repeat."""
    pairs: list[tuple[str, str]] = []
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{item}'")
        pairs.append((key, value))
    return pairs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solrquery",
        description="solrquery — Encode and send Solr search requests",
    )
    parser.add_argument(
        "params",
        nargs="*",
        metavar="KEY=VALUE",
        help="Solr parameters; repeat a key for multi-valued parameters",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--endpoint",
        "-e",
        type=str,
        default=None,
        help="Endpoint URL or configured endpoint name (default: configured default)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the request URL without sending it",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"solrquery {_get_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        pairs = parse_params(args.params)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    import yaml  # type: ignore[import-untyped]
    from pydantic import ValidationError

    from solrquery.config.settings import Settings
    from solrquery.observability.logging import setup_logging

    try:
        settings = Settings.from_yaml(args.config) if args.config else Settings()
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValidationError, yaml.YAMLError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        settings.observability.log_level = args.log_level
    setup_logging(settings.observability)

    from solrquery.client.client import SolrClient, encode_search_query
    from solrquery.endpoint import resolve_endpoint

    try:
        if args.dry_run:
            target = resolve_endpoint(args.endpoint, settings)
            query_string = encode_search_query(pairs)
            print(f"{target}?{query_string}")
            return 0

        resp = SolrClient(settings).search(pairs, args.endpoint)
    except SolrQueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"HTTP {resp.status_code} {resp.url}", file=sys.stderr)
    print(resp.body)
    return 0 if resp.ok else 1


def _get_version() -> str:
    """Get the package version."""
    try:
        from solrquery import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from dataclasses import asdict
import json
from typing import Sequence

from eprints.arxiv import (
    ArxivClient,
    ArxivError,
    Eprint,
    EprintListOptions,
    EprintNotFoundError,
    SearchOptions,
)
from eprints.logging_config import configure_logging, parse_redact_fields
from eprints.settings import settings

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eprints", description="Query the arXiv export API.")
    parser.add_argument("--base-url", default=None, help="Override the API base URL.")
    subcommands = parser.add_subparsers(dest="command", required=True)

    get_parser = subcommands.add_parser("get", help="Fetch one e-print by id.")
    get_parser.add_argument("eprint_id")

    list_parser = subcommands.add_parser("list", help="List e-prints matching a query.")
    list_parser.add_argument("--search", default="", help="Raw search_query expression.")
    list_parser.add_argument("--all", default="", help="Free-text search across all fields.")
    list_parser.add_argument("--title", default="")
    list_parser.add_argument("--author", default="")
    list_parser.add_argument("--abstract", default="")
    list_parser.add_argument("--journal-reference", default="")
    list_parser.add_argument("--category", default="")
    list_parser.add_argument("--id", dest="id_list", action="append", default=[])
    list_parser.add_argument("--max-results", type=int, default=0)
    list_parser.add_argument("--start", type=int, default=0)
    list_parser.add_argument("--sort-by", default="")
    list_parser.add_argument("--sort-order", default="")
    return parser


def list_options_from_args(args: argparse.Namespace) -> EprintListOptions:
    search = args.search or str(
        SearchOptions(
            title=args.title,
            author=args.author,
            abstract=args.abstract,
            journal_reference=args.journal_reference,
            category=args.category,
            all=args.all,
        )
    )
    return EprintListOptions(
        search=search,
        id_list=tuple(args.id_list),
        max_results=args.max_results,
        start=args.start,
        sort_by=args.sort_by,
        sort_order=args.sort_order,
    )


def eprint_to_dict(eprint: Eprint) -> dict:
    payload = asdict(eprint)
    payload["arxiv_id"] = eprint.arxiv_id
    return payload


async def _run(args: argparse.Namespace) -> list[dict]:
    client = ArxivClient(base_url=args.base_url)
    if args.command == "get":
        return [eprint_to_dict(await client.eprints.get(args.eprint_id))]
    eprints = await client.eprints.list(list_options_from_args(args))
    return [eprint_to_dict(eprint) for eprint in eprints]


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        redact_fields=parse_redact_fields(settings.log_redact_fields),
    )

    try:
        results = asyncio.run(_run(args))
    except EprintNotFoundError as exc:
        print(json.dumps({"status": "not_found", "error": str(exc)}, indent=2))
        return EXIT_NOT_FOUND
    except ArxivError as exc:
        print(json.dumps({"status": "failed", "error": str(exc)}, indent=2))
        return EXIT_ERROR

    print(json.dumps(results, indent=2, default=str))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

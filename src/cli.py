"""Command-line entrypoint: run the service or analyze links locally."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

from src.complaints import (
    AnalysisSession,
    BatchAbortedError,
    HttpComplaintSource,
    LinkList,
    build_client,
    write_xlsx,
)
from src.config import Settings, get_settings
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _read_links(args: argparse.Namespace) -> LinkList:
    values: list[str] = list(args.urls)
    if args.file:
        lines = Path(args.file).read_text(encoding="utf-8").splitlines()
        values.extend(line for line in lines if line.strip())
    links = LinkList()
    stored = links.extend(values)
    if stored < len(values):
        logger.warning("link list full, extra links ignored", extra={"ignored": len(values) - stored})
    return links


async def _print_event(event: str, data: dict[str, Any]) -> None:
    if event == "scraped":
        print(f"[ok]     {data['url']}  {data['title']}")
    elif event == "failed":
        print(f"[failed] {data['url']}  {data['error']}", file=sys.stderr)


async def analyze_async(args: argparse.Namespace, settings: Settings) -> int:
    if args.skip_failures:
        settings = settings.model_copy(update={"failure_policy": "skip"})
    source = HttpComplaintSource(args.remote) if args.remote else None
    session = AnalysisSession(build_client(settings, source), _read_links(args))

    if not session.can_submit:
        print("No links given (the first link must not be blank).", file=sys.stderr)
        return 2

    try:
        await session.analyze(on_event=_print_event)
    except BatchAbortedError as exc:
        print(f"Analysis aborted: {exc}", file=sys.stderr)
        return 1

    for result in session.results:
        print(f"\nURL: {result.url}\n{result.title}\n{result.complaint_text}\nData: {result.date}")

    if not session.can_export:
        print("Nothing to export.", file=sys.stderr)
        return 1
    path = write_xlsx(session.results, args.output, sheet_name=settings.export_sheet_name)
    print(f"\nExported {len(session.results)} complaint(s) to {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Scrape Reclame Aqui complaint pages")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP scrape service")
    serve.add_argument("--host", help=f"Bind address (default {settings.host})")
    serve.add_argument("--port", type=int, help=f"Port (default {settings.port}, env PORT)")

    analyze = sub.add_parser("analyze", help="Scrape links and export a spreadsheet")
    analyze.add_argument("urls", nargs="*", help="Complaint page URLs")
    analyze.add_argument("--file", "-f", help="Text file with one URL per line")
    analyze.add_argument(
        "--output", "-o", default=settings.export_filename, help="Spreadsheet path"
    )
    analyze.add_argument(
        "--remote",
        nargs="?",
        const=settings.service_url,
        help="Scrape through a running service instead of a local browser",
    )
    analyze.add_argument(
        "--skip-failures",
        action="store_true",
        help="Keep going when a link fails instead of aborting the batch",
    )

    args = parser.parse_args(argv)

    if args.command == "serve":
        from src.main import run

        run(host=args.host, port=args.port)
        return 0

    setup_logging(settings.log_level)
    return asyncio.run(analyze_async(args, settings))


if __name__ == "__main__":
    sys.exit(main())

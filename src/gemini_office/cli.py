"""Command-line entry point.

Usage:
    gemini-office ask report.docx "Summarize the introduction" --insert
    gemini-office insert sales.xlsx --text "Region,Total\\nNorth,10" --select B2
    gemini-office config --json
"""

import argparse
import asyncio
from collections.abc import Sequence
from dataclasses import asdict
import json
import logging
from pathlib import Path
import sys
from typing import Any

from gemini_office.client import Attachment, GeminiChatClient
from gemini_office.config import FrozenConfig, ResolvedConfig, resolve_config
from gemini_office.core.types import WriteOutcome
from gemini_office.exceptions import ConfigurationError, GeminiOfficeError
from gemini_office.hosts import host_kind_for, open_host
from gemini_office.session import AssistantSession

# ruff: noqa: T201

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gemini-office",
        description="Ask Gemini about a document and write the answer into it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--profile", help="Configuration profile to use")
    commands = parser.add_subparsers(dest="command", required=True)

    ask = commands.add_parser("ask", help="Send a prompt with document context")
    ask.add_argument("document", type=Path, help=".docx, .xlsx or .pptx file")
    ask.add_argument("prompt", help="What to ask")
    ask.add_argument("--attach", type=Path, help="File to send with the prompt")
    ask.add_argument(
        "--insert", action="store_true", help="Write the reply into the document"
    )
    _add_write_options(ask)

    insert = commands.add_parser(
        "insert", help="Write a response into a document without calling the model"
    )
    insert.add_argument("document", type=Path, help=".docx, .xlsx or .pptx file")
    source = insert.add_mutually_exclusive_group()
    source.add_argument("--text", help="Response text (default: read stdin)")
    source.add_argument("--from-file", type=Path, help="Read the response from a file")
    _add_write_options(insert)

    config = commands.add_parser("config", help="Show the effective configuration")
    config.add_argument("--json", action="store_true", help="Output as JSON")
    return parser


def _add_write_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output", type=Path, help="Save to this path instead")
    parser.add_argument("--select", help="Spreadsheet range to use as the selection")


def _report(outcome: WriteOutcome, saved_to: Path | None) -> int:
    if outcome.skipped:
        print(f"Nothing inserted: {outcome.error_detail}")
        return EXIT_OK
    if not outcome.succeeded:
        print(f"❌ Insert failed: {outcome.error_detail}", file=sys.stderr)
        return EXIT_FAILED
    note = " (as plain text)" if outcome.fallback_used else ""
    print(f"Inserted into {saved_to}{note}")
    return EXIT_OK


async def _insert_reply(
    session: AssistantSession, text: str, args: argparse.Namespace
) -> int:
    outcome = await session.insert(text)
    saved_to = None
    if outcome.succeeded and not outcome.skipped:
        saved_to = session.host.save(args.output)  # type: ignore[union-attr]
    return _report(outcome, saved_to)


async def run_ask(args: argparse.Namespace, config: FrozenConfig) -> int:
    host = open_host(args.document, selection=args.select)
    session = AssistantSession(
        GeminiChatClient(config),
        host_kind_for(args.document),
        host=host,
        config=config,
    )
    if args.attach is not None:
        session.attach(Attachment.from_path(args.attach))

    reply = await session.send(args.prompt)
    if reply is None:
        print("Prompt is empty", file=sys.stderr)
        return EXIT_USAGE
    print(reply.text)
    if reply.is_error:
        return EXIT_FAILED
    if not args.insert:
        return EXIT_OK
    return await _insert_reply(session, reply.text, args)


async def run_insert(args: argparse.Namespace, config: FrozenConfig) -> int:
    if args.text is not None:
        text = args.text
    elif args.from_file is not None:
        text = args.from_file.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    host = open_host(args.document, selection=args.select)
    session = AssistantSession(
        _OfflineClient(), host_kind_for(args.document), host=host, config=config
    )
    return await _insert_reply(session, text, args)


class _OfflineClient:
    """Chat client for commands that never contact the model."""

    async def generate(self, request: Any) -> str:
        raise GeminiOfficeError("This command does not send requests")


def config_info(resolved: ResolvedConfig) -> dict[str, Any]:
    """Effective configuration with the API key redacted, plus field origins."""
    values = asdict(resolved.to_frozen())
    values["api_key"] = "[SET]" if resolved.api_key else "[NOT SET]"
    return {"config": values, "sources": dict(resolved.origin)}


def run_config(args: argparse.Namespace, resolved: ResolvedConfig) -> int:
    if args.json:
        print(json.dumps(config_info(resolved), indent=2, ensure_ascii=False))
    else:
        print("=== Effective Configuration ===")
        print(resolved.audit())
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        resolved = resolve_config(profile=args.profile)
    except (ConfigurationError, ValueError) as e:
        print(f"❌ Configuration Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.command == "config":
        return run_config(args, resolved)

    runner = run_ask if args.command == "ask" else run_insert
    try:
        return asyncio.run(runner(args, resolved.to_frozen()))
    except (GeminiOfficeError, OSError) as e:
        log.debug("Command failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())

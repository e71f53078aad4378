# cli/chitieu.py
# Command-line front end for the smart-input parser.
# - Live-preview style parsing of one or more inputs (parse)
# - Building a transaction record from one input (add)
#
# Examples:
#   python -m cli.chitieu parse "50k ăn sáng" "2tr tiền nhà"
#   python -m cli.chitieu parse --jsonl "75000 xăng"
#   python -m cli.chitieu add "350k khách sạn" --scope TRIP --trip dalat
#   python -m cli.chitieu add "100k abc" --category SHOPPING --date 2025-09-01

from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

import click

from categorizer.service import CategorizerService
from config.loader import load_config, resolve_keywords_path
from ct_core.models import CategoryType, ParseResult, Scope
from ct_core.transactions import build_transaction
from ct_utils.formatting import format_preview
from ct_utils.logging_setup import setup_logging

LOGGER = logging.getLogger("chitieu")
SCHEMA_VERSION = "1.0"

EXIT_UNPARSEABLE = 2
EXIT_INVALID = 3


def _load_settings() -> Dict[str, Any]:
    try:
        return load_config()
    except FileNotFoundError:
        return {}


def _to_jsonable(obj: Any) -> Any:
    """Deep converter for dataclasses; enums -> value, dates -> ISO 8601."""
    if is_dataclass(obj):
        return {k: _to_jsonable(v) for k, v in asdict(obj).items()}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    if isinstance(obj, list):
        return [_to_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {k: _to_jsonable(v) for k, v in obj.items()}
    return obj


def _service(ctx: click.Context, keywords: Optional[str]) -> CategorizerService:
    """Build the service; a broken keyword file ends the command with EXIT_INVALID."""
    if not keywords:
        path = resolve_keywords_path(ctx.obj["settings"])
        keywords = str(path) if path else None
    try:
        return CategorizerService(keywords_path=keywords)
    except (ValueError, FileNotFoundError) as exc:
        LOGGER.error("Cannot load keywords from %s: %s", keywords, exc)
        ctx.exit(EXIT_INVALID)


@click.group()
@click.option("--quiet", is_flag=True, help="Only warnings/errors.")
@click.option("--verbose", is_flag=True, help="Verbose logging.")
@click.pass_context
def cli(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """Smart-input expense parser."""
    settings = _load_settings()
    level = settings.get("logging", {}).get("level", "INFO")
    if quiet:
        level = "WARNING"
    if verbose:
        level = "DEBUG"
    setup_logging(level)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command("parse")
@click.argument("texts", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output one JSON document.")
@click.option("--jsonl", is_flag=True, help="One JSON record per input line.")
@click.option("--keywords", type=click.Path(dir_okay=False), help="YAML keyword file.")
@click.pass_context
def parse_cmd(
    ctx: click.Context, texts: List[str], as_json: bool, jsonl: bool, keywords: Optional[str]
) -> None:
    """Preview how each TEXT would be recorded."""
    svc = _service(ctx, keywords)
    results: List[Optional[ParseResult]] = [svc.parse(t) for t in texts]

    if jsonl:
        for text, res in zip(texts, results):
            rec = {"schema_version": SCHEMA_VERSION, "input": text, "result": _to_jsonable(res)}
            click.echo(json.dumps(rec, ensure_ascii=True))
    elif as_json:
        payload = {
            "schema_version": SCHEMA_VERSION,
            "results": [
                {"input": text, "result": _to_jsonable(res)}
                for text, res in zip(texts, results)
            ],
        }
        click.echo(json.dumps(payload, ensure_ascii=True))
    else:
        for text, res in zip(texts, results):
            if res is None:
                click.echo(f"[SKIP] {text}: no amount found")
            else:
                click.echo(f"[OK] {format_preview(res)}")

    if any(res is None for res in results):
        ctx.exit(EXIT_UNPARSEABLE)


@cli.command("add")
@click.argument("text")
@click.option(
    "--category",
    type=click.Choice([c.value for c in CategoryType], case_sensitive=False),
    help="Manual category; overrides the detected one.",
)
@click.option(
    "--scope",
    type=click.Choice([s.value for s in Scope], case_sensitive=False),
    default=Scope.PERSONAL.value,
    show_default=True,
)
@click.option("--trip", "trip_id", help="Trip id (required with --scope TRIP).")
@click.option("--date", "on", type=click.DateTime(formats=["%Y-%m-%d"]), help="Defaults to today.")
@click.option("--keywords", type=click.Path(dir_okay=False), help="YAML keyword file.")
@click.pass_context
def add_cmd(
    ctx: click.Context,
    text: str,
    category: Optional[str],
    scope: str,
    trip_id: Optional[str],
    on: Optional[datetime],
    keywords: Optional[str],
) -> None:
    """Build a transaction record from TEXT and print it as JSON."""
    svc = _service(ctx, keywords)
    parsed = svc.parse(text)
    if parsed is None:
        LOGGER.error("No amount found in %r", text)
        ctx.exit(EXIT_UNPARSEABLE)

    try:
        txn = build_transaction(
            parsed,
            category_override=CategoryType(category.upper()) if category else None,
            scope=Scope(scope.upper()),
            trip_id=trip_id,
            on=on.date() if on else None,
        )
    except ValueError as exc:
        LOGGER.error(str(exc))
        ctx.exit(EXIT_INVALID)

    rec = {"schema_version": SCHEMA_VERSION, "transaction": _to_jsonable(txn)}
    click.echo(json.dumps(rec, ensure_ascii=True))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()

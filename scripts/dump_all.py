#!/usr/bin/env python3
"""Dump everything the hassrest library can read from a live instance.

Calls every read-only endpoint and prints the parsed models, so schema
drift against a new Home Assistant release shows up as a decode error
with the offending field path.

Usage
-----
Set environment variables and run::

    export HASS_URL="http://homeassistant.local:8123"
    export HASS_TOKEN="long-lived-access-token"
    python scripts/dump_all.py

Options::

    --entity sun.sun     Also fetch this entity's state (repeatable)
    --hours 24           History/logbook window ending now
    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    --skip-history       Skip history and logbook endpoints
    --skip-calendars     Skip calendar endpoints
    --verbose            DEBUG logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pydantic import BaseModel  # noqa: E402

from hassrest import (  # noqa: E402
    HassClient,
    HassClientConfig,
    HassError,
    HistoryRequest,
    LogbookRequest,
)

# ── helpers ──────────────────────────────────────────────────


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    return value


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _summarize(value: Any) -> str:
    if isinstance(value, list):
        return f"<list with {len(value)} items>"
    if isinstance(value, str) and len(value) > 400:
        return f"{value[:400]}… ({len(value)} chars)"
    if isinstance(value, BaseModel):
        return json.dumps(value.model_dump(mode="json"), indent=2, ensure_ascii=False)
    return str(value)


# ── main ─────────────────────────────────────────────────────


async def dump(client: HassClient, args: argparse.Namespace) -> dict[str, Any]:
    """Call each endpoint; record results and failures side by side."""
    results: dict[str, Any] = {}
    out: list[str] = []

    async def _run(name: str, call: Callable[[], Awaitable[Any]]) -> None:
        try:
            value = await call()
        except HassError as exc:
            path = getattr(exc, "path", None)
            results[name] = {"error": type(exc).__name__, "message": str(exc), "path": path}
            out.append(_section(name))
            out.append(f"  FAILED: {type(exc).__name__}: {exc}")
            return
        results[name] = _to_jsonable(value)
        out.append(_section(name))
        out.append(_summarize(value))

    end = datetime.now(UTC)
    start = end - timedelta(hours=args.hours)

    await _run("api_status", client.get_api_status)
    await _run("config", client.get_config)
    await _run("events", client.get_events)
    await _run("services", client.get_services)
    await _run("states", client.get_states)
    for entity_id in args.entity:
        await _run(f"state:{entity_id}", lambda entity_id=entity_id: client.get_state(entity_id))
    await _run("error_log", client.get_error_log)

    if not args.skip_history:
        await _run("history", lambda: client.get_history(HistoryRequest(start_time=start, end_time=end)))
        await _run("logbook", lambda: client.get_logbook(LogbookRequest(start_time=start, end_time=end)))

    if not args.skip_calendars:
        await _run("calendars", client.get_calendars)

    if not args.json:
        print("\n".join(out), file=args.output)
    return results


async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Dump all data hassrest can read from Home Assistant.",
    )
    parser.add_argument("--entity", action="append", default=[], help="Entity id to fetch (repeatable)")
    parser.add_argument("--hours", type=float, default=24.0, help="History/logbook window in hours")
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("--output", type=argparse.FileType("w"), default=sys.stdout, help="Output file")
    parser.add_argument("--skip-history", action="store_true")
    parser.add_argument("--skip-calendars", action="store_true")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        config = HassClientConfig.from_env(debug_deserialize=True)
    except HassError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(2)

    async with HassClient(config) as client:
        results = await dump(client, args)

    if args.json:
        json.dump(results, args.output, indent=2, default=str, ensure_ascii=False)
        args.output.write("\n")

    if any(isinstance(v, dict) and "error" in v for v in results.values()):
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())

"""
Output rendering

Raw mode is plain indented JSON for piping. Interactive mode writes labelled,
highlighted sections plus time claim annotations to a rich Console.
"""
import json
from datetime import datetime, tzinfo
from typing import IO

from rich.console import Console
from rich.json import JSON
from rich.text import Text
from rich.theme import Theme

from jut.models.token import DecodedToken
from jut.services.timestamps import evaluate_expiry, extract_timestamps

JUT_THEME = Theme(
    {
        "jut.header": "bold cyan",
        "jut.payload": "bold green",
        "jut.dates": "bold dim",
        "jut.muted": "dim",
        "jut.expired": "bold red",
        "jut.valid": "bold green",
    }
)


def make_console(color: bool = True, file: IO[str] | None = None) -> Console:
    """
    Console for interactive output

    Args:
        color: False disables every escape code; True still defers to rich's
            terminal and NO_COLOR detection
        file: Output stream (defaults to stdout)
    """
    return Console(
        file=file,
        theme=JUT_THEME,
        color_system="auto" if color else None,
        highlight=False,
        soft_wrap=True,
    )


def render_json(token: DecodedToken) -> str:
    """Header and payload as one indented JSON document"""
    out = {
        "header": token.header_claims,
        "payload": token.payload_claims,
    }
    return json.dumps(out, indent=2, ensure_ascii=False)


def render_pretty(
    console: Console,
    token: DecodedToken,
    now: datetime | None = None,
    tz: tzinfo | None = None,
):
    """
    Write the labelled header, payload, dates and expiry sections

    Args:
        console: Destination console
        token: Decoded token
        now: Reference time for relative dates (defaults to the current time)
        tz: Display zone for dates (None = local system zone)
    """
    console.print()
    console.print("── HEADER ──", style="jut.header")
    console.print(JSON(token.header.decode("utf-8"), indent=2))
    console.print()

    console.print("── PAYLOAD ─", style="jut.payload")
    console.print(JSON(token.payload.decode("utf-8"), indent=2))
    console.print()

    claims = token.payload_claims

    timestamps = extract_timestamps(claims, now=now, tz=tz)
    if timestamps:
        console.print("── DATES ───", style="jut.dates")
        for ts in timestamps:
            line = Text("  ")
            line.append(f"{ts.name + ':':<4}", style="jut.muted")
            line.append(f" {ts.formatted}")
            line.append(f"  ({ts.relative})", style="jut.muted")
            console.print(line)
        console.print()

    status = evaluate_expiry(claims, now=now, tz=tz)
    if status is not None:
        line = Text("  ")
        if status.expired:
            line.append("✗ EXPIRED", style="jut.expired")
        else:
            line.append("✓ VALID", style="jut.valid")
        line.append(f" ({status.description})", style="jut.muted")
        console.print(line)
        console.print()

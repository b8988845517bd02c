"""Parsing helpers shared by the CLI commands."""

from __future__ import annotations

from datetime import datetime, timezone

import click


def parse_pairs(raw: str | None) -> dict[str, str]:
    """Parse 'Size:M,Color:Red' into {'Size': 'M', 'Color': 'Red'}."""
    result: dict[str, str] = {}
    if not raw:
        return result
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid format '{pair}'. Expected 'Name:Value'."
            )
        name, value = pair.split(":", 1)
        result[name.strip()] = value.strip()
    return result


def parse_names(raw: str | None) -> list[str]:
    """Parse 'Material,Origin' into a list of names."""
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def as_utc(value: datetime | None) -> datetime | None:
    """click.DateTime yields naive datetimes; the domain compares in UTC."""
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc)

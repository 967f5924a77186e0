# utils/timestamps.py
"""
Best-effort parsing of systemd timestamps.

systemd prints timestamps such as ``Sat 2026-02-07 20:53:28 MST``. Zone
abbreviations are ambiguous and no zone table is kept here: known names (UTC,
GMT, numeric offsets, the host's own zone names) are honored, anything else
falls back to reading the wall-clock value as host local time.
"""

import time
from datetime import datetime, tzinfo

from dateutil import parser as date_parser
from dateutil import tz

UNSET_SENTINEL = "n/a"


class UnknownZoneName(ValueError):
    """Zone abbreviation that is neither UTC-like nor one of the host's."""


def _resolve_zone(name: str | None, offset: int | None) -> tzinfo | None:
    """``tzinfos`` callback for dateutil; rejects unknown abbreviations."""
    if offset is not None:
        return tz.UTC if offset == 0 else tz.tzoffset(name, offset)
    if not name:
        return None
    if name in time.tzname:
        return tz.tzlocal()
    raise UnknownZoneName(name)


def _parse_with_zone(raw: str) -> datetime | None:
    try:
        parsed = date_parser.parse(raw, tzinfos=_resolve_zone)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.tzlocal())
    return parsed


def _parse_without_zone(raw: str) -> datetime | None:
    try:
        parsed = date_parser.parse(raw, ignoretz=True)
    except (ValueError, OverflowError):
        return None
    return parsed.replace(tzinfo=tz.tzlocal())


def parse_systemd_timestamp(raw: str | None) -> datetime | None:
    """Return an aware datetime for ``raw``, or None if it is unset or unreadable."""
    if raw is None:
        return None
    value = raw.strip()
    if not value or value == UNSET_SENTINEL:
        return None

    return _parse_with_zone(value) or _parse_without_zone(value)

"""Boundary normalisation for release query-string parameters.

Browsers and scripts send multi-value filters either as repeated keys
(``?country=France&country=Germany``) or as one comma-separated value
(``?country=France,Germany``).  These helpers fold both spellings into the
same canonical shapes before anything reaches the filter engine, and parse
numeric parameters as leniently as the dashboard front-end expects.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime

import structlog

from src.utils.dates import parse_date_text
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_multi_value(values: Iterable[str] | str | None) -> frozenset[str]:
    """Fold repeated and/or comma-separated values into a lower-cased set.

    Blank entries are dropped, so ``?country=`` means "no country filter".
    """
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    result: set[str] = set()
    for raw in values:
        for part in str(raw).split(","):
            cleaned = part.strip().lower()
            if cleaned:
                result.add(cleaned)
    return frozenset(result)


def parse_leading_int(value: str | None) -> int | None:
    """Parse the leading integer of *value* (``"25abc"`` -> 25), else ``None``."""
    if value is None:
        return None
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return None
    return int(match.group(1))


def parse_bool_flag(value: str | None, default: bool = True) -> bool:
    """Return ``True`` only for the literal ``"true"`` (case-insensitive).

    A missing parameter yields *default*.
    """
    if value is None:
        return default
    return value.strip().lower() == "true"


def parse_date_bound(value: str | None, name: str) -> datetime | None:
    """Parse a ``start``/``end`` bound; unparseable text imposes no bound."""
    if value is None or not value.strip():
        return None
    parsed = parse_date_text(value)
    if parsed is None:
        _logger.warning("date_bound_ignored", param=name, value=value)
    return parsed

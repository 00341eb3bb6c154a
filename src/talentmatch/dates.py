"""Date coercion helpers shared by schemas and scorers."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pendulum

SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60
SECONDS_PER_DAY = 24 * 60 * 60


def parse_datetime(value: Any) -> pendulum.DateTime:
    """Coerce a date-like value into a timezone-aware pendulum DateTime.

    Accepts pendulum/stdlib datetimes, dates, ISO-8601 strings and ``YYYY-MM``
    month strings. Naive values are interpreted as UTC.
    """
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime):
        return pendulum.instance(value)
    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day)

    text = str(value).strip()
    if not text:
        raise ValueError("Empty date value")
    if len(text) == 7 and text[4] == "-":
        return pendulum.datetime(int(text[:4]), int(text[5:7]), 1)
    try:
        parsed = pendulum.parse(text)
    except (ValueError, pendulum.parsing.exceptions.ParserError) as exc:
        raise ValueError(f"Unparseable date: {text!r}") from exc
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day)
    raise ValueError(f"Unsupported date value: {text!r}")


def coerce_optional_datetime(value: Any) -> pendulum.DateTime | None:
    """Pydantic ``before`` validator for optional date fields."""
    if value is None or value == "":
        return None
    return parse_datetime(value)
"""
Value collaborators for the Edm codec: date/time text and boolean text.

The service writes instants as UTC with seven fractional digits and a
literal Z, e.g. 2012-03-04T05:06:07.1234560Z. Python keeps microseconds,
so the seventh digit is always 0 on the way out and dropped on the way in.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Union

from dateutil.parser import isoparse

EDM_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f0Z"

TRUE_WORDS = frozenset({"1", "true", "on", "yes"})


def convert_to_datetime(value: Union[str, datetime]) -> datetime:
    """
    Parse Edm DateTime text into an aware UTC datetime.

    A datetime is returned unchanged. Text without an offset is read as
    UTC. Fractions longer than six digits are truncated to microseconds.

    Raises:
        TypeError: If the value is neither text nor a datetime.
        ValueError: If the text is not an ISO-8601 date or date-time.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError(
            f"Edm DateTime text must be str, got {type(value).__name__}"
        )

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1]

    try:
        parsed = isoparse(text)
    except ValueError as e:
        raise ValueError(f"Invalid Edm DateTime text: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def convert_to_edm_datetime(value: Any) -> Any:
    """
    Render an instant in the canonical Edm DateTime text.

    Empty values (None, "") are returned as-is. Text is parsed first.
    Naive datetimes are taken to be UTC.

    Raises:
        TypeError: If the value is not a datetime or datetime text.
    """
    if not value:
        return value
    if isinstance(value, str):
        value = convert_to_datetime(value)
    if not isinstance(value, datetime):
        raise TypeError(
            f"Edm DateTime requires a datetime, got {type(value).__name__}"
        )

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.strftime(EDM_DATETIME_FORMAT)


def to_boolean(value: Any) -> bool:
    """
    Coerce boolean text the way the service's responses spell it.

    "1", "true", "on" and "yes" (any case, surrounding whitespace
    ignored) are True; every other text is False.
    """
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUE_WORDS

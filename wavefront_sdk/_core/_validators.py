"""Validation helpers used by the API classes.

Each ``wf_*`` function returns ``True`` for a good value and raises the
matching ``ValidationFailure`` subclass otherwise, so bad input is rejected
before a request is made.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Any, Mapping, Union

from ..exceptions import (
    InvalidAlertId,
    InvalidEventId,
    InvalidGranularity,
    InvalidSourceId,
    InvalidString,
    InvalidTimestamp,
    InvalidVersion,
)

ALERT_ID = re.compile(r"^\d{13}$")
EVENT_ID = re.compile(r"^\d{13}:.+")
SOURCE_ID = re.compile(r"^[\w.\-]+$")
SAFE_STRING = re.compile(r"^[\-\w .,]*$")
GRANULARITIES = ("d", "h", "m", "s")
MAX_STRING = 1024


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def wf_alert_id(value: Any) -> bool:
    """An alert ID is a 13-digit millisecond timestamp, as str or int."""
    if _is_number(value):
        value = str(value)
    if isinstance(value, str) and ALERT_ID.match(value):
        return True
    raise InvalidAlertId(value)


def wf_event_id(value: Any) -> bool:
    """An event ID is ``<13-digit timestamp>:<name>``."""
    if isinstance(value, str) and EVENT_ID.match(value):
        return True
    raise InvalidEventId(value)


def wf_source_id(value: Any) -> bool:
    if (
        isinstance(value, str)
        and len(value) < MAX_STRING
        and SOURCE_ID.match(value)
    ):
        return True
    raise InvalidSourceId(value)


def wf_version(value: Any) -> bool:
    """A version is a positive integer, or a string of digits."""
    if isinstance(value, str) and value.isdigit():
        value = int(value)
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return True
    raise InvalidVersion(value)


def wf_string(value: Any) -> bool:
    """Tags and similar free text: word characters, spaces, ``-``, ``.``, ``,``."""
    if (
        isinstance(value, str)
        and len(value) < MAX_STRING
        and SAFE_STRING.match(value)
    ):
        return True
    raise InvalidString(value)


def wf_ms_ts(value: Any) -> bool:
    if _is_number(value):
        return True
    raise InvalidTimestamp(value)


def wf_granularity(value: Any) -> bool:
    if str(value) in GRANULARITIES:
        return True
    raise InvalidGranularity(value)


def require_mapping(value: Any, name: str = "body") -> Mapping[str, Any]:
    """Raise ``ValueError`` unless *value* is a mapping."""
    if not isinstance(value, Mapping):
        raise ValueError(f"{name} must be a mapping, not {type(value).__name__}")
    return value


def parse_time(
    value: Union[dt.datetime, dt.date, int, float, str], in_ms: bool = False
) -> int:
    """Convert *value* to epoch seconds, or milliseconds if *in_ms*.

    Integers and digit strings are taken as already being epoch values and
    returned unchanged. Naive datetimes are treated as UTC.

    Raises:
        InvalidTimestamp: if *value* cannot be understood as a time
    """
    if _is_number(value):
        return int(value)
    if isinstance(value, str):
        if value.isdigit():
            return int(value)
        try:
            value = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise InvalidTimestamp(value) from exc
    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        value = dt.datetime(value.year, value.month, value.day)
    if not isinstance(value, dt.datetime):
        raise InvalidTimestamp(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    seconds = value.timestamp()
    return int(seconds * 1000) if in_ms else int(seconds)

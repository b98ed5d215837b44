"""Events. An event ID is its start time in epoch ms, a colon, and its name."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .._core._models import Response
from .._core._querystring import cleanse, uri_concat
from .._core._validators import (
    parse_time,
    require_mapping,
    wf_event_id,
    wf_ms_ts,
    wf_string,
    wf_version,
)
from .core import CoreApi

TimeLike = Union[dt.datetime, int, str]


@dataclass
class EventListOptions:
    """Options for :meth:`Event.list`.

    Attributes:
        start: beginning of the window; required
        end: end of the window, defaults to now
        limit: events per page, or ``ALL``/``LAZY``
        cursor: event ID to start listing from
    """

    start: Optional[TimeLike] = None
    end: TimeLike = field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))
    limit: Union[int, str] = 100
    cursor: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        if self.start is None or self.end is None:
            raise ValueError("an event listing needs a start and end time")
        if self.cursor is not None:
            wf_event_id(self.cursor)
        start = parse_time(self.start, in_ms=True)
        end = parse_time(self.end, in_ms=True)
        wf_ms_ts(start)
        wf_ms_ts(end)
        return cleanse(
            {
                "earliestStartTimeEpochMillis": start,
                "latestStartTimeEpochMillis": end,
                "cursor": self.cursor,
                "limit": self.limit,
            }
        )


class Event(CoreApi):
    """View and manage events."""

    update_keys = ("startTime", "endTime", "name", "annotations")

    def list(self, options: EventListOptions) -> Any:
        """GET /api/v2/event, events in a time range."""
        return self.api.get("", options.to_params())

    def create(self, body: Mapping[str, Any]) -> Response:
        require_mapping(body)
        return self.api.post("", body, "application/json")

    def delete(self, id: str) -> Response:
        wf_event_id(id)
        return self.api.delete(uri_concat(id))

    def describe(self, id: str, version: Optional[int] = None) -> Response:
        wf_event_id(id)
        if version is None:
            return self.api.get(uri_concat(id))
        wf_version(version)
        return self.api.get(uri_concat(id, "history", version))

    def update(self, id: str, body: Mapping[str, Any], modify: bool = True) -> Response:
        """PUT /api/v2/event/id, merging over the current event if *modify*."""
        wf_event_id(id)
        return self._update(uri_concat(id), body, modify, lambda: self.describe(id))

    def close(self, id: str) -> Response:
        wf_event_id(id)
        return self.api.post(uri_concat(id, "close"))

    def tags(self, id: str) -> Response:
        wf_event_id(id)
        return self.api.get(uri_concat(id, "tag"))

    def tag_set(self, id: str, tags: Union[str, Iterable[str]]) -> Response:
        wf_event_id(id)
        tags = [tags] if isinstance(tags, str) else list(tags)
        for tag in tags:
            wf_string(tag)
        return self.api.post(uri_concat(id, "tag"), tags, "application/json")

    def tag_add(self, id: str, tag: str) -> Response:
        wf_event_id(id)
        wf_string(tag)
        return self.api.put(uri_concat(id, "tag", tag))

    def tag_delete(self, id: str, tag: str) -> Response:
        wf_event_id(id)
        wf_string(tag)
        return self.api.delete(uri_concat(id, "tag", tag))

"""Alerts. An alert is identified by its millisecond epoch creation time."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from .._core._models import Response
from .._core._querystring import cleanse, uri_concat
from .._core._validators import (
    require_mapping,
    wf_alert_id,
    wf_string,
    wf_version,
)
from ..paginator import ALL
from .core import CoreApi
from .search import Search, SearchOptions

AlertId = Union[str, int]


class Alert(CoreApi):
    """View and manage alerts."""

    update_keys = (
        "id",
        "name",
        "target",
        "condition",
        "displayExpression",
        "minutes",
        "resolveAfterMinutes",
        "severity",
        "additionalInformation",
    )

    def list(self, offset: int = 0, limit: Union[int, str] = 100) -> Any:
        """GET /api/v2/alert

        Pass ``limit=ALL`` to merge every page, or ``limit=LAZY`` for an
        iterator over individual alerts.
        """
        return self.api.get("", {"offset": offset, "limit": limit})

    def all(self) -> Response:
        return self.list(0, ALL)

    def create(self, body: Mapping[str, Any]) -> Response:
        """POST /api/v2/alert"""
        require_mapping(body)
        return self.api.post("", body, "application/json")

    def delete(self, id: AlertId) -> Response:
        """DELETE /api/v2/alert/id

        Deleting an active alert moves it to the trash, from where it can be
        restored with ``undelete()``. Deleting an alert in the trash removes
        it for good.
        """
        wf_alert_id(id)
        return self.api.delete(str(id))

    def describe(self, id: AlertId, version: Optional[int] = None) -> Response:
        """GET /api/v2/alert/id, or /api/v2/alert/id/history/version"""
        wf_alert_id(id)
        if version is None:
            return self.api.get(str(id))
        wf_version(version)
        return self.api.get(uri_concat(id, "history", version))

    def update(
        self, id: AlertId, body: Mapping[str, Any], modify: bool = True
    ) -> Response:
        """PUT /api/v2/alert/id

        With *modify* the current alert is fetched and *body* is merged
        over it; otherwise *body* is sent as it is.
        """
        wf_alert_id(id)
        return self._update(str(id), body, modify, lambda: self.describe(id))

    def history(
        self, id: AlertId, offset: Optional[int] = None, limit: Optional[int] = None
    ) -> Response:
        """GET /api/v2/alert/id/history"""
        wf_alert_id(id)
        return self.api.get(
            uri_concat(id, "history"), cleanse({"offset": offset, "limit": limit})
        )

    def snooze(self, id: AlertId, seconds: Optional[int] = None) -> Response:
        """POST /api/v2/alert/id/snooze. No *seconds* snoozes indefinitely."""
        wf_alert_id(id)
        path = uri_concat(id, "snooze")
        if seconds is not None:
            path = f"{path}?seconds={int(seconds)}"
        return self.api.post(path)

    def unsnooze(self, id: AlertId) -> Response:
        wf_alert_id(id)
        return self.api.post(uri_concat(id, "unsnooze"))

    def undelete(self, id: AlertId) -> Response:
        wf_alert_id(id)
        return self.api.post(uri_concat(id, "undelete"))

    def tags(self, id: AlertId) -> Response:
        wf_alert_id(id)
        return self.api.get(uri_concat(id, "tag"))

    def tag_set(self, id: AlertId, tags: Union[str, Iterable[str]]) -> Response:
        """POST /api/v2/alert/id/tag, replacing every tag."""
        wf_alert_id(id)
        tags = [tags] if isinstance(tags, str) else list(tags)
        for tag in tags:
            wf_string(tag)
        return self.api.post(uri_concat(id, "tag"), tags, "application/json")

    def tag_add(self, id: AlertId, tag: str) -> Response:
        wf_alert_id(id)
        wf_string(tag)
        return self.api.put(uri_concat(id, "tag", tag))

    def tag_delete(self, id: AlertId, tag: str) -> Response:
        wf_alert_id(id)
        wf_string(tag)
        return self.api.delete(uri_concat(id, "tag", tag))

    def summary(self) -> Response:
        """Count alerts of each state."""
        return self.api.get("summary")

    # The v2 API has no per-state listing; these are built on search.

    def alerts_in_state(self, state: str) -> Response:
        """Every alert in *state*, e.g. ``firing`` or ``snoozed``."""
        search = Search(self.credentials, self.api.config, self.api.session)
        query = {"key": "status", "value": state, "matchingMethod": "EXACT"}
        return search.search("alert", query, SearchOptions(limit=ALL))

    def firing(self) -> Response:
        return self.alerts_in_state("firing")

    def active(self) -> Response:
        return self.firing()

    def snoozed(self) -> Response:
        return self.alerts_in_state("snoozed")

    def in_maintenance(self) -> Response:
        return self.alerts_in_state("in_maintenance")

    def affected_by_maintenance(self) -> Response:
        return self.in_maintenance()

    def invalid(self) -> Response:
        return self.alerts_in_state("invalid")

    def none(self) -> Response:
        return self.alerts_in_state("none")

    def checking(self) -> Response:
        return self.alerts_in_state("checking")

    def trash(self) -> Response:
        return self.alerts_in_state("trash")

    def no_data(self) -> Response:
        return self.alerts_in_state("no_data")

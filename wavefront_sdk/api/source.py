"""Source metadata: descriptions and tags attached to reporting hosts."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from .._core._models import Response
from .._core._querystring import cleanse, uri_concat
from .._core._validators import require_mapping, wf_source_id, wf_string, wf_version
from .core import CoreApi


class Source(CoreApi):
    update_keys = ("sourceName", "tags", "description")

    def list(
        self, limit: Union[int, str, None] = None, cursor: Optional[str] = None
    ) -> Any:
        """GET /api/v2/source

        Sources page by cursor. ``limit=ALL`` follows the cursor to the end.
        """
        return self.api.get("", cleanse({"limit": limit, "cursor": cursor}))

    def create(self, body: Mapping[str, Any]) -> Response:
        require_mapping(body)
        return self.api.post("", body, "application/json")

    def delete(self, id: str) -> Response:
        wf_source_id(id)
        return self.api.delete(uri_concat(id))

    def description_set(self, id: str, description: str) -> Response:
        wf_source_id(id)
        return self.api.post(
            uri_concat(id, "description"), description, "application/json"
        )

    def description_delete(self, id: str) -> Response:
        wf_source_id(id)
        return self.api.delete(uri_concat(id, "description"))

    def describe(self, id: str, version: Optional[int] = None) -> Response:
        wf_source_id(id)
        if version is None:
            return self.api.get(uri_concat(id))
        wf_version(version)
        return self.api.get(uri_concat(id, "history", version))

    def update(self, id: str, body: Mapping[str, Any], modify: bool = True) -> Response:
        wf_source_id(id)
        return self._update(uri_concat(id), body, modify, lambda: self.describe(id))

    def tags(self, id: str) -> Response:
        wf_source_id(id)
        return self.api.get(uri_concat(id, "tag"))

    def tag_set(self, id: str, tags: Union[str, Iterable[str]]) -> Response:
        wf_source_id(id)
        tags = [tags] if isinstance(tags, str) else list(tags)
        for tag in tags:
            wf_string(tag)
        return self.api.post(uri_concat(id, "tag"), tags, "application/json")

    def tag_add(self, id: str, tag: str) -> Response:
        wf_source_id(id)
        wf_string(tag)
        return self.api.put(uri_concat(id, "tag", tag))

    def tag_delete(self, id: str, tag: str) -> Response:
        wf_source_id(id)
        wf_string(tag)
        return self.api.delete(uri_concat(id, "tag", tag))

"""Walk paginated Wavefront API responses.

Collection endpoints answer with pages shaped like::

    {"items": [...], "offset": 0, "limit": 100, "totalItems": 321,
     "moreItems": true, "cursor": "..."}

A ``Paginator`` re-issues a request, moving its ``offset`` or ``cursor``
forward after every page, until the server reports no more items or the
caller's limit is reached. GET endpoints take the paging fields in the
query string, POST endpoints (search) in the JSON body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Set,
)

from .._core._models import Map, Response, Status, parse_response
from ._body import as_request_body, canonical_body, serialize_body

if TYPE_CHECKING:
    from .._core._request import Executor

logger = logging.getLogger(__name__)

PAGE_SIZE = 99
"""Items requested per call when the caller asks for everything."""

ALL = "all"
"""Limit value meaning "fetch every page and merge them"."""

LAZY = "lazy"
"""Limit value meaning "yield items one at a time, fetching pages on demand"."""


class Mode(str, Enum):
    """Where a request carries its paging fields."""

    SINGLE = "single"
    GET = "get"
    POST = "post"


@dataclass
class PageRequest:
    """The request a paginator starts from.

    Attributes:
        method: HTTP verb
        path: path relative to the executor's base
        payload: query parameters (GET) or body (POST). A POST body may be
            a mapping or JSON text.
        content_type: Content-Type header to send with a body
    """

    method: str = "GET"
    path: str = ""
    payload: Any = field(default_factory=dict)
    content_type: Optional[str] = None


class AccumulatedResult:
    """Items gathered from one or more pages, in the order they were fetched."""

    def __init__(self) -> None:
        self._items: List[Any] = []
        self.responses: List[Response] = []

    def add_page(self, page: Response) -> None:
        self.responses.append(page)
        self._items.extend(page.items or [])

    def trim(self, limit: int) -> None:
        del self._items[limit:]

    @property
    def items(self) -> List[Any]:
        return self._items

    @property
    def status(self) -> Status:
        """Status of the last page fetched."""
        return self.responses[-1].status

    @property
    def ok(self) -> bool:
        return bool(self.responses) and self.responses[-1].ok

    @property
    def more_items(self) -> bool:
        """True if the server still had items when paging stopped."""
        return bool(self.responses) and self.responses[-1].more_items

    def get_all(self) -> List[Any]:
        return list(self._items)

    def to_response(self) -> Response:
        """Fold every page back into a single ``Response``.

        The first page's payload is kept with its ``items`` replaced by the
        merged list. A failing last page supplies the status.
        """
        first = self.responses[0]
        if isinstance(first.response, list):
            return Response(status=self.status, response=self.get_all())
        if not isinstance(first.response, dict) or not first.ok:
            return Response(status=self.status, response=first.response)
        payload = Map(first.response)
        payload["items"] = self.get_all()
        payload["moreItems"] = self.more_items
        return Response(status=self.status, response=payload)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} with {len(self._items)} items "
            f"from {len(self.responses)} pages>"
        )


class Paginator:
    """Fetch every page of a collection request.

    Parameters:
        executor: object with an ``execute(method, path, payload,
            content_type)`` method returning ``(body, status_code)``
        request: the first request
        mode: where the paging fields live
        page_size: items per request when the limit is ``ALL`` or ``LAZY``

    Raises:
        ValueError: if the payload is not a mapping (GET) or a JSON object
            (POST). Nothing is sent in that case.
    """

    def __init__(
        self,
        executor: "Executor",
        request: PageRequest,
        mode: Mode = Mode.GET,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.executor = executor
        self.request = request
        self.mode = Mode(mode)
        self.page_size = page_size
        self._payload = self._canonical_payload(request.payload)
        self.target: Optional[int] = None
        self.follow = False

        if self.mode is Mode.SINGLE:
            return
        limit = self._payload.get("limit")
        if limit is None:
            return
        if isinstance(limit, int) and not isinstance(limit, bool):
            self.target = limit
        elif limit not in (ALL, LAZY):
            raise ValueError(f"limit must be an integer, {ALL!r} or {LAZY!r}")
        self.follow = True

    def _canonical_payload(self, payload: Any) -> Dict[str, Any]:
        if payload is None:
            return {}
        if self.mode is Mode.SINGLE:
            return dict(payload) if isinstance(payload, Mapping) else {}
        if self.mode is Mode.POST:
            return canonical_body(as_request_body(payload))
        if not isinstance(payload, Mapping):
            raise ValueError(
                f"query parameters must be a mapping, not {type(payload).__name__}"
            )
        return dict(payload)

    def _fetch(self, payload: Dict[str, Any]) -> Response:
        if self.mode is Mode.POST:
            wire: Any = serialize_body(payload)
        elif self.mode is Mode.SINGLE and not isinstance(
            self.request.payload, Mapping
        ):
            wire = self.request.payload
        else:
            wire = dict(payload)
        logger.debug(
            "Fetching page: %s %s %s", self.request.method, self.request.path, wire
        )
        body, code = self.executor.execute(
            self.request.method, self.request.path, wire, self.request.content_type
        )
        return parse_response(body, code)

    def pages(self) -> Iterator[Response]:
        """Yield one ``Response`` per page, fetching lazily.

        Each call to ``pages()`` starts again from the original request.
        """
        payload = dict(self._payload)
        if self.follow and self.target is None:
            payload["limit"] = self.page_size

        fetched = 0
        seen: Set[Any] = set()

        while True:
            if self.follow and self.target is not None:
                payload["limit"] = min(self.page_size, self.target - fetched)

            page = self._fetch(payload)
            yield page

            if not page.ok or not self.follow:
                return

            fetched += len(page.items or [])
            if self.target is not None and fetched >= self.target:
                return
            if not page.more_items:
                return

            marker = page.next_item
            if marker is None:
                logger.warning(
                    "%s %s reported more items but gave no cursor or offset; "
                    "stopping after %s items",
                    self.request.method,
                    self.request.path,
                    fetched,
                )
                return
            if marker in seen:
                logger.warning(
                    "%s %s returned %r a second time; stopping after %s items",
                    self.request.method,
                    self.request.path,
                    marker,
                    fetched,
                )
                return

            key = "cursor" if page.response.cursor is not None else "offset"
            payload[key] = marker
            seen.add(marker)

    def paginate(self) -> AccumulatedResult:
        """Fetch pages until done and merge their items."""
        result = AccumulatedResult()
        for page in self.pages():
            result.add_page(page)
        if self.target is not None:
            result.trim(self.target)
        return result

    def iter_items(self) -> Iterator[Any]:
        """Yield items one at a time, fetching the next page only when needed."""
        yielded = 0
        for page in self.pages():
            for item in page.items or []:
                if self.target is not None and yielded >= self.target:
                    return
                yielded += 1
                yield item

    def __iter__(self) -> Iterator[Any]:
        return self.iter_items()


def paginate(
    executor: "Executor",
    request: PageRequest,
    mode: Mode = Mode.GET,
    page_size: int = PAGE_SIZE,
) -> AccumulatedResult:
    """Run *request* through *executor* and return every item it pages over.

    Transport errors raised by the executor propagate; nothing gathered
    before the failure is returned.
    """
    return Paginator(executor, request, mode, page_size).paginate()


def iter_items(
    executor: "Executor",
    request: PageRequest,
    mode: Mode = Mode.GET,
    page_size: int = PAGE_SIZE,
) -> Iterator[Any]:
    """Lazy counterpart of :func:`paginate`."""
    return Paginator(executor, request, mode, page_size).iter_items()

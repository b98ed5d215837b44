"""Response envelope model shared across the package.

Every Wavefront API call is normalized into a ``Response``: a ``Status``
(result, message, code) and a ``response`` payload. The payload is whatever
JSON the server sent, with mappings wrapped in ``Map`` so callers can probe
for keys like ``items`` or ``cursor`` without knowing the exact shape.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from ..exceptions import ServerError

OK = "OK"
ERROR = "ERROR"

_EMPTY_TOKENS = ("", "{}", "[]")


class Map(dict):
    """Dictionary whose keys can also be read as attributes.

    ``Map({"a": {"b": 1}}).a.b == 1`` and ``Map().missing is None``.
    Payload keys come before the dict API, so ``page.items`` is the page's
    item list and not ``dict.items``; any other public name that is not a
    key reads as None. Reach the dict API through the type, as in
    ``dict.items(m)``, or use ``to_dict()``. Nested mappings are wrapped on
    the way out, lists of mappings too.
    """

    def __getattribute__(self, name: str) -> Any:
        if name.startswith("__"):
            return super().__getattribute__(name)
        if dict.__contains__(self, name):
            return _wrap(dict.__getitem__(self, name))
        if name in _MAP_METHODS:
            return super().__getattribute__(name)
        return None

    def __getitem__(self, key: Any) -> Any:
        return _wrap(super().__getitem__(key))

    def __reduce__(self):
        return (self.__class__, (dict(self),))

    def dig(self, *keys: Union[str, int]) -> Any:
        """Walk nested mappings and sequences, returning None on any miss."""
        value: Any = self
        for key in keys:
            if isinstance(value, dict) and not isinstance(key, int):
                value = dict.get(value, key)
            elif isinstance(value, list) and isinstance(key, int):
                try:
                    value = value[key]
                except IndexError:
                    return None
            else:
                return None
        return _wrap(value)

    def to_dict(self) -> Dict[str, Any]:
        """A plain, JSON-serializable copy."""
        return unwrap(self)

    def __repr__(self) -> str:
        return f"Map({dict.__repr__(self)})"


_MAP_METHODS = frozenset(("dig", "to_dict"))


def unwrap(value: Any) -> Any:
    """Return *value* with every ``Map`` turned back into a plain dict."""
    if isinstance(value, dict):
        return {k: unwrap(v) for k, v in dict.items(value)}
    if isinstance(value, list):
        return [unwrap(v) for v in value]
    return value


def _wrap(value: Any) -> Any:
    if isinstance(value, dict) and not isinstance(value, Map):
        return Map(value)
    if isinstance(value, list):
        return [_wrap(v) for v in value]
    return value


def status_from_code(code: int) -> str:
    """Return ``"OK"`` for a 2xx code and ``"ERROR"`` for anything else."""
    return OK if 200 <= code < 300 else ERROR


@dataclass(frozen=True)
class Status:
    """The ``status`` block of a Wavefront response."""

    result: str
    message: str
    code: int

    @classmethod
    def from_code(cls, code: int, message: str = "") -> "Status":
        return cls(result=status_from_code(code), message=message, code=code)

    @classmethod
    def from_json(cls, payload: Any, http_status: int) -> "Status":
        """Build a Status from an embedded ``status`` object.

        Fields the server left out are filled in from ``http_status``.
        """
        if not isinstance(payload, dict):
            return cls.from_code(http_status)
        code = dict.get(payload, "code", http_status)
        try:
            code = int(code)
        except (TypeError, ValueError):
            code = http_status
        result = dict.get(payload, "result") or status_from_code(code)
        message = dict.get(payload, "message") or ""
        return cls(result=str(result), message=str(message), code=code)


@dataclass(frozen=True)
class Response:
    """A normalized API response.

    Attributes:
        status: result, message and code of the call
        response: the unwrapped payload; a ``Map`` for JSON objects
    """

    status: Status
    response: Any = field(default_factory=Map)

    @property
    def ok(self) -> bool:
        """True when the status code is in the 2xx range."""
        return 200 <= self.status.code < 300

    @property
    def more_items(self) -> bool:
        """True when the payload is a page with ``moreItems`` set."""
        return isinstance(self.response, dict) and bool(
            dict.get(self.response, "moreItems")
        )

    @property
    def next_item(self) -> Optional[Union[str, int]]:
        """The cursor or offset that fetches the next page, or None."""
        if not self.more_items:
            return None
        cursor = dict.get(self.response, "cursor")
        if cursor is not None:
            return cursor
        offset = dict.get(self.response, "offset")
        limit = dict.get(self.response, "limit")
        if _is_int(offset) and _is_int(limit):
            return offset + limit
        return None

    @property
    def items(self) -> Optional[list]:
        """The page's item list, if the payload carries one."""
        if isinstance(self.response, dict):
            items = dict.get(self.response, "items")
            return _wrap(items) if isinstance(items, list) else None
        if isinstance(self.response, list):
            return _wrap(self.response)
        return None

    def raise_for_status(self) -> None:
        """Raise ``ServerError`` if the call was not successful."""
        if not self.ok:
            raise ServerError(self.status)

    def to_json(self) -> str:
        return json.dumps(
            {
                "status": {
                    "result": self.status.result,
                    "message": self.status.message,
                    "code": self.status.code,
                },
                "response": unwrap(self.response),
            }
        )

    def __str__(self) -> str:
        return self.to_json()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_response(raw_body: Any, http_status: int) -> Response:
    """Normalize a raw HTTP body and status code into a ``Response``.

    This never raises. Empty bodies become an empty payload, bodies which
    are not JSON (or nest too deeply to decode) are kept as a message, and
    JSON without a ``status`` block gets one derived from ``http_status``.

    Parameters:
        raw_body: The response body, usually text.
        http_status: The numeric HTTP status code.

    Returns:
        A ``Response``.
    """
    if not isinstance(raw_body, (dict, list)):
        if isinstance(raw_body, (bytes, bytearray)):
            raw_body = raw_body.decode("utf-8", errors="replace")
        elif raw_body is None:
            raw_body = ""
        elif not isinstance(raw_body, str):
            raw_body = str(raw_body)

        if raw_body.strip() in _EMPTY_TOKENS:
            return Response(status=Status.from_code(http_status), response=Map())

        try:
            raw_body = json.loads(raw_body)
        except (ValueError, RecursionError):
            return Response(
                status=Status.from_code(http_status, message=raw_body),
                response=Map(message=raw_body, code=http_status),
            )

    try:
        return _from_document(raw_body, http_status)
    except RecursionError:
        # too deep to wrap; hand back the decoded data as it is
        return Response(status=Status.from_code(http_status), response=raw_body)


def _from_document(parsed: Any, http_status: int) -> Response:
    if isinstance(parsed, (dict, list)) and not parsed:
        return Response(status=Status.from_code(http_status), response=Map())

    if isinstance(parsed, dict):
        if "status" in parsed:
            status = Status.from_json(dict.get(parsed, "status"), http_status)
        else:
            status = Status.from_code(http_status)
        payload = dict.get(parsed, "response") if "response" in parsed else parsed
        return Response(status=status, response=_wrap(payload))

    return Response(status=Status.from_code(http_status), response=_wrap(parsed))

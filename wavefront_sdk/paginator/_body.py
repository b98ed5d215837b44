"""Request bodies for POST pagination.

A body reaches the paginator either as a mapping or as JSON text that was
already serialized by the caller. Both are reduced to one mapping form so
offset and cursor can be rewritten the same way.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from typing_extensions import TypeAlias

from .._core._models import unwrap


@dataclass(frozen=True)
class Structured:
    """A body held as a mapping."""

    value: Mapping[str, Any]


@dataclass(frozen=True)
class Serialized:
    """A body held as serialized JSON text."""

    text: str


RequestBody: TypeAlias = Union[Structured, Serialized]


def as_request_body(body: Any) -> RequestBody:
    """Wrap a caller-supplied body in the matching variant.

    Raises:
        ValueError: if *body* is neither a mapping nor a string.
    """
    if isinstance(body, (Structured, Serialized)):
        return body
    if isinstance(body, Mapping):
        return Structured(dict(body))
    if isinstance(body, (str, bytes)):
        text = body.decode("utf-8") if isinstance(body, bytes) else body
        return Serialized(text)
    raise ValueError(
        f"request body must be a mapping or JSON text, not {type(body).__name__}"
    )


def canonical_body(body: RequestBody) -> Dict[str, Any]:
    """Return a fresh mapping for either body form.

    Raises:
        ValueError: if serialized text does not decode to a JSON object.
    """
    if isinstance(body, Structured):
        return json.loads(json.dumps(unwrap(dict(body.value))))
    try:
        value = json.loads(body.text)
    except ValueError as exc:
        raise ValueError(f"request body is not valid JSON: {body.text!r}") from exc
    if not isinstance(value, dict):
        raise ValueError(f"request body must be a JSON object: {body.text!r}")
    return value


def serialize_body(body: Union[RequestBody, Mapping[str, Any]]) -> str:
    """Return the JSON text for *body*, normalizing it first."""
    if isinstance(body, Serialized):
        body = canonical_body(body)
    elif isinstance(body, Structured):
        body = dict(body.value)
    return json.dumps(unwrap(body), separators=(",", ":"))

"""Helpers for composing API paths and query strings from option maps."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union
from urllib.parse import quote, urlencode


def cleanse(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of *options* without the ``None`` values."""
    return {k: options[k] for k in options if options[k] is not None}


def uri_concat(*fragments: Union[str, int, None]) -> str:
    """Join path fragments with single slashes, skipping empty ones.

    Fragments are percent-encoded; slashes and existing escapes are kept,
    so an already joined path can be passed through again.

    >>> uri_concat("1234", "tag", "my tag")
    '1234/tag/my%20tag'
    """
    parts = []
    for fragment in fragments:
        if fragment is None:
            continue
        text = str(fragment).strip("/")
        if text:
            parts.append(quote(text, safe=":/%"))
    return "/".join(parts)


def _qs_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_qs(options: Mapping[str, Any]) -> str:
    """Render *options* as a query string.

    ``None`` values are dropped, booleans become ``true``/``false`` and
    list values repeat their key.
    """
    pairs = []
    for key, value in cleanse(options).items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _qs_value(v)) for v in value)
        else:
            pairs.append((key, _qs_value(value)))
    return urlencode(pairs)

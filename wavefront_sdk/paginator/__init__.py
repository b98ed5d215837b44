"""Pagination over Wavefront collection endpoints."""

from ._body import (
    RequestBody,
    Serialized,
    Structured,
    as_request_body,
    canonical_body,
    serialize_body,
)
from .base import (
    ALL,
    LAZY,
    PAGE_SIZE,
    AccumulatedResult,
    Mode,
    PageRequest,
    Paginator,
    iter_items,
    paginate,
)

__all__ = [
    "ALL",
    "LAZY",
    "PAGE_SIZE",
    "AccumulatedResult",
    "Mode",
    "PageRequest",
    "Paginator",
    "paginate",
    "iter_items",
    "RequestBody",
    "Structured",
    "Serialized",
    "as_request_body",
    "canonical_body",
    "serialize_body",
]

"""Wavefront API resource classes."""

from wavefront_sdk.api.alert import Alert
from wavefront_sdk.api.core import CoreApi
from wavefront_sdk.api.event import Event, EventListOptions
from wavefront_sdk.api.query import Query, QueryOptions
from wavefront_sdk.api.search import Search, SearchOptions
from wavefront_sdk.api.source import Source

__all__ = [
    "CoreApi",
    "Alert",
    "Event",
    "EventListOptions",
    "Query",
    "QueryOptions",
    "Search",
    "SearchOptions",
    "Source",
]

"""wavefront_sdk: a Python client for the Wavefront REST API v2.

Quick Start:
    ```python
    from wavefront_sdk import ALL, Alert, Credentials

    alerts = Alert(Credentials.load())
    resp = alerts.list(0, ALL)
    if resp.ok:
        for alert in resp.items:
            print(alert["name"])
    ```

Every call returns a `Response` with a `status` (result, message, code)
and the unwrapped `response` payload. Collection calls accept
`limit=ALL` to merge every page, or `limit=LAZY` to iterate items as
pages are fetched.
"""

import logging
from importlib.metadata import version

from ._core._models import Map, Response, Status, parse_response
from ._core._request import ApiCaller, ClientConfig, Executor
from .api import (
    Alert,
    CoreApi,
    Event,
    EventListOptions,
    Query,
    QueryOptions,
    Search,
    SearchOptions,
    Source,
)
from .auth import Credentials
from .exceptions import CredentialError, ServerError, WavefrontError
from .paginator import (
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

logger = logging.getLogger(__name__)

__all__ = [
    # _core
    "Map",
    "Response",
    "Status",
    "parse_response",
    "ApiCaller",
    "ClientConfig",
    "Executor",
    # api
    "CoreApi",
    "Alert",
    "Event",
    "EventListOptions",
    "Query",
    "QueryOptions",
    "Search",
    "SearchOptions",
    "Source",
    # auth
    "Credentials",
    # exceptions
    "WavefrontError",
    "CredentialError",
    "ServerError",
    # paginator
    "ALL",
    "LAZY",
    "PAGE_SIZE",
    "AccumulatedResult",
    "Mode",
    "PageRequest",
    "Paginator",
    "paginate",
    "iter_items",
]

__version__ = version("wavefront-sdk")

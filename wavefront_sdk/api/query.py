"""Run timeseries queries."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .._core._models import Response
from .._core._querystring import cleanse
from .._core._validators import parse_time, wf_granularity, wf_source_id
from ..exceptions import InvalidTimestamp
from .core import CoreApi

TimeLike = Union[dt.datetime, int, str]


@dataclass
class QueryOptions:
    """Optional parameters of a chart query.

    ``False`` values are left off the request, except
    ``include_obsolete`` (``i``), which the API treats as meaningful.
    """

    name: Optional[str] = None
    points: Optional[int] = None
    summarization: Optional[str] = None
    list_mode: bool = False
    strict: bool = False
    include_obsolete: bool = False
    sorted: bool = False
    cached: bool = False
    auto_events: bool = False
    view: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "n": self.name,
            "p": self.points,
            "summarization": self.summarization,
            "listMode": self.list_mode,
            "strict": self.strict,
            "sorted": self.sorted,
            "cached": self.cached,
            "autoEvents": self.auto_events,
            "view": self.view,
        }
        params = {k: v for k, v in params.items() if v is not False}
        params["i"] = self.include_obsolete
        return cleanse(params)


class Query(CoreApi):
    @property
    def api_base(self) -> str:
        return "chart"

    def query(
        self,
        query: str,
        granularity: str,
        start: Optional[TimeLike],
        end: Optional[TimeLike] = None,
        options: Optional[QueryOptions] = None,
    ) -> Response:
        """GET /api/v2/chart/api

        Parameters:
            query: the Wavefront query to run
            granularity: ``d``, ``h``, ``m`` or ``s``
            start: start of the window; datetime or epoch ms
            end: end of the window, defaults to now on the server
            options: anything else the chart API accepts

        Raises:
            ValueError: if *query* is not a string
            InvalidGranularity: on a bad granularity
            InvalidTimestamp: if *start* is missing
        """
        if not isinstance(query, str):
            raise ValueError("query must be a string")
        wf_granularity(granularity)
        if start is None:
            raise InvalidTimestamp("a query needs a start time")

        params = (options or QueryOptions()).to_params()
        params["q"] = query
        params["g"] = granularity
        params["s"] = parse_time(start, in_ms=True)
        if end is not None:
            params["e"] = parse_time(end, in_ms=True)
        return self.api.get("api", params)

    def raw(
        self,
        metric: str,
        source: Optional[str] = None,
        start: Optional[TimeLike] = None,
        end: Optional[TimeLike] = None,
    ) -> Response:
        """GET /api/v2/chart/raw: points for one metric, grouped by tags.

        The endpoint answers with a bare list, which becomes the
        ``response`` of the returned envelope.
        """
        if not isinstance(metric, str):
            raise ValueError("metric must be a string")
        params: Dict[str, Any] = {"metric": metric}
        if source is not None:
            wf_source_id(source)
            params["source"] = source
        if start is not None:
            params["startTime"] = parse_time(start, in_ms=True)
        if end is not None:
            params["endTime"] = parse_time(end, in_ms=True)
        return self.api.get("raw", params)

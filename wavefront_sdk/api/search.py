"""Search Wavefront objects.

Searches are POSTed with the paging fields in the JSON body, so ``limit=ALL``
here exercises body pagination.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .._core._models import Response
from .._core._querystring import uri_concat
from .._core._validators import require_mapping
from .core import CoreApi

Condition = Mapping[str, Any]


@dataclass
class SearchOptions:
    """Options for :meth:`Search.search`.

    Attributes:
        limit: items per page, or ``ALL``/``LAZY``
        offset: where to start
        sort_field: field to sort on; defaults to the first condition's key
        desc: sort descending
        deleted: search deleted objects instead of live ones
    """

    limit: Union[int, str] = 10
    offset: int = 0
    sort_field: Optional[str] = None
    desc: bool = False
    deleted: bool = False


class Search(CoreApi):
    def search(
        self,
        entity: str,
        query: Union[Condition, Sequence[Condition], None] = None,
        options: Optional[SearchOptions] = None,
    ) -> Any:
        """Search *entity* (``alert``, ``dashboard``...) for *query*.

        Each condition is a mapping with ``key`` and ``value``;
        ``matchingMethod`` defaults to ``CONTAINS``.
        """
        options = options or SearchOptions()
        return self.raw_search(entity, self.body(query, options), options.deleted)

    def body(
        self,
        query: Union[Condition, Sequence[Condition], None],
        options: SearchOptions,
    ) -> Dict[str, Any]:
        ret: Dict[str, Any] = {"limit": options.limit, "offset": options.offset}
        conditions = self._conditions(query)
        if conditions:
            ret["query"] = conditions
            ret["sort"] = {
                "field": options.sort_field or conditions[0]["key"],
                "ascending": not options.desc,
            }
        return ret

    @staticmethod
    def _conditions(
        query: Union[Condition, Sequence[Condition], None],
    ) -> List[Dict[str, Any]]:
        if not query:
            return []
        if isinstance(query, Mapping):
            query = [query]
        conditions = []
        for condition in query:
            require_mapping(condition, "search condition")
            conditions.append({"matchingMethod": "CONTAINS", **condition})
        return conditions

    def raw_search(
        self, entity: str, body: Any, deleted: bool = False
    ) -> Response:
        """POST /api/v2/search/entity, or /api/v2/search/entity/deleted"""
        if not isinstance(entity, str) or not entity:
            raise ValueError("entity must be a non-empty string")
        if not isinstance(body, (Mapping, str)):
            raise ValueError(f"body must be a mapping, not {type(body).__name__}")
        path = uri_concat(entity, "deleted" if deleted else None)
        return self.api.post(path, body, "application/json")

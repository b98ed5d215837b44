"""Base class for the Wavefront API resource classes."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

import requests

from .._core._models import Response
from .._core._request import ApiCaller, ClientConfig
from .._core._validators import require_mapping
from ..auth.credentials import Credentials

logger = logging.getLogger(__name__)


class CoreApi:
    """Shared plumbing for one API resource.

    Subclasses get an ``api`` attribute, an ``ApiCaller`` rooted at
    ``/api/v2/<api_base>``. ``api_base`` defaults to the lowercased class
    name.

    Parameters:
        credentials: endpoint and token; discovered with
            ``Credentials.load()`` when omitted
        config: request settings
        session: a ``requests.Session`` to share between resources
    """

    update_keys: Sequence[str] = ()

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.credentials = credentials or Credentials.load()
        self.api = ApiCaller(self.credentials, self.api_base, config, session)
        logger.debug("%s using %s", self.__class__.__name__, self.api.base_url)

    @property
    def api_base(self) -> str:
        return self.__class__.__name__.lower()

    def hash_for_update(
        self, old: Any, new: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Merge *new* over *old*, keeping only the keys the API accepts.

        *old* may be a ``Response`` from a ``describe()`` call, in which case
        its payload is used.
        """
        if isinstance(old, Response):
            old = old.response
        require_mapping(old, "existing object")
        require_mapping(new)
        merged = {**old, **new}
        return {k: v for k, v in merged.items() if k in self.update_keys}

    def _update(
        self, path: str, body: Mapping[str, Any], modify: bool, describe
    ) -> Response:
        require_mapping(body)
        if not modify:
            return self.api.put(path, body, "application/json")
        return self.api.put(
            path, self.hash_for_update(describe(), body), "application/json"
        )

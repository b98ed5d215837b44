"""HTTP request executor used by every API class."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from importlib.metadata import version
from typing import Any, Iterator, Mapping, MutableMapping, Optional, Tuple, Union

import requests
from typing_extensions import Protocol

from ..auth.credentials import Credentials
from ..exceptions import CredentialError
from ..paginator import ALL, LAZY, Mode, PageRequest, Paginator
from ..paginator._body import Serialized, canonical_body
from ._models import Response, parse_response, unwrap
from ._querystring import to_qs, uri_concat

log = logging.getLogger(__name__)

JSON = "application/json"


class Executor(Protocol):
    """Anything that can perform one HTTP call.

    ``execute`` returns the raw body and status code. It raises only for
    transport problems; a 4xx or 5xx answer is a normal return value.
    """

    def execute(
        self,
        method: str,
        path: str,
        payload: Any = None,
        content_type: Optional[str] = None,
    ) -> Tuple[str, int]: ...


@dataclass
class ClientConfig:
    """Settings shared by every request an ``ApiCaller`` makes."""

    timeout: int = 30
    verify: bool = True
    headers: MutableMapping[str, str] = field(default_factory=dict)
    verbose: bool = False


def _paging_limit(payload: Any) -> Any:
    if isinstance(payload, Mapping):
        return dict(payload).get("limit")
    if isinstance(payload, str):
        try:
            return canonical_body(Serialized(payload)).get("limit")
        except ValueError:
            return None
    return None


class ApiCaller:
    """Talk to one part of the Wavefront v2 API.

    Parameters:
        credentials: must provide ``endpoint`` and ``token``
        api_base: path under ``/api/v2``, e.g. ``alert``
        config: timeouts and extra headers
        session: a ``requests.Session`` to reuse

    Raises:
        CredentialError: if the endpoint or token is missing
    """

    def __init__(
        self,
        credentials: Credentials,
        api_base: str,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not credentials.endpoint:
            raise CredentialError("no Wavefront endpoint configured")
        if not credentials.token:
            raise CredentialError("no Wavefront API token configured")

        self.config = config or ClientConfig()
        endpoint = credentials.endpoint.rstrip("/")
        if not endpoint.startswith(("http://", "https://")):
            endpoint = f"https://{endpoint}"
        self.base_url = f"{endpoint}/{uri_concat('api', 'v2', api_base)}"

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {credentials.token}",
                "Accept": JSON,
                "User-Agent": f"wavefront-sdk/{version('wavefront-sdk')}",
            }
        )
        self.session.headers.update(self.config.headers)

    def url(self, path: str = "") -> str:
        path = path.strip("/")
        return f"{self.base_url}/{path}" if path else self.base_url

    def execute(
        self,
        method: str,
        path: str,
        payload: Any = None,
        content_type: Optional[str] = None,
    ) -> Tuple[str, int]:
        """Perform one request and return ``(body, status_code)``.

        For GET and DELETE *payload* is rendered as the query string; for
        other verbs it is the body, JSON-encoded unless it is already text.
        """
        method = method.upper()
        url = self.url(path)
        headers = {"Content-Type": content_type} if content_type else {}
        params: Optional[str] = None
        data: Optional[Union[str, bytes]] = None

        if method in ("GET", "DELETE"):
            if payload:
                params = to_qs(payload)
        elif isinstance(payload, (str, bytes)):
            data = payload
        elif payload is not None:
            data = json.dumps(unwrap(payload))

        log.log(
            logging.INFO if self.config.verbose else logging.DEBUG,
            "%s %s%s %s",
            method,
            url,
            f"?{params}" if params else "",
            data if data is not None else "",
        )
        resp = self.session.request(
            method,
            url,
            params=params,
            data=data,
            headers=headers,
            timeout=self.config.timeout,
            verify=self.config.verify,
        )
        log.debug("%s %s returned %s", method, url, resp.status_code)
        return resp.text, resp.status_code

    def respond(
        self,
        method: str,
        path: str = "",
        payload: Any = None,
        content_type: Optional[str] = None,
    ) -> Union[Response, Iterator[Any]]:
        """Make a call and parse it, paginating when the limit asks for it.

        A ``limit`` of ``ALL`` merges every page into one ``Response``; a
        ``limit`` of ``LAZY`` returns an iterator over the items instead.
        """
        limit = _paging_limit(payload)
        if limit not in (ALL, LAZY):
            return parse_response(*self.execute(method, path, payload, content_type))

        mode = Mode.GET if method.upper() in ("GET", "DELETE") else Mode.POST
        paginator = Paginator(
            self, PageRequest(method.upper(), path, payload, content_type), mode
        )
        if limit == LAZY:
            return paginator.iter_items()
        return paginator.paginate().to_response()

    def get(self, path: str = "", query: Optional[Mapping[str, Any]] = None) -> Any:
        return self.respond("GET", path, query)

    def post(
        self, path: str = "", body: Any = None, content_type: Optional[str] = None
    ) -> Any:
        return self.respond("POST", path, body, content_type)

    def put(
        self, path: str = "", body: Any = None, content_type: Optional[str] = None
    ) -> Any:
        return self.respond("PUT", path, body, content_type)

    def delete(self, path: str = "") -> Any:
        return self.respond("DELETE", path)

"""Wavefront credential discovery.

Credentials are looked up, lowest precedence first, in:

- ``/etc/wavefront/credentials``
- ``~/.wavefront``
- the ``WAVEFRONT_ENDPOINT``, ``WAVEFRONT_TOKEN`` and ``WAVEFRONT_PROXY``
  environment variables

The files are ini-style, one section per profile::

    [default]
    endpoint = metrics.wavefront.com
    token = 01234567-89ab-cdef-0123-456789abcdef
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "default"

SYSTEM_CREDENTIALS = Path("/etc/wavefront/credentials")

ENV_OVERRIDES: Dict[str, str] = {
    "endpoint": "WAVEFRONT_ENDPOINT",
    "token": "WAVEFRONT_TOKEN",
    "proxy": "WAVEFRONT_PROXY",
}


def credential_files(file: Optional[Union[str, Path]] = None) -> List[Path]:
    """Return the files to read, in increasing order of precedence."""
    if file is not None:
        return [Path(file).expanduser()]
    return [SYSTEM_CREDENTIALS, Path.home() / ".wavefront"]


def load_profile(file: Path, profile: str = DEFAULT_PROFILE) -> Dict[str, str]:
    """Read one profile section from an ini file.

    A missing section gives an empty mapping.
    """
    parser = configparser.ConfigParser(interpolation=None)
    parser.read(file, encoding="utf-8")
    if not parser.has_section(profile):
        logger.debug("No [%s] profile in %s", profile, file)
        return {}
    return dict(parser.items(profile))


def load_from_files(
    files: List[Path], profile: str = DEFAULT_PROFILE
) -> Dict[str, Any]:
    """Load *profile* from the last of *files* that defines it."""
    found: Dict[str, Any] = {}
    for file in files:
        if not file.is_file():
            continue
        values = load_profile(file, profile)
        if values:
            found = dict(values, file=file)
    return found


def env_override(
    raw: Mapping[str, Any], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Overlay any ``WAVEFRONT_*`` environment variables on *raw*."""
    environ = os.environ if environ is None else environ
    merged = dict(raw)
    for key, var in ENV_OVERRIDES.items():
        if environ.get(var):
            merged[key] = environ[var]
    return merged


@dataclass(frozen=True)
class Credentials:
    """Endpoint, token and proxy settings for talking to Wavefront.

    Attributes:
        endpoint: API host, e.g. ``metrics.wavefront.com``
        token: API token
        proxy: Wavefront proxy host (optional)
        port: Wavefront proxy port (optional)
        file: the credential file the values came from, if any
    """

    endpoint: Optional[str] = None
    token: Optional[str] = None
    proxy: Optional[str] = None
    port: Optional[int] = None
    file: Optional[Path] = None

    @classmethod
    def load(
        cls,
        file: Optional[Union[str, Path]] = None,
        profile: str = DEFAULT_PROFILE,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Credentials":
        """Discover credentials from files and the environment.

        Parameters:
            file: read only this file instead of the default locations
            profile: ini section to use
            environ: mapping to use in place of ``os.environ``

        Returns:
            A ``Credentials`` instance; fields nobody set are ``None``.
        """
        raw = env_override(load_from_files(credential_files(file), profile), environ)
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Credentials":
        port = data.get("port")
        file = data.get("file")
        return cls(
            endpoint=data.get("endpoint"),
            token=data.get("token"),
            proxy=data.get("proxy"),
            port=int(port) if port not in (None, "") else None,
            file=Path(file) if file else None,
        )

    @property
    def creds(self) -> Dict[str, Optional[str]]:
        """The values needed to call the API."""
        return {"endpoint": self.endpoint, "token": self.token}

    @property
    def proxy_settings(self) -> Dict[str, Any]:
        """The values needed to write to a proxy."""
        return {"proxy": self.proxy, "port": self.port}

    def to_dict(self) -> Dict[str, Any]:
        return {**self.creds, **self.proxy_settings}

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return (
            f"Credentials(endpoint={self.endpoint!r}, token={token!r}, "
            f"proxy={self.proxy!r}, port={self.port!r})"
        )

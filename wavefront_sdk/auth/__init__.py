"""Credential discovery package."""

from wavefront_sdk.auth.credentials import (
    DEFAULT_PROFILE,
    Credentials,
    credential_files,
    env_override,
    load_from_files,
    load_profile,
)

__all__ = [
    "DEFAULT_PROFILE",
    "Credentials",
    "credential_files",
    "env_override",
    "load_from_files",
    "load_profile",
]

"""Tests for wavefront_sdk.auth.credentials."""

from pathlib import Path

import pytest
from wavefront_sdk.auth import credentials as credentials_module
from wavefront_sdk.auth.credentials import (
    Credentials,
    credential_files,
    env_override,
    load_from_files,
    load_profile,
)

CONFIG = """
[default]
endpoint = default.wavefront.com
token = default-token
proxy = wavefront.localnet
port = 2878

[other]
endpoint = other.wavefront.com
token = other-token
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "credentials"
    path.write_text(CONFIG)
    return path


@pytest.fixture
def no_default_files(tmp_path, monkeypatch):
    """Point the default file locations somewhere empty."""
    monkeypatch.setattr(
        credentials_module, "SYSTEM_CREDENTIALS", tmp_path / "etc-credentials"
    )
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
    return tmp_path


class TestFiles:
    def test_explicit_file_replaces_defaults(self, config_file):
        assert credential_files(config_file) == [config_file]

    def test_default_files(self, no_default_files):
        files = credential_files()

        assert files == [
            no_default_files / "etc-credentials",
            no_default_files / "home" / ".wavefront",
        ]

    def test_load_profile(self, config_file):
        assert load_profile(config_file, "other") == {
            "endpoint": "other.wavefront.com",
            "token": "other-token",
        }

    def test_missing_profile_is_empty(self, config_file):
        assert load_profile(config_file, "nope") == {}

    def test_last_file_wins(self, tmp_path, config_file):
        second = tmp_path / "second"
        second.write_text("[default]\nendpoint = second.wavefront.com\n")

        loaded = load_from_files([config_file, second, tmp_path / "missing"])

        assert loaded["endpoint"] == "second.wavefront.com"
        assert "token" not in loaded
        assert loaded["file"] == second


class TestEnvOverride:
    def test_env_wins(self):
        merged = env_override(
            {"endpoint": "file.wavefront.com", "token": "file-token"},
            {"WAVEFRONT_TOKEN": "env-token", "WAVEFRONT_PROXY": "proxy.local"},
        )

        assert merged == {
            "endpoint": "file.wavefront.com",
            "token": "env-token",
            "proxy": "proxy.local",
        }

    def test_empty_env_values_ignored(self):
        assert env_override({"token": "t"}, {"WAVEFRONT_TOKEN": ""}) == {"token": "t"}


class TestCredentials:
    def test_load_file(self, config_file):
        creds = Credentials.load(file=config_file, environ={})

        assert creds.endpoint == "default.wavefront.com"
        assert creds.token == "default-token"
        assert creds.proxy == "wavefront.localnet"
        assert creds.port == 2878
        assert creds.file == config_file

    def test_load_profile(self, config_file):
        creds = Credentials.load(file=config_file, profile="other", environ={})

        assert creds.endpoint == "other.wavefront.com"
        assert creds.proxy is None
        assert creds.port is None

    def test_environment_only(self, no_default_files):
        creds = Credentials.load(
            environ={
                "WAVEFRONT_ENDPOINT": "env.wavefront.com",
                "WAVEFRONT_TOKEN": "env-token",
            }
        )

        assert creds.creds == {"endpoint": "env.wavefront.com", "token": "env-token"}
        assert creds.file is None

    def test_nothing_configured(self, no_default_files):
        creds = Credentials.load(environ={})

        assert creds == Credentials()

    def test_helpers(self):
        creds = Credentials(endpoint="e", token="t", proxy="p", port=2878)

        assert creds.proxy_settings == {"proxy": "p", "port": 2878}
        assert creds.to_dict() == {
            "endpoint": "e",
            "token": "t",
            "proxy": "p",
            "port": 2878,
        }

    def test_repr_hides_token(self):
        assert "secret" not in repr(Credentials(endpoint="e", token="secret"))

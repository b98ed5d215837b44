"""Tests for the chart Query API."""

import datetime as dt
import json

import pytest
import responses
from fixtures import API
from wavefront_sdk import Query, QueryOptions
from wavefront_sdk.exceptions import InvalidGranularity, InvalidTimestamp

START = 1483228800000


@pytest.fixture
def query(credentials):
    return Query(credentials)


class TestQueryOptions:
    def test_defaults_send_only_include_obsolete(self):
        assert QueryOptions().to_params() == {"i": False}

    def test_names_are_mapped(self):
        params = QueryOptions(
            name="q1", points=100, list_mode=True, auto_events=True
        ).to_params()

        assert params == {
            "n": "q1",
            "p": 100,
            "listMode": True,
            "autoEvents": True,
            "i": False,
        }


class TestQuery:
    @responses.activate
    def test_query(self, query):
        responses.add(
            responses.GET,
            f"{API}/chart/api",
            body=json.dumps({"name": "ts(cpu)", "timeseries": []}),
        )

        resp = query.query(
            "ts(cpu)",
            "m",
            dt.datetime(2017, 1, 1, tzinfo=dt.timezone.utc),
            START + 60000,
            QueryOptions(strict=True),
        )

        assert resp.ok
        assert resp.response.name == "ts(cpu)"
        url = responses.calls[0].request.url
        assert "q=ts%28cpu%29" in url
        assert "g=m" in url
        assert f"s={START}" in url
        assert f"e={START + 60000}" in url
        assert "strict=true" in url
        assert "i=false" in url

    @responses.activate
    def test_raw_returns_bare_list(self, query):
        responses.add(
            responses.GET,
            f"{API}/chart/raw",
            body=json.dumps([{"points": [{"timestamp": START, "value": 1.0}]}]),
        )

        resp = query.raw("cpu.load", source="box.example.com", start=START)

        assert resp.ok
        assert resp.response[0]["points"][0]["value"] == 1.0
        url = responses.calls[0].request.url
        assert "metric=cpu.load" in url
        assert "source=box.example.com" in url
        assert f"startTime={START}" in url
        assert "endTime" not in url

    def test_bad_granularity(self, query):
        with pytest.raises(InvalidGranularity):
            query.query("ts(cpu)", "w", START)

    def test_start_required(self, query):
        with pytest.raises(InvalidTimestamp):
            query.query("ts(cpu)", "m", None)

    def test_query_must_be_text(self, query):
        with pytest.raises(ValueError):
            query.query(["ts(cpu)"], "m", START)

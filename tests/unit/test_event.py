"""Tests for the Event API."""

import datetime as dt
import json

import pytest
import responses
from fixtures import API, envelope, page
from wavefront_sdk import ALL, Event, EventListOptions
from wavefront_sdk.exceptions import InvalidEventId, InvalidTimestamp

EVENT = "1481553823153:testev"


@pytest.fixture
def events(credentials):
    return Event(credentials)


class TestEventListOptions:
    def test_params(self):
        options = EventListOptions(
            start=dt.datetime(2017, 1, 1, tzinfo=dt.timezone.utc),
            end=1483315200000,
            limit=20,
        )

        assert options.to_params() == {
            "earliestStartTimeEpochMillis": 1483228800000,
            "latestStartTimeEpochMillis": 1483315200000,
            "limit": 20,
        }

    def test_cursor(self):
        options = EventListOptions(start=1483228800000, cursor=EVENT)

        assert options.to_params()["cursor"] == EVENT

    def test_start_is_required(self):
        with pytest.raises(ValueError):
            EventListOptions().to_params()

    def test_bad_cursor(self):
        with pytest.raises(InvalidEventId):
            EventListOptions(start=1483228800000, cursor="nope").to_params()

    def test_bad_time(self):
        with pytest.raises(InvalidTimestamp):
            EventListOptions(start="last tuesday").to_params()


class TestEvent:
    @responses.activate
    def test_list(self, events):
        responses.add(responses.GET, f"{API}/event", body=envelope(page([{"id": EVENT}])))

        resp = events.list(EventListOptions(start=1483228800000, end=1483315200000))

        assert resp.items == [{"id": EVENT}]
        url = responses.calls[0].request.url
        assert "earliestStartTimeEpochMillis=1483228800000" in url
        assert "latestStartTimeEpochMillis=1483315200000" in url
        assert "limit=100" in url

    @responses.activate
    def test_list_all_follows_cursor(self, events):
        responses.add(
            responses.GET,
            f"{API}/event",
            body=envelope(page([{"id": EVENT}], more=True, cursor=EVENT)),
        )
        responses.add(
            responses.GET,
            f"{API}/event",
            body=envelope(page([{"id": "1481553823154:other"}], more=False)),
        )

        resp = events.list(EventListOptions(start=1483228800000, limit=ALL))

        assert len(resp.items) == 2
        assert "cursor=1481553823153%3Atestev" in responses.calls[1].request.url

    @responses.activate
    def test_create(self, events):
        body = {"name": "testev", "startTime": 1481553823153, "annotations": {}}
        responses.add(responses.POST, f"{API}/event", body=envelope(body))

        events.create(body)

        assert json.loads(responses.calls[0].request.body) == body

    @responses.activate
    def test_describe_delete_close(self, events):
        responses.add(responses.GET, f"{API}/event/{EVENT}", body=envelope({"id": EVENT}))
        responses.add(responses.DELETE, f"{API}/event/{EVENT}", body=envelope({}))
        responses.add(responses.POST, f"{API}/event/{EVENT}/close", body=envelope({}))

        assert events.describe(EVENT).response.id == EVENT
        assert events.delete(EVENT).ok
        assert events.close(EVENT).ok

    @responses.activate
    def test_update_keeps_only_updatable_keys(self, events):
        current = {"id": EVENT, "name": "testev", "startTime": 1, "table": "x"}
        responses.add(responses.GET, f"{API}/event/{EVENT}", body=envelope(current))
        responses.add(responses.PUT, f"{API}/event/{EVENT}", body=envelope({}))

        events.update(EVENT, {"endTime": 2})

        assert json.loads(responses.calls[1].request.body) == {
            "name": "testev",
            "startTime": 1,
            "endTime": 2,
        }

    @responses.activate
    def test_tags(self, events):
        responses.add(responses.POST, f"{API}/event/{EVENT}/tag", body=envelope({}))
        responses.add(responses.PUT, f"{API}/event/{EVENT}/tag/t1", body=envelope({}))

        events.tag_set(EVENT, ("t1", "t2"))
        events.tag_add(EVENT, "t1")

        assert json.loads(responses.calls[0].request.body) == ["t1", "t2"]

    def test_invalid_id(self, events):
        with pytest.raises(InvalidEventId):
            events.describe("1481553823153")

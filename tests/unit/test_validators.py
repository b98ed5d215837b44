"""Tests for argument validators."""

import datetime as dt

import pytest
from wavefront_sdk._core._validators import (
    parse_time,
    require_mapping,
    wf_alert_id,
    wf_event_id,
    wf_granularity,
    wf_ms_ts,
    wf_source_id,
    wf_string,
    wf_version,
)
from wavefront_sdk.exceptions import (
    InvalidAlertId,
    InvalidEventId,
    InvalidGranularity,
    InvalidSourceId,
    InvalidString,
    InvalidTimestamp,
    InvalidVersion,
    WavefrontError,
)


@pytest.mark.parametrize("value", ["1481553823153", 1481553823153])
def test_good_alert_ids(value):
    assert wf_alert_id(value)


@pytest.mark.parametrize(
    "value", ["148155382315", "abcdefghijklm", None, [], "1481553823153a"]
)
def test_bad_alert_ids(value):
    with pytest.raises(InvalidAlertId):
        wf_alert_id(value)


def test_event_ids():
    assert wf_event_id("1493370839062:test1")
    with pytest.raises(InvalidEventId):
        wf_event_id("1493370839062")
    with pytest.raises(InvalidEventId):
        wf_event_id(1493370839062)


def test_source_ids():
    assert wf_source_id("web-01.example.com")
    for bad in ("bad source", "x" * 1024, "", 12):
        with pytest.raises(InvalidSourceId):
            wf_source_id(bad)


def test_versions():
    assert wf_version(1)
    assert wf_version("12")
    for bad in (0, -1, "one", 1.5, True):
        with pytest.raises(InvalidVersion):
            wf_version(bad)


def test_strings():
    assert wf_string("my-tag_1.2, ok")
    assert wf_string("")
    for bad in ("semi;colon", "slash/tag", "x" * 1024, 5):
        with pytest.raises(InvalidString):
            wf_string(bad)


def test_timestamps_and_granularity():
    assert wf_ms_ts(1481553823153)
    assert wf_granularity("m")
    with pytest.raises(InvalidTimestamp):
        wf_ms_ts("now")
    with pytest.raises(InvalidGranularity):
        wf_granularity("w")


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        wf_alert_id("nope")
    assert issubclass(InvalidAlertId, WavefrontError)


def test_require_mapping():
    assert require_mapping({"a": 1}) == {"a": 1}
    with pytest.raises(ValueError, match="body must be a mapping"):
        require_mapping("a=1")


class TestParseTime:
    def test_epoch_values_pass_through(self):
        assert parse_time(1481553823153, in_ms=True) == 1481553823153
        assert parse_time("1481553823", in_ms=False) == 1481553823

    def test_datetime(self):
        when = dt.datetime(2017, 1, 1, tzinfo=dt.timezone.utc)

        assert parse_time(when) == 1483228800
        assert parse_time(when, in_ms=True) == 1483228800000

    def test_naive_datetime_is_utc(self):
        assert parse_time(dt.datetime(2017, 1, 1)) == 1483228800

    def test_date(self):
        assert parse_time(dt.date(2017, 1, 1), in_ms=True) == 1483228800000

    def test_iso_string(self):
        assert parse_time("2017-01-01T00:00:00Z") == 1483228800

    def test_garbage(self):
        with pytest.raises(InvalidTimestamp):
            parse_time("last tuesday")

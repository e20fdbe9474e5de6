from datetime import date, datetime, timedelta, timezone

import numpy as np
import pandas as pd
import pytest

from formatkit.formatters.dates import format_date, time_ago, to_timestamp


# --- to_timestamp ---
def test_to_timestamp_numbers():
    assert to_timestamp(0) == 0
    assert to_timestamp(86400) == 86400
    assert to_timestamp("86400") == 86400
    assert to_timestamp(np.int64(5)) == 5


def test_to_timestamp_strings(host, fixed_now):
    assert to_timestamp("1970-01-02", host) == 86400
    assert to_timestamp("2024-03-05T12:00:00Z", host) == fixed_now
    assert to_timestamp("2024-03-05 14:00:00+02:00", host) == fixed_now


def test_to_timestamp_datetimes(fixed_now):
    assert to_timestamp(datetime(1970, 1, 2)) == 86400
    assert to_timestamp(datetime(2024, 3, 5, 12, tzinfo=timezone.utc)) == fixed_now
    assert to_timestamp(date(1970, 1, 2)) == 86400
    assert to_timestamp(pd.Timestamp("2024-03-05 12:00", tz="UTC")) == fixed_now


@pytest.mark.parametrize("value", [None, True, "", "   ", "not a date", float("nan"), pd.NaT])
def test_to_timestamp_failures(value, host):
    assert to_timestamp(value, host) is None


# --- format_date ---
def test_format_date_epoch_is_not_a_failure(host):
    assert format_date(0, "%Y-%m-%d", translate=False, host=host) == "1970-01-01"


def test_format_date_default_pattern_from_settings(host, monkeypatch, fixed_now):
    from formatkit.config import settings

    monkeypatch.setattr(settings, "date_format", "%d/%m/%Y")
    assert format_date(fixed_now, host=host) == "05/03/2024"


def test_format_date_string_input(host):
    assert format_date("2024-03-05 10:30", "%Y-%m-%d %H:%M", host=host) == "2024-03-05 10:30"


def test_format_date_long_month_name(host):
    assert format_date(date(2024, 3, 5), "%B %d, %Y", host=host) == "March 05, 2024"


def test_format_date_failure_returns_dash(host):
    assert format_date("garbage", host=host, dash="-") == "-"
    assert format_date(None, host=host, dash="-") == "-"


def test_format_date_raw_output_is_utc(host, fixed_now):
    assert format_date(fixed_now, "%H:%M", translate=False, host=host) == "12:00"


# --- time_ago ---
@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=10), "1 min ago"),
        (timedelta(minutes=5), "5 mins ago"),
        (timedelta(hours=2), "2 hours ago"),
        (timedelta(days=3), "3 days ago"),
        (timedelta(days=14), "2 weeks ago"),
        (timedelta(days=60), "2 months ago"),
        (timedelta(days=730), "2 years ago"),
    ],
)
def test_time_ago_steps(delta, expected, host, fixed_now):
    then = fixed_now - int(delta.total_seconds())
    assert time_ago(then, host=host) == expected


def test_time_ago_explicit_now(host):
    assert time_ago(0, now=300, host=host) == "5 mins ago"


def test_time_ago_accepts_strings(host):
    assert time_ago("2024-03-05T11:00:00Z", host=host) == "1 hour ago"


def test_time_ago_failure_returns_dash(host):
    assert time_ago("whenever", host=host, dash="-") == "-"

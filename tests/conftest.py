from datetime import datetime, timezone

import pytest

from formatkit.config import FormatKitSettings
from formatkit.host import PlainHost, reset_default_host

# 2024-03-05 12:00:00 UTC
FIXED_NOW = 1709640000


@pytest.fixture(autouse=True)
def _fresh_default_host():
    reset_default_host()
    yield
    reset_default_host()


@pytest.fixture
def utc_settings():
    return FormatKitSettings(
        dash="—",
        date_format="%Y-%m-%d",
        timezone="UTC",
        thousands_sep=",",
        decimal_point=".",
        overflow_limit=3,
        excerpt_length=150,
        number_decimals=0,
        debug=False,
    )


@pytest.fixture
def host(utc_settings):
    return PlainHost(
        utc_settings,
        clock=lambda: datetime.fromtimestamp(FIXED_NOW, tz=timezone.utc),
    )


@pytest.fixture
def fixed_now():
    return FIXED_NOW

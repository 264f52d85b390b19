"""Tests for the HTTP layer clock."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from wordjotter.config import Settings
from wordjotter.infrastructure.common.clock import local_now


def test_local_now_uses_configured_timezone() -> None:
    now = local_now(Settings(TIMEZONE="Europe/Helsinki"))
    assert now.tzinfo == ZoneInfo("Europe/Helsinki")


def test_local_now_is_current_moment() -> None:
    now = local_now(Settings(TIMEZONE="Pacific/Kiritimati"))
    assert abs(now - datetime.now(UTC)) < timedelta(seconds=5)
    assert now.utcoffset() == timedelta(hours=14)

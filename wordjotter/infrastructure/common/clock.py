"""Wall clock access for the HTTP layer."""

from datetime import datetime
from zoneinfo import ZoneInfo

from wordjotter.config import Settings, get_settings


def local_now(settings: Settings | None = None) -> datetime:
    """Current moment in the configured TIMEZONE, so its date is the user's local day."""
    settings = settings or get_settings()
    return datetime.now(ZoneInfo(settings.TIMEZONE))

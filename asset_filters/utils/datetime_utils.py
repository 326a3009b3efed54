from datetime import datetime

from asset_filters.constants.app_constants import AppConstants
from asset_filters.dependencies.config_provider import get_timezone


def local_now() -> datetime:
    """
    Get current datetime in the configured timezone (ASSET_FILTERS_TIMEZONE, UTC by default).
    """
    return datetime.now(get_timezone())

def today_iso() -> str:
    """
    Get today's calendar date as used by date filter editors.
    Example: "2025-07-23"
    """
    return local_now().strftime(AppConstants.DATE_FORMAT)

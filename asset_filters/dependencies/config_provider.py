import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from asset_filters.constants.app_constants import AppConstants

load_dotenv()

logger = logging.getLogger(__name__)


def get_timezone() -> ZoneInfo:
    """Calendar used when a filter row needs today's date."""
    name = os.getenv("ASSET_FILTERS_TIMEZONE", AppConstants.DEFAULT_TIMEZONE)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning(f"Unknown timezone '{name}', falling back to {AppConstants.DEFAULT_TIMEZONE}")
        return ZoneInfo(AppConstants.DEFAULT_TIMEZONE)


def get_sort_param() -> str:
    return os.getenv("ASSET_FILTERS_SORT_PARAM", AppConstants.DEFAULT_SORT_PARAM)

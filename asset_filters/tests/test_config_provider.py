from zoneinfo import ZoneInfo

from asset_filters.dependencies.config_provider import get_sort_param, get_timezone
from asset_filters.entity.column_entity import BuiltInColumn
from asset_filters.utils.datetime_utils import today_iso
from asset_filters.utils.default_value_generator import default_value_for


def test_defaults():
    assert get_timezone() == ZoneInfo("UTC")
    assert get_sort_param() == "s"


def test_timezone_from_environment(monkeypatch):
    monkeypatch.setenv("ASSET_FILTERS_TIMEZONE", "Asia/Kolkata")
    assert get_timezone() == ZoneInfo("Asia/Kolkata")


def test_unknown_timezone_falls_back_to_utc(monkeypatch):
    for name in ("Mars/Olympus_Mons", "America"):
        monkeypatch.setenv("ASSET_FILTERS_TIMEZONE", name)
        assert get_timezone() == ZoneInfo("UTC")


def test_zone_directory_does_not_break_date_defaults(monkeypatch):
    monkeypatch.setenv("ASSET_FILTERS_TIMEZONE", "America")
    assert default_value_for(BuiltInColumn(name="createdAt")) == today_iso()

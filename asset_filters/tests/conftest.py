import pytest

from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn
from asset_filters.entity.custom_field_entity import CustomFieldDefinition


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ASSET_FILTERS_TIMEZONE", raising=False)
    monkeypatch.delenv("ASSET_FILTERS_SORT_PARAM", raising=False)


@pytest.fixture
def builtin_columns():
    return [
        BuiltInColumn(name="id"),
        BuiltInColumn(name="name"),
        BuiltInColumn(name="custody"),
        BuiltInColumn(name="status"),
        BuiltInColumn(name="category"),
        BuiltInColumn(name="location"),
        BuiltInColumn(name="kit"),
        BuiltInColumn(name="description"),
        BuiltInColumn(name="valuation"),
        BuiltInColumn(name="availableToBook"),
        BuiltInColumn(name="createdAt"),
        BuiltInColumn(name="tags"),
    ]


@pytest.fixture
def custom_columns():
    return [
        CustomColumn(name="cf_Serial", cf_type="TEXT"),
        CustomColumn(name="cf_Notes", cf_type="MULTILINE_TEXT"),
        CustomColumn(name="cf_Insured", cf_type="BOOLEAN"),
        CustomColumn(name="cf_Warranty end", cf_type="DATE"),
        CustomColumn(name="cf_Condition", cf_type="OPTION", options=["New", "Used"]),
    ]


@pytest.fixture
def columns(builtin_columns, custom_columns):
    return builtin_columns + custom_columns


@pytest.fixture
def custom_fields():
    return [
        CustomFieldDefinition(name="Serial", type="TEXT"),
        CustomFieldDefinition(name="Notes", type="MULTILINE_TEXT"),
        CustomFieldDefinition(name="Insured", type="BOOLEAN"),
        CustomFieldDefinition(name="Warranty end", type="DATE"),
        CustomFieldDefinition(name="Condition", type="OPTION", options=["New", "Used"], required=True),
    ]

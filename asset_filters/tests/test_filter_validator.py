import pytest

from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn
from asset_filters.model.field_type_model import UIFieldType
from asset_filters.model.filter_model import FilterDescriptor, FilterOperator, SortDescriptor
from asset_filters.utils.filter_validator import (
    FilterValidationError,
    default_operator_for,
    find_unknown_columns,
    is_operator_allowed,
    operators_for,
    validate_filter,
    validate_filters,
)


def make_filter(name, operator, value, field_type):
    return FilterDescriptor(name=name, operator=operator, value=value, type=field_type)


# ----------------------------
# Operator tables
# ----------------------------

def test_every_field_type_has_operators():
    for field_type in UIFieldType:
        assert operators_for(field_type)


def test_default_operators():
    assert default_operator_for(UIFieldType.STRING) == FilterOperator.IS
    assert default_operator_for(UIFieldType.TEXT) == FilterOperator.CONTAINS
    assert default_operator_for(UIFieldType.ARRAY) == FilterOperator.CONTAINS


def test_is_operator_allowed():
    assert is_operator_allowed("between", UIFieldType.NUMBER) is True
    assert is_operator_allowed("between", UIFieldType.ENUM) is False
    assert is_operator_allowed("gt", "number") is True


# ----------------------------
# Positive Test Cases
# ----------------------------

def test_valid_filters(columns):
    validate_filter(make_filter("status", "is", "AVAILABLE", UIFieldType.ENUM), columns)
    validate_filter(make_filter("valuation", "between", ["10", "50"], UIFieldType.NUMBER), columns)
    validate_filter(make_filter("cf_Insured", "is", "true", UIFieldType.BOOLEAN), columns)
    validate_filters([], columns)


def test_type_is_resolved_from_catalog():
    # schema changed: cf_Grade used to be text, is now an option
    columns = [CustomColumn(name="cf_Grade", cf_type="OPTION")]
    stale = make_filter("cf_Grade", "containsAny", "A", UIFieldType.STRING)
    validate_filter(stale, columns)


# ----------------------------
# Negative Test Cases
# ----------------------------

def test_unknown_column(columns):
    with pytest.raises(FilterValidationError) as excinfo:
        validate_filter(make_filter("cf_Deleted", "is", "x", UIFieldType.STRING), columns)
    assert "Unknown column 'cf_Deleted'" in str(excinfo.value)


def test_operator_not_allowed(columns):
    with pytest.raises(FilterValidationError) as excinfo:
        validate_filter(make_filter("availableToBook", "gt", "1", UIFieldType.BOOLEAN), columns)
    assert "Operator 'gt' not allowed for type 'boolean'" in str(excinfo.value)


def test_missing_delimiter_operator_rejected(columns):
    with pytest.raises(FilterValidationError):
        validate_filter(make_filter("status", "AVAILABLE", None, UIFieldType.ENUM), columns)


@pytest.mark.parametrize("value", [["10"], ["1", "2", "3"], "10", None])
def test_malformed_range(columns, value):
    with pytest.raises(FilterValidationError) as excinfo:
        validate_filter(make_filter("valuation", "between", value, UIFieldType.NUMBER), columns)
    assert "requires exactly two values" in str(excinfo.value)


def test_find_unknown_columns(columns):
    descriptors = [
        make_filter("gone", "is", "x", UIFieldType.STRING),
        SortDescriptor(name="also_gone"),
        make_filter("status", "is", "x", UIFieldType.ENUM),
        SortDescriptor(name="gone"),
    ]
    assert find_unknown_columns(descriptors, columns) == ["gone", "also_gone"]


def test_validate_filters_reports_everything(columns):
    descriptors = [
        make_filter("gone", "is", "x", UIFieldType.STRING),
        make_filter("status", "is", "AVAILABLE", UIFieldType.ENUM),
        make_filter("description", "is", "x", UIFieldType.TEXT),
        make_filter("valuation", "between", ["1"], UIFieldType.NUMBER),
    ]
    with pytest.raises(FilterValidationError) as excinfo:
        validate_filters(descriptors, columns)

    error_msg = str(excinfo.value)
    assert error_msg.startswith("Invalid filters: Unknown columns: gone")
    assert "Operator 'is' not allowed for type 'text'" in error_msg
    assert "Operator 'between' on 'valuation' requires exactly two values, got 1" in error_msg


def test_hidden_columns_still_validate():
    validate_filter(make_filter("name", "is", "x", UIFieldType.STRING), [BuiltInColumn(name="name", visible=False)])

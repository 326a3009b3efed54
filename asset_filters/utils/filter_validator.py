from typing import Iterable, List, Union

from asset_filters.constants.app_message import AppMessage
from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn, find_column
from asset_filters.model.field_type_model import UIFieldType
from asset_filters.model.filter_model import FilterDescriptor, FilterOperator, SortDescriptor
from asset_filters.utils.field_type_resolver import resolve_field_type

"""
Operator legality for parsed filters.

The parser accepts anything; callers turning filters into queries run them
through validate_filter / validate_filters first. Supported operators:

    string   -> is, isNot, contains, matchesAny, containsAny
    text     -> contains
    boolean  -> is
    date     -> is, isNot, before, after, between, inDates
    number   -> is, isNot, gt, lt, gte, lte, between
    enum     -> is, isNot, containsAny, excludeAny
    array    -> contains, containsAny, containsAll, excludeAny

The first operator of each list is the one a new filter row starts with.
"""


class FilterValidationError(Exception):
    pass


OPERATORS_BY_TYPE = {
    UIFieldType.STRING: [FilterOperator.IS, FilterOperator.IS_NOT, FilterOperator.CONTAINS,
                         FilterOperator.MATCHES_ANY, FilterOperator.CONTAINS_ANY],
    UIFieldType.TEXT: [FilterOperator.CONTAINS],
    UIFieldType.BOOLEAN: [FilterOperator.IS],
    UIFieldType.DATE: [FilterOperator.IS, FilterOperator.IS_NOT, FilterOperator.BEFORE,
                       FilterOperator.AFTER, FilterOperator.BETWEEN, FilterOperator.IN_DATES],
    UIFieldType.NUMBER: [FilterOperator.IS, FilterOperator.IS_NOT, FilterOperator.GT, FilterOperator.LT,
                         FilterOperator.GTE, FilterOperator.LTE, FilterOperator.BETWEEN],
    UIFieldType.ENUM: [FilterOperator.IS, FilterOperator.IS_NOT, FilterOperator.CONTAINS_ANY,
                       FilterOperator.EXCLUDE_ANY],
    UIFieldType.ARRAY: [FilterOperator.CONTAINS, FilterOperator.CONTAINS_ANY, FilterOperator.CONTAINS_ALL,
                        FilterOperator.EXCLUDE_ANY],
}

AnyColumn = Union[BuiltInColumn, CustomColumn]


def operators_for(field_type: UIFieldType) -> List[FilterOperator]:
    return list(OPERATORS_BY_TYPE.get(UIFieldType(field_type), []))


def default_operator_for(field_type: UIFieldType) -> FilterOperator:
    return OPERATORS_BY_TYPE[UIFieldType(field_type)][0]


def is_operator_allowed(operator: str, field_type: UIFieldType) -> bool:
    return any(operator == allowed.value for allowed in operators_for(field_type))


def validate_filter(descriptor: FilterDescriptor, columns: Iterable[AnyColumn]) -> None:
    """
    Check one filter against the current catalog.

    The type is resolved from the catalog rather than trusted from the
    descriptor, since the schema may have changed since it was saved.

    Raises:
        FilterValidationError: unknown column, operator not allowed for the
        column's type, or a 'between' value without exactly two components
    """
    column = find_column(columns, descriptor.name)
    if column is None:
        raise FilterValidationError(AppMessage.UNKNOWN_COLUMN.format(name=descriptor.name))

    field_type = resolve_field_type(column)
    if not is_operator_allowed(descriptor.operator, field_type):
        raise FilterValidationError(
            AppMessage.OPERATOR_NOT_ALLOWED.format(operator=descriptor.operator, field_type=field_type.value)
        )

    if descriptor.is_range:
        values = descriptor.value if isinstance(descriptor.value, (list, tuple)) else [descriptor.value]
        if len(values) != 2:
            raise FilterValidationError(
                AppMessage.RANGE_REQUIRES_TWO_VALUES.format(name=descriptor.name, count=len(values))
            )


def find_unknown_columns(descriptors: Iterable[Union[FilterDescriptor, SortDescriptor]],
                         columns: Iterable[AnyColumn]) -> List[str]:
    """Names referenced by filters or sorts that the catalog no longer has, first-seen order."""
    names = {column.name for column in columns}
    unknown = []
    for descriptor in descriptors:
        if descriptor.name not in names and descriptor.name not in unknown:
            unknown.append(descriptor.name)
    return unknown


def validate_filters(descriptors: Iterable[FilterDescriptor], columns: Iterable[AnyColumn]) -> None:
    """
    Validate a set of filters and report every problem at once.

    Raises:
        FilterValidationError: with unknown columns listed first, then the
        operator and range problems of the remaining filters
    """
    columns = list(columns)
    descriptors = list(descriptors)

    errors = []
    unknown = find_unknown_columns(descriptors, columns)
    if unknown:
        errors.append(AppMessage.UNKNOWN_COLUMNS.format(names=', '.join(unknown)))

    for descriptor in descriptors:
        if descriptor.name in unknown:
            continue
        try:
            validate_filter(descriptor, columns)
        except FilterValidationError as e:
            errors.append(str(e))

    if errors:
        raise FilterValidationError(AppMessage.INVALID_FILTERS.format(details='; '.join(errors)))

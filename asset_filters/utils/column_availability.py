import logging
from typing import Iterable, List, Union

from asset_filters.constants.column_constants import BuiltInColumnName
from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn
from asset_filters.model.field_type_model import CustomFieldType, UIFieldType
from asset_filters.model.filter_model import ColumnOperation, FilterDescriptor, SortDescriptor
from asset_filters.utils.field_type_resolver import resolve_field_type

logger = logging.getLogger(__name__)

UNSORTABLE_COLUMNS = {BuiltInColumnName.TAGS.value}
UNSORTABLE_FIELD_TYPES = {UIFieldType.ARRAY}
UNSORTABLE_CUSTOM_FIELD_TYPES = {CustomFieldType.MULTILINE_TEXT}

UNFILTERABLE_COLUMNS: set = set()

AnyColumn = Union[BuiltInColumn, CustomColumn]


def _is_sortable(column: AnyColumn) -> bool:
    if column.name in UNSORTABLE_COLUMNS:
        return False
    if resolve_field_type(column) in UNSORTABLE_FIELD_TYPES:
        return False
    if isinstance(column, CustomColumn):
        return CustomFieldType.from_raw(column.cf_type) not in UNSORTABLE_CUSTOM_FIELD_TYPES
    return True


def _is_filterable(column: AnyColumn) -> bool:
    return column.name not in UNFILTERABLE_COLUMNS


def available_columns(columns: Iterable[AnyColumn],
                      used_columns: Iterable[Union[FilterDescriptor, SortDescriptor]],
                      operation: Union[ColumnOperation, str]) -> List[AnyColumn]:
    """
    Columns that can still be added as a filter or sort row.

    :param columns: full column catalog, in display order
    :param used_columns: filters and/or sorts already active, compared by name
    :param operation: "filter" or "sort"
    :return: remaining columns, catalog order kept
    """
    used_names = {used.name for used in used_columns}
    candidates = [
        column for column in columns
        if column.visible and column.name not in used_names
    ]

    try:
        operation = ColumnOperation(operation)
    except ValueError:
        logger.warning(f"Unknown column operation '{operation}', applying visibility rules only")
        return candidates

    if operation == ColumnOperation.SORT:
        return [column for column in candidates if _is_sortable(column)]
    return [column for column in candidates if _is_filterable(column)]

from typing import Any, Iterable, Optional, Union

from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn
from asset_filters.entity.custom_field_entity import CustomFieldDefinition, find_custom_field
from asset_filters.model.field_type_model import CustomFieldType, UIFieldType
from asset_filters.utils.datetime_utils import today_iso
from asset_filters.utils.field_type_resolver import resolve_field_type


def _custom_default(column: CustomColumn, custom_fields: Optional[Iterable[CustomFieldDefinition]]) -> Any:
    kind = CustomFieldType.from_raw(column.cf_type)
    if kind == CustomFieldType.DATE:
        return today_iso()
    if kind == CustomFieldType.BOOLEAN:
        return True
    if kind == CustomFieldType.OPTION:
        custom_field = find_custom_field(custom_fields, column.name)
        if custom_field is not None and custom_field.options:
            return custom_field.options[0]
        return ''
    return ''


def _builtin_default(column: BuiltInColumn) -> Any:
    field_type = resolve_field_type(column)
    if field_type == UIFieldType.BOOLEAN:
        return True
    if field_type == UIFieldType.DATE:
        return today_iso()
    if field_type == UIFieldType.NUMBER:
        return 0
    return ''


def default_value_for(column: Union[BuiltInColumn, CustomColumn],
                      custom_fields: Optional[Iterable[CustomFieldDefinition]] = None) -> Any:
    """
    Initial value for a new filter row, valid input for the column's editor.

    Booleans start at True and options at their first choice. A missing custom
    field catalog is treated like an empty one.
    """
    if isinstance(column, CustomColumn):
        return _custom_default(column, custom_fields)
    return _builtin_default(column)

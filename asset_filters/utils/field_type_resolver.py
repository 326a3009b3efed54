from typing import Union

from asset_filters.constants.column_constants import BuiltInColumnName
from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn
from asset_filters.model.field_type_model import CustomFieldType, UIFieldType

"""
Field type resolution for the advanced asset index.

Built-in columns are looked up by name, custom columns by their primitive kind.
Both lookups fall back to single-line text, so resolution never fails, even for
custom field kinds added on the server before this table is updated.
"""

BUILTIN_FIELD_TYPES = {
    BuiltInColumnName.ID: UIFieldType.STRING,
    BuiltInColumnName.NAME: UIFieldType.STRING,
    BuiltInColumnName.CUSTODY: UIFieldType.ENUM,
    BuiltInColumnName.STATUS: UIFieldType.ENUM,
    BuiltInColumnName.CATEGORY: UIFieldType.ENUM,
    BuiltInColumnName.LOCATION: UIFieldType.ENUM,
    BuiltInColumnName.KIT: UIFieldType.ENUM,
    BuiltInColumnName.DESCRIPTION: UIFieldType.TEXT,
    BuiltInColumnName.VALUATION: UIFieldType.NUMBER,
    BuiltInColumnName.AVAILABLE_TO_BOOK: UIFieldType.BOOLEAN,
    BuiltInColumnName.CREATED_AT: UIFieldType.DATE,
    BuiltInColumnName.TAGS: UIFieldType.ARRAY,
}

CUSTOM_FIELD_TYPES = {
    CustomFieldType.TEXT: UIFieldType.STRING,
    CustomFieldType.MULTILINE_TEXT: UIFieldType.TEXT,
    CustomFieldType.BOOLEAN: UIFieldType.BOOLEAN,
    CustomFieldType.DATE: UIFieldType.DATE,
    CustomFieldType.OPTION: UIFieldType.ENUM,
}

FALLBACK_FIELD_TYPE = UIFieldType.STRING


def _builtin_field_type(name: str) -> UIFieldType:
    try:
        return BUILTIN_FIELD_TYPES[BuiltInColumnName(name)]
    except ValueError:
        return FALLBACK_FIELD_TYPE


def _custom_field_type(cf_type: str) -> UIFieldType:
    kind = CustomFieldType.from_raw(cf_type)
    if kind is None:
        return FALLBACK_FIELD_TYPE
    return CUSTOM_FIELD_TYPES[kind]


def resolve_field_type(column: Union[BuiltInColumn, CustomColumn], friendly_name: bool = False) -> Union[UIFieldType, str]:
    """
    Determine how a column is presented and edited in the UI.

    :param column: built-in or custom column
    :param friendly_name: return the display label ("Yes/No") instead of the type
    :return: UIFieldType, or its label when friendly_name is set
    """
    if isinstance(column, CustomColumn):
        field_type = _custom_field_type(column.cf_type)
    else:
        field_type = _builtin_field_type(column.name)

    return field_type.label if friendly_name else field_type


def field_type_label(field_type: UIFieldType) -> str:
    return UIFieldType(field_type).label

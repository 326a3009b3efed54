from typing import Annotated, Any, Dict, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from asset_filters.constants.app_constants import AppConstants
from asset_filters.constants.app_message import AppMessage

'''
A column is either built in (fixed behaviour keyed on its name) or backed by a
custom field (behaviour keyed on its primitive kind). Custom column names keep
the "cf_" prefix used on the wire, but nothing past column_from_dict looks at it.
'''


class BuiltInColumn(BaseModel):
    kind: Literal['builtin'] = AppConstants.KIND_BUILTIN
    name: str
    visible: bool = True
    position: Optional[int] = None

    @property
    def is_custom(self) -> bool:
        return False


class CustomColumn(BaseModel):
    kind: Literal['custom'] = AppConstants.KIND_CUSTOM
    name: str = Field(..., description="Prefixed name, e.g. cf_Serial number")
    visible: bool = True
    position: Optional[int] = None
    # raw primitive kind, unknown kinds must still load
    cf_type: str
    options: List[str] = Field(default_factory=list)

    @property
    def is_custom(self) -> bool:
        return True

    @property
    def field_name(self) -> str:
        """Name of the backing custom field, without the column prefix"""
        return self.name[len(AppConstants.CUSTOM_FIELD_PREFIX):]


Column = Annotated[Union[BuiltInColumn, CustomColumn], Field(discriminator='kind')]

_column_adapter = TypeAdapter(Column)


def column_from_dict(item: Dict[str, Any]) -> Union[BuiltInColumn, CustomColumn]:
    """
    Build a column from the catalog entry handed over by the schema collaborator.

    Tagged entries ({"kind": ...}) are validated as-is. Untagged entries
    ({"name", "visible", "cfType"}) are tagged here using the name prefix.
    """
    if AppConstants.KIND in item:
        return _column_adapter.validate_python(item)

    name = item.get(AppConstants.NAME, '')
    visible = item.get(AppConstants.VISIBLE, True)
    position = item.get(AppConstants.POSITION)
    if name.startswith(AppConstants.CUSTOM_FIELD_PREFIX):
        return CustomColumn(
            name=name,
            visible=visible,
            position=position,
            cf_type=item.get(AppConstants.CF_TYPE) or item.get('cf_type') or '',
            options=item.get(AppConstants.OPTIONS) or [],
        )
    return BuiltInColumn(name=name, visible=visible, position=position)


def parse_columns(items: Iterable[Union[Dict[str, Any], BuiltInColumn, CustomColumn]]) -> List[Union[BuiltInColumn, CustomColumn]]:
    """
    Build an ordered column catalog. Order of the input is kept.

    Raises:
        ValueError: if two entries share a name
    """
    columns = []
    seen = set()
    for item in items:
        column = item if isinstance(item, (BuiltInColumn, CustomColumn)) else column_from_dict(item)
        if column.name in seen:
            raise ValueError(AppMessage.DUPLICATE_COLUMN.format(name=column.name))
        seen.add(column.name)
        columns.append(column)
    return columns


def find_column(columns: Iterable[Union[BuiltInColumn, CustomColumn]], name: str) -> Optional[Union[BuiltInColumn, CustomColumn]]:
    for column in columns:
        if column.name == name:
            return column
    return None

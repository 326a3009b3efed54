import logging
from typing import Iterable, List, Optional, Tuple, Union

from asset_filters.constants.app_message import AppMessage
from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn, find_column
from asset_filters.entity.custom_field_entity import CustomFieldDefinition
from asset_filters.model.field_type_model import UIFieldType
from asset_filters.model.filter_model import ColumnOperation, FilterDescriptor, SortDescriptor, SortDirection
from asset_filters.utils.column_availability import available_columns
from asset_filters.utils.default_value_generator import default_value_for
from asset_filters.utils.field_type_resolver import resolve_field_type
from asset_filters.utils.filter_param_codec import Params, encode_filters, encode_sorts, parse_filters, parse_sorts
from asset_filters.utils.filter_validator import FilterValidationError, default_operator_for, validate_filters

logger = logging.getLogger(__name__)

AnyColumn = Union[BuiltInColumn, CustomColumn]


class AdvancedFilterService:
    """
    Filter and sort state of the advanced asset index for one request.

    Holds the column and custom field catalogs read-only; every method is a
    pure function of them and its arguments.
    """

    def __init__(self, columns: Iterable[AnyColumn], custom_fields: Optional[Iterable[CustomFieldDefinition]] = None):
        self.columns: List[AnyColumn] = list(columns)
        self.custom_fields: Optional[List[CustomFieldDefinition]] = list(custom_fields) if custom_fields is not None else None
        logger.info(f"Initialized AdvancedFilterService with {len(self.columns)} columns")

    def _get_column(self, name: str) -> AnyColumn:
        column = find_column(self.columns, name)
        if column is None:
            raise ValueError(AppMessage.UNKNOWN_COLUMN.format(name=name))
        return column

    def field_type(self, column_name: str, friendly_name: bool = False) -> Union[UIFieldType, str]:
        return resolve_field_type(self._get_column(column_name), friendly_name=friendly_name)

    def initial_filters(self, params: Params) -> List[FilterDescriptor]:
        return parse_filters(params, self.columns)

    def initial_sorts(self, params: Params) -> List[SortDescriptor]:
        return parse_sorts(params, self.columns)

    def new_filter(self, column_name: str) -> FilterDescriptor:
        """A fresh filter row for the column: its type's first operator and default value."""
        column = self._get_column(column_name)
        field_type = resolve_field_type(column)
        return FilterDescriptor(
            name=column.name,
            operator=default_operator_for(field_type).value,
            value=default_value_for(column, self.custom_fields),
            type=field_type,
        )

    def new_sort(self, column_name: str, direction: SortDirection = SortDirection.ASC) -> SortDescriptor:
        column = self._get_column(column_name)
        return SortDescriptor(name=column.name, direction=direction)

    def available_filter_columns(self, used: Iterable[Union[FilterDescriptor, SortDescriptor]] = ()) -> List[AnyColumn]:
        return available_columns(self.columns, used, ColumnOperation.FILTER)

    def available_sort_columns(self, used: Iterable[Union[FilterDescriptor, SortDescriptor]] = ()) -> List[AnyColumn]:
        return available_columns(self.columns, used, ColumnOperation.SORT)

    def to_params(self, filters: Iterable[FilterDescriptor] = (), sorts: Iterable[SortDescriptor] = ()) -> List[Tuple[str, str]]:
        """Flat (key, value) pairs for the query string, filters first."""
        return encode_filters(filters) + encode_sorts(sorts)

    def validated_filters(self, params: Params) -> List[FilterDescriptor]:
        """
        Parse filters and check them against the catalog, for callers about to
        turn them into data source predicates.
        """
        filters = self.initial_filters(params)
        try:
            validate_filters(filters, self.columns)
        except FilterValidationError as e:
            logger.error(f"Error validating filters: {str(e)}", exc_info=True)
            raise
        return filters

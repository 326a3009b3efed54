import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlencode

from asset_filters.constants.app_constants import AppConstants
from asset_filters.dependencies.config_provider import get_sort_param
from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn
from asset_filters.model.filter_model import FilterDescriptor, FilterOperator, SortDescriptor, SortDirection
from asset_filters.utils.field_type_resolver import resolve_field_type

"""
================================================================================
Filter parameter codec
================================================================================
Filters and sorts travel as flat request parameters.

Grammar:
    filter  := key "=" operator [ ":" value [ "," value ] ]
    sort    := sort_key "=" column [ ":" direction ]

    key       -> a column name of the catalog ("status", "cf_Serial")
    operator  -> FilterOperator value ("is", "between", ...)
    value     -> split on "," only for the range operator "between"
    sort_key  -> "s" unless ASSET_FILTERS_SORT_PARAM says otherwise

Examples:
    status=is:AVAILABLE          -> {name: status, operator: is, value: "AVAILABLE"}
    valuation=between:10,50      -> {name: valuation, operator: between, value: ["10", "50"]}
    s=createdAt:desc             -> {name: createdAt, direction: desc}

Parsing never raises. Parameters that do not name a catalog column are
skipped, a value without ":" keeps the whole string as operator with no value,
and malformed ranges are passed through untouched for downstream validation.
An empty range encodes as the bare operator and decodes with no value, so
"between" with [] comes back as None.
================================================================================
"""

logger = logging.getLogger(__name__)

Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]
AnyColumn = Union[BuiltInColumn, CustomColumn]


def _iter_params(params: Params) -> Iterable[Tuple[str, str]]:
    """Yield (key, value) pairs in request order. Multi-valued mapping entries are expanded."""
    pairs = params.items() if isinstance(params, Mapping) else params
    for key, value in pairs:
        if isinstance(value, (list, tuple)):
            for single in value:
                yield key, single
        else:
            yield key, value


# -------------------------
# value encoding helpers
# -------------------------
def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return AppConstants.TRUE if value else AppConstants.FALSE
    return str(value)


def _as_text(raw: Any) -> str:
    """Raw parameter values as text: None is empty, bytes are UTF-8."""
    if raw is None:
        return ''
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode('utf-8', errors='replace')
    return str(raw)


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return AppConstants.RANGE_DELIMITER.join(_format_scalar(v) for v in value)
    return _format_scalar(value)


# -------------------------
# filters
# -------------------------
def decode_filter_value(raw: Any) -> Tuple[str, Optional[Union[str, List[str]]]]:
    """
    Split a raw parameter value into (operator, value).

    Only the first ":" separates the operator, so values may contain colons
    themselves (times, URLs).
    """
    operator, delimiter, value = _as_text(raw).partition(AppConstants.OPERATOR_DELIMITER)
    if not delimiter:
        # operator-only values are kept for old links and left to validate_filter
        return operator, None
    if operator == FilterOperator.BETWEEN.value:
        return operator, value.split(AppConstants.RANGE_DELIMITER)
    return operator, value


def encode_filter_value(operator: str, value: Any) -> str:
    operator = operator.value if isinstance(operator, FilterOperator) else str(operator)
    if value is None or (isinstance(value, (list, tuple)) and not value):
        return operator
    return f"{operator}{AppConstants.OPERATOR_DELIMITER}{_format_value(value)}"


def encode_filter(descriptor: FilterDescriptor) -> Tuple[str, str]:
    return descriptor.name, encode_filter_value(descriptor.operator, descriptor.value)


def encode_filters(filters: Iterable[FilterDescriptor]) -> List[Tuple[str, str]]:
    return [encode_filter(descriptor) for descriptor in filters]


def parse_filters(params: Params, columns: Iterable[AnyColumn]) -> List[FilterDescriptor]:
    """
    Rebuild the active filters from request parameters.

    :param params: mapping or iterable of (key, raw_value) pairs, in request order
    :param columns: column catalog
    :return: one FilterDescriptor per parameter naming a catalog column, in input order
    """
    catalog = {column.name: column for column in columns}
    filters: List[FilterDescriptor] = []
    for key, raw in _iter_params(params):
        column = catalog.get(key)
        if column is None:
            logger.debug(f"Skipping parameter '{key}': not a filterable column")
            continue

        operator, value = decode_filter_value(raw)
        filters.append(FilterDescriptor(
            name=key,
            operator=operator,
            value=value,
            type=resolve_field_type(column),
        ))
    return filters


# -------------------------
# sorts
# -------------------------
def encode_sort(descriptor: SortDescriptor, sort_param: Optional[str] = None) -> Tuple[str, str]:
    key = sort_param or get_sort_param()
    return key, f"{descriptor.name}{AppConstants.OPERATOR_DELIMITER}{SortDirection(descriptor.direction).value}"


def encode_sorts(sorts: Iterable[SortDescriptor], sort_param: Optional[str] = None) -> List[Tuple[str, str]]:
    key = sort_param or get_sort_param()
    return [encode_sort(descriptor, key) for descriptor in sorts]


def parse_sorts(params: Params, columns: Iterable[AnyColumn], sort_param: Optional[str] = None) -> List[SortDescriptor]:
    """
    Rebuild the active sorts from repeated sort parameters.

    Unknown columns are skipped, a missing or unknown direction falls back to
    ascending and a column sorted twice keeps its first position.
    """
    key_name = sort_param or get_sort_param()
    names = {column.name for column in columns}
    sorts: List[SortDescriptor] = []
    seen = set()
    for key, raw in _iter_params(params):
        if key != key_name:
            continue

        name, _, direction = _as_text(raw).partition(AppConstants.OPERATOR_DELIMITER)
        if name not in names:
            logger.debug(f"Skipping sort on '{name}': not a column")
            continue
        if name in seen:
            continue

        try:
            parsed_direction = SortDirection(direction) if direction else SortDirection.ASC
        except ValueError:
            logger.warning(f"Unknown sort direction '{direction}' for '{name}', using asc")
            parsed_direction = SortDirection.ASC

        seen.add(name)
        sorts.append(SortDescriptor(name=name, direction=parsed_direction))
    return sorts


# -------------------------
# query strings
# -------------------------
def to_query_string(filters: Iterable[FilterDescriptor] = (),
                    sorts: Iterable[SortDescriptor] = (),
                    sort_param: Optional[str] = None) -> str:
    return urlencode(encode_filters(filters) + encode_sorts(sorts, sort_param))


def parse_query_string(query_string: str,
                       columns: Iterable[AnyColumn],
                       sort_param: Optional[str] = None) -> Tuple[List[FilterDescriptor], List[SortDescriptor]]:
    """Parse "status=is%3AAVAILABLE&s=name%3Aasc" into (filters, sorts)."""
    columns = list(columns)
    pairs = parse_qsl(query_string.lstrip('?'), keep_blank_values=True)
    return parse_filters(pairs, columns), parse_sorts(pairs, columns, sort_param)

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from asset_filters.model.field_type_model import UIFieldType


class FilterOperator(str, Enum):
    """Supported filter operators"""
    IS = "is"
    IS_NOT = "isNot"
    CONTAINS = "contains"
    BEFORE = "before"
    AFTER = "after"
    BETWEEN = "between"  # range: value is a (from, to) pair
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"
    IN = "in"
    CONTAINS_ANY = "containsAny"
    CONTAINS_ALL = "containsAll"
    MATCHES_ANY = "matchesAny"
    EXCLUDE_ANY = "excludeAny"
    IN_DATES = "inDates"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ColumnOperation(str, Enum):
    FILTER = "filter"
    SORT = "sort"


class FilterDescriptor(BaseModel):
    """One active filter condition, as shown in an editable filter row"""
    name: str = Field(..., description="Column identifier")
    # kept as a plain string so a malformed operator survives parsing
    operator: str = Field(..., description="One of FilterOperator for well-formed input")
    value: Any = Field(
        None,
        description="Scalar value, or a two element list for 'between'"
    )
    type: UIFieldType

    @property
    def is_range(self) -> bool:
        return self.operator == FilterOperator.BETWEEN.value


class SortDescriptor(BaseModel):
    """One active ordering key"""
    name: str
    direction: SortDirection = SortDirection.ASC

from enum import Enum


class BuiltInColumnName(str, Enum):
    ID = "id"
    NAME = "name"
    CUSTODY = "custody"
    STATUS = "status"
    CATEGORY = "category"
    LOCATION = "location"
    KIT = "kit"
    DESCRIPTION = "description"
    VALUATION = "valuation"
    AVAILABLE_TO_BOOK = "availableToBook"
    CREATED_AT = "createdAt"
    TAGS = "tags"

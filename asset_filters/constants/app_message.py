class AppMessage:
    UNKNOWN_COLUMN = "Unknown column '{name}'"
    DUPLICATE_COLUMN = "Duplicate column name in catalog: '{name}'"
    OPERATOR_NOT_ALLOWED = "Operator '{operator}' not allowed for type '{field_type}'"
    RANGE_REQUIRES_TWO_VALUES = "Operator 'between' on '{name}' requires exactly two values, got {count}"
    UNKNOWN_COLUMNS = "Unknown columns: {names}"
    INVALID_FILTERS = "Invalid filters: {details}"

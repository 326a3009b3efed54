from enum import Enum


class UIFieldType(str, Enum):
    """How a column is presented and edited in the filter UI"""
    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    DATE = "date"
    NUMBER = "number"
    ENUM = "enum"
    ARRAY = "array"

    @property
    def label(self) -> str:
        return UI_FIELD_TYPE_LABELS[self]


UI_FIELD_TYPE_LABELS = {
    UIFieldType.STRING: "Single-line text",
    UIFieldType.TEXT: "Multi-line text",
    UIFieldType.BOOLEAN: "Yes/No",
    UIFieldType.DATE: "Date",
    UIFieldType.NUMBER: "Number",
    UIFieldType.ENUM: "Option",
    UIFieldType.ARRAY: "List",
}


class CustomFieldType(str, Enum):
    """Primitive kinds an administrator can pick for a custom field"""
    TEXT = "TEXT"
    MULTILINE_TEXT = "MULTILINE_TEXT"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    OPTION = "OPTION"

    @classmethod
    def from_raw(cls, raw) -> 'CustomFieldType | None':
        """Kinds introduced server-side after this catalog was written resolve to None."""
        try:
            return cls(raw)
        except ValueError:
            return None

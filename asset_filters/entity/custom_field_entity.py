from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from asset_filters.constants.app_constants import AppConstants


class CustomFieldDefinition(BaseModel):
    """Custom field as defined by a workspace administrator. Read-only here."""
    name: str = Field(..., max_length=255)
    type: str = Field(..., description="Primitive kind, see CustomFieldType")
    options: Optional[List[str]] = None
    required: bool = False
    active: bool = True

    @property
    def column_name(self) -> str:
        return f"{AppConstants.CUSTOM_FIELD_PREFIX}{self.name}"

    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> 'CustomFieldDefinition':
        """Create from the schema collaborator's payload."""
        return cls(
            name=item[AppConstants.NAME],
            type=item.get(AppConstants.TYPE) or item.get(AppConstants.CF_TYPE) or '',
            options=item.get(AppConstants.OPTIONS),
            required=bool(item.get(AppConstants.REQUIRED, False)),
            active=bool(item.get(AppConstants.ACTIVE, True)),
        )


def find_custom_field(custom_fields: Optional[Iterable[CustomFieldDefinition]], column_name: str) -> Optional[CustomFieldDefinition]:
    """Look up the definition behind a custom column. A missing catalog behaves like an empty one."""
    for custom_field in custom_fields or []:
        if custom_field.column_name == column_name:
            return custom_field
    return None

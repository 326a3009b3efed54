from typing import Any, Dict, Iterable, Optional, Union

from asset_filters.entity.column_entity import BuiltInColumn, CustomColumn, parse_columns
from asset_filters.entity.custom_field_entity import CustomFieldDefinition
from asset_filters.services.advanced_filter_service import AdvancedFilterService


def get_advanced_filter_service(columns: Iterable[Union[Dict[str, Any], BuiltInColumn, CustomColumn]],
                                custom_fields: Optional[Iterable[Union[Dict[str, Any], CustomFieldDefinition]]] = None
                                ) -> AdvancedFilterService:
    """Dependency provider for AdvancedFilterService, built per request from the collaborator's catalogs"""
    definitions = None
    if custom_fields is not None:
        definitions = [
            field if isinstance(field, CustomFieldDefinition) else CustomFieldDefinition.from_dict(field)
            for field in custom_fields
        ]
    return AdvancedFilterService(columns=parse_columns(columns), custom_fields=definitions)

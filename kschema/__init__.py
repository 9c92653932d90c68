"""
Static schema catalog for the entity types of the Kaseya VSA REST API.
"""

from kschema.registry import (
    ConfigurationError,
    EntityDef,
    EntityRegistry,
    FieldDef,
    FieldType,
    RegistryError,
)
from kschema.entities import REGISTRY, filterable_fields, sortable_fields

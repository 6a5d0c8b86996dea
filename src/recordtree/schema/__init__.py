"""
Entity schema definitions: properties, variables and entities.
"""

from recordtree.schema.entity import (
    DEFAULT_PROPERTY_TYPE,
    EntityDefinition,
    PropertyDefinition,
    Variable,
)

__all__ = [
    "DEFAULT_PROPERTY_TYPE",
    "EntityDefinition",
    "PropertyDefinition",
    "Variable",
]

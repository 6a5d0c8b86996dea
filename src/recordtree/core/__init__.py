"""
Core vocabulary and type definitions for recordtree.
"""

from recordtree.core.names import (
    RESERVED_PROPERTY_NAMES,
    AttributeNames,
    ElementKind,
    ElementNames,
    classify,
)
from recordtree.core.types import PropertyValue, VariableLookup

__all__ = [
    "AttributeNames",
    "ElementKind",
    "ElementNames",
    "RESERVED_PROPERTY_NAMES",
    "classify",
    "PropertyValue",
    "VariableLookup",
]

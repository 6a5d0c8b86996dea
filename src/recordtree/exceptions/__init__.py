"""
recordtree exception classes.

This package provides all exception types used throughout recordtree for
consistent error handling and reporting.
"""

from recordtree.exceptions.core import (
    CannotAddItemToNonCollectionPropertyError,
    CommandIsNotDefinedError,
    DocumentDepthError,
    DocumentLoadError,
    DocumentStructureError,
    DuplicatePropertyError,
    DuplicateRecordIdError,
    DuplicateVariableError,
    EntityNotDefinedError,
    ErrorContext,
    ErrorLevel,
    InvalidValueError,
    MissingAttributeError,
    PropertyIsNotDefinedError,
    PropertyNameIsReservedError,
    RecordsError,
    SchemaError,
    UnknownElementError,
    ValueParseError,
)

__all__ = [
    "RecordsError",
    "ErrorContext",
    "ErrorLevel",
    "SchemaError",
    "PropertyNameIsReservedError",
    "DuplicatePropertyError",
    "DuplicateVariableError",
    "EntityNotDefinedError",
    "InvalidValueError",
    "DocumentLoadError",
    "DocumentStructureError",
    "UnknownElementError",
    "CommandIsNotDefinedError",
    "PropertyIsNotDefinedError",
    "CannotAddItemToNonCollectionPropertyError",
    "ValueParseError",
    "MissingAttributeError",
    "DuplicateRecordIdError",
    "DocumentDepthError",
]

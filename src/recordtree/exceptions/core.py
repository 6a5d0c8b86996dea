"""
Exception classes for recordtree document reading.

This module defines specific exception types for the error conditions that
can occur while building an entity schema, loading a document, and walking
its records.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Element and attribute names only
    DEVELOPER = "developer"  # Adds document path and source line numbers


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred in the document being read. Supports
    formatting at different detail levels for user-facing vs developer
    debugging.

    Params:
        element_name: Local name of the offending element
        attribute_name: Attribute name if the error is tied to one attribute
        line: Source line of the element, when the parser tracked it
        document: Path or name of the document being read
        snippet: Short serialized form of the offending element
    """

    element_name: str | None = None
    attribute_name: str | None = None
    line: int | None = None
    document: str | None = None
    snippet: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.element_name:
            if self.attribute_name:
                lines.append(f"  at <{self.element_name} {self.attribute_name}=...>")
            else:
                lines.append(f"  at <{self.element_name}>")

        if error_level == ErrorLevel.DEVELOPER:
            if self.document and self.line:
                lines.append(f"  in {self.document}:{self.line}")
            elif self.line:
                lines.append(f"  on line {self.line}")
            if self.snippet:
                lines.append(f"  element: {self.snippet}")

        return "\n".join(lines)


class RecordsError(Exception):
    """Base exception for all recordtree errors."""

    pass


class SchemaError(RecordsError):
    """Base exception for invalid entity definitions."""

    pass


class PropertyNameIsReservedError(SchemaError):
    """Raised when a property is declared with a reserved name."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The reserved name used as a property name
        """
        self.name = name
        super().__init__(f"Property name '{name}' is reserved")


class DuplicatePropertyError(SchemaError):
    """Raised when an entity declares the same property twice."""

    def __init__(self, name: str, entity_name: str | None = None):
        self.name = name
        self.entity_name = entity_name
        where = f" in entity '{entity_name}'" if entity_name else ""
        super().__init__(f"Property '{name}' is declared more than once{where}")


class DuplicateVariableError(SchemaError):
    """Raised when an entity declares the same variable twice."""

    def __init__(self, name: str, entity_name: str | None = None):
        self.name = name
        self.entity_name = entity_name
        where = f" in entity '{entity_name}'" if entity_name else ""
        super().__init__(f"Variable '{name}' is declared more than once{where}")


class EntityNotDefinedError(SchemaError):
    """Raised when a document references an entity that is not declared."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Entity '{name}' is not defined")


class InvalidValueError(RecordsError):
    """Raised when a raw value cannot be parsed or a variable cannot be resolved."""

    def __init__(self, value: str, reason: str, position: int | None = None):
        """
        Initialize the exception.

        Params:
            value: The raw string that failed to resolve
            reason: Why resolution failed
            position: Character offset in the raw string where parsing stopped
        """
        self.value = value
        self.reason = reason
        self.position = position
        at = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid value '{value}'{at}: {reason}")


class DocumentLoadError(RecordsError):
    """Raised when a document cannot be parsed or has an invalid layout."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class DocumentStructureError(RecordsError):
    """
    Base exception for errors tied to a specific element of a document.

    The message is the primary error followed by the formatted location.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            message: Primary error message
            context: ErrorContext naming the offending element
            error_level: Level of detail to show in error message
        """
        self.message = message
        self.context = context
        self.error_level = error_level

        if context:
            location_info = context.format_location(error_level)
            full_message = f"{message}\n{location_info}" if location_info else message
        else:
            full_message = message

        super().__init__(full_message)


class UnknownElementError(DocumentStructureError):
    """Raised when an element is neither a record, command, nor variable declaration."""

    def __init__(self, element_name: str, **kwargs):
        self.element_name = element_name
        super().__init__(f"Element '{element_name}' is not recognized", **kwargs)


class CommandIsNotDefinedError(DocumentStructureError):
    """Raised when a child element used as a command is not a known command."""

    def __init__(self, command_name: str, **kwargs):
        self.command_name = command_name
        super().__init__(f"Command '{command_name}' is not defined", **kwargs)


class PropertyIsNotDefinedError(DocumentStructureError):
    """Raised when a document references a property absent from the entity."""

    def __init__(self, property_name: str, **kwargs):
        self.property_name = property_name
        super().__init__(f"Property '{property_name}' is not defined", **kwargs)


class CannotAddItemToNonCollectionPropertyError(DocumentStructureError):
    """Raised when an 'add' command targets a property that is not a collection."""

    def __init__(self, property_name: str, **kwargs):
        self.property_name = property_name
        super().__init__(
            f"Cannot add item to property '{property_name}' because it is not a collection",
            **kwargs,
        )


class ValueParseError(DocumentStructureError):
    """Raised when a value held by an element or attribute cannot be resolved."""

    def __init__(self, error: InvalidValueError, **kwargs):
        self.error = error
        super().__init__(f"Error while parsing value: {error}", **kwargs)


class MissingAttributeError(DocumentStructureError):
    """Raised when a required attribute is absent."""

    def __init__(self, attribute_name: str, **kwargs):
        self.attribute_name = attribute_name
        super().__init__(f"Required attribute '{attribute_name}' is missing", **kwargs)


class DuplicateRecordIdError(DocumentStructureError):
    """Raised when two records of the same entity share an id."""

    def __init__(self, record_id: str, **kwargs):
        self.record_id = record_id
        super().__init__(f"Record id '{record_id}' is already used", **kwargs)


class DocumentDepthError(DocumentStructureError):
    """Raised when element nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int, **kwargs):
        self.max_depth = max_depth
        super().__init__(f"Element nesting exceeds maximum depth of {max_depth}", **kwargs)

"""
Translation of document attributes and elements into record commands.

Attributes of a record or command element become set/add-item/add-tag
commands, command elements ('set', 'append', 'prefix', 'tag', 'add') become
one command per attribute, and attribute-less child elements of a record
assign their text to the property named by the element.
"""

from typing import TYPE_CHECKING, Any, Protocol

from lxml import etree

from recordtree.commands.commands import (
    AddItemCommand,
    AddTagCommand,
    AppendCommand,
    Command,
    GroupCommand,
    PrefixCommand,
    SetCommand,
)
from recordtree.core.names import (
    AttributeNames,
    ElementNames,
    child_elements,
    iter_attributes,
    local_name,
    text_value,
)
from recordtree.exceptions import (
    CannotAddItemToNonCollectionPropertyError,
    CommandIsNotDefinedError,
    PropertyIsNotDefinedError,
)

if TYPE_CHECKING:
    from recordtree.schema import EntityDefinition


class ValueSource(Protocol):
    """What the factory needs from the reader driving it."""

    entity: "EntityDefinition"

    def get_value(
        self, element: etree._Element, raw: str, attribute_name: str | None = None
    ) -> str: ...

    def error_options(
        self, element: etree._Element, attribute_name: str | None = None
    ) -> dict[str, Any]: ...


class CommandFactory:
    """
    Builds commands for the element currently being read.

    Params:
        source: Reader providing the entity schema, value resolution and
            error attribution
    """

    def __init__(self, source: ValueSource):
        self.source = source

    @property
    def entity(self) -> "EntityDefinition":
        return self.source.entity

    def from_attribute(self, element: etree._Element, name: str, raw: str) -> Command:
        """
        Translate one attribute into a command.

        The tag attribute adds a tag; any other attribute must name a declared
        property and becomes add-item for collections, set otherwise.

        Raises:
            PropertyIsNotDefinedError: When the attribute names no property
            ValueParseError: When the value cannot be resolved
        """
        if name == AttributeNames.TAG:
            return AddTagCommand(self.source.get_value(element, raw, name))

        prop = self._require_property(element, name, attribute_name=name)
        value = self.source.get_value(element, raw, name)

        if prop.is_collection:
            return AddItemCommand(name, value)
        return SetCommand(name, value)

    def from_command_element(self, element: etree._Element) -> list[Command]:
        """
        Translate a command element into its commands, one per attribute.

        Params:
            element: A 'set', 'append', 'prefix', 'tag' or 'add' element

        Returns:
            Commands in attribute order; a 'tag' element gives at most one

        Raises:
            CommandIsNotDefinedError: When the element names no command
            PropertyIsNotDefinedError: When an attribute names no property
            CannotAddItemToNonCollectionPropertyError: When 'add' targets a
                property that is not a collection
        """
        command_name = local_name(element.tag)
        attributes = list(iter_attributes(element))

        if command_name == ElementNames.SET:
            return [self.from_attribute(element, name, raw) for name, raw in attributes]

        if command_name == ElementNames.APPEND:
            return [
                AppendCommand(
                    self._require_property(element, name, attribute_name=name).name,
                    self.source.get_value(element, raw, name),
                )
                for name, raw in attributes
            ]

        if command_name == ElementNames.PREFIX:
            return [
                PrefixCommand(
                    self._require_property(element, name, attribute_name=name).name,
                    self.source.get_value(element, raw, name),
                )
                for name, raw in attributes
            ]

        if command_name == ElementNames.TAG:
            for name, raw in attributes:
                if name == AttributeNames.VALUE:
                    return [AddTagCommand(self.source.get_value(element, raw, name))]
            return []

        if command_name == ElementNames.ADD:
            commands = []
            for name, raw in attributes:
                prop = self._require_property(element, name, attribute_name=name)
                if not prop.is_collection:
                    raise CannotAddItemToNonCollectionPropertyError(
                        name, **self.source.error_options(element, name)
                    )
                commands.append(AddItemCommand(name, self.source.get_value(element, raw, name)))
            return commands

        raise CommandIsNotDefinedError(command_name, **self.source.error_options(element))

    def from_child_elements(self, parent: etree._Element) -> list[Command]:
        """
        Derive commands from the child elements of a record element.

        Children with attributes are command elements; children without
        attributes assign their text content to the property they name.

        Params:
            parent: Record-declaring element

        Returns:
            Commands in document order
        """
        commands: list[Command] = []

        for element in child_elements(parent):
            if len(element.attrib):
                commands.extend(self.from_command_element(element))
                continue

            name = local_name(element.tag)
            prop = self._require_property(element, name)
            value = self.source.get_value(element, text_value(element))

            if prop.is_collection:
                commands.append(AddItemCommand(name, value))
            else:
                commands.append(SetCommand(name, value))

        return commands

    def scope_entry(self, element: etree._Element) -> Command | None:
        """
        Build the single scope entry pushed for an enclosing command element.

        Returns:
            The only command, a GroupCommand wrapping several, or None when the
            element produced no command
        """
        return group(self.from_command_element(element))

    def _require_property(
        self, element: etree._Element, name: str, attribute_name: str | None = None
    ):
        prop = self.entity.find_property(name)
        if prop is None:
            raise PropertyIsNotDefinedError(
                name, **self.source.error_options(element, attribute_name)
            )
        return prop


def group(commands: list[Command]) -> Command | None:
    """Collapse a command list into one command, wrapping several in a group."""
    if not commands:
        return None
    if len(commands) == 1:
        return commands[0]
    return GroupCommand(commands)

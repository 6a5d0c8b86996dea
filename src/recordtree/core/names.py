"""
Reserved vocabulary and element helpers for recordtree documents.

Element and attribute names are compared by local name, ignoring any XML
namespace, and case-sensitively.
"""

from enum import Enum

from lxml import etree


class ElementNames:
    """Element names with a fixed meaning inside a records section."""

    NEW = "new"
    VARIABLE = "variable"
    SET = "set"
    APPEND = "append"
    PREFIX = "prefix"
    TAG = "tag"
    ADD = "add"

    COMMANDS = frozenset({SET, APPEND, PREFIX, TAG, ADD})


class AttributeNames:
    """Attribute names with a fixed meaning."""

    ID = "id"
    TAG = "tag"
    NAME = "name"
    VALUE = "value"


# Property names that can never be declared on an entity
RESERVED_PROPERTY_NAMES = (AttributeNames.ID, AttributeNames.TAG)


class ElementKind(Enum):
    """Classification of an element inside a records section."""

    RECORD = "record"
    COMMAND = "command"
    VARIABLE = "variable"
    UNKNOWN = "unknown"


def local_name(name: str) -> str:
    """Strip the '{namespace}' prefix lxml puts on qualified names."""
    return etree.QName(name).localname


def classify(element: etree._Element) -> ElementKind:
    """
    Classify an element into the kind of declaration it makes.

    Params:
        element: Element from a records section

    Returns:
        ElementKind.UNKNOWN when the element is none of the known declarations
    """
    name = local_name(element.tag)
    if name == ElementNames.NEW:
        return ElementKind.RECORD
    if name in ElementNames.COMMANDS:
        return ElementKind.COMMAND
    if name == ElementNames.VARIABLE:
        return ElementKind.VARIABLE
    return ElementKind.UNKNOWN


def child_elements(element: etree._Element) -> list[etree._Element]:
    """Return element children in document order, skipping comments and processing instructions."""
    return [child for child in element if isinstance(child.tag, str)]


def has_child_elements(element: etree._Element) -> bool:
    return any(isinstance(child.tag, str) for child in element)


def iter_attributes(element: etree._Element):
    """Yield (local name, raw value) pairs in document order."""
    for name, value in element.attrib.items():
        yield local_name(name), value


def find_attribute(element: etree._Element, name: str) -> str | None:
    for attribute_name, value in iter_attributes(element):
        if attribute_name == name:
            return value
    return None


def text_value(element: etree._Element) -> str:
    """Concatenated text content of the element and its descendants."""
    return "".join(element.itertext())

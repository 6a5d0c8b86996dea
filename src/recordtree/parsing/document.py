"""
Loader for recordtree XML documents.

A document declares entities. Each entity lists its property and variable
declarations and a records section:

    <document>
      <entities>
        <entity name="Book" base="Item">
          <declarations>
            <property name="Title" default="Untitled"/>
            <property name="Authors" collection="true"/>
            <variable name="Publisher" value="ACME"/>
          </declarations>
          <records>
            <new id="b1" Title="..."/>
          </records>
        </entity>
      </entities>
    </document>

An entity's base must be declared before it.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from lxml import etree

from recordtree.core.names import child_elements, find_attribute, local_name
from recordtree.exceptions import DocumentLoadError, EntityNotDefinedError
from recordtree.schema import DEFAULT_PROPERTY_TYPE, EntityDefinition, PropertyDefinition, Variable

logger = logging.getLogger(__name__)


class DocumentElementNames:
    DOCUMENT = "document"
    ENTITIES = "entities"
    ENTITY = "entity"
    DECLARATIONS = "declarations"
    PROPERTY = "property"
    VARIABLE = "variable"
    RECORDS = "records"


class DocumentAttributeNames:
    NAME = "name"
    BASE = "base"
    TYPE = "type"
    DEFAULT = "default"
    COLLECTION = "collection"
    VALUE = "value"


@dataclass
class EntityElement:
    """An entity definition together with the element holding its records."""

    definition: EntityDefinition
    records: etree._Element | None = None


@dataclass
class Document:
    """
    A loaded document.

    Params:
        entities: Entities by name, in declaration order
        source: Path or name the document was loaded from
    """

    entities: dict[str, EntityElement] = field(default_factory=dict)
    source: str | None = None

    def get_entity(self, name: str) -> EntityElement:
        try:
            return self.entities[name]
        except KeyError:
            raise EntityNotDefinedError(name) from None


def load_document(path: str | Path) -> Document:
    """
    Load a document from a file.

    Raises:
        DocumentLoadError: When the file is not well-formed XML or the layout
            is not a recordtree document
    """
    path = Path(path)
    try:
        tree = etree.parse(str(path))
    except (OSError, etree.XMLSyntaxError) as e:
        raise DocumentLoadError(f"Cannot parse document: {e}", str(path)) from e

    return _read_document(tree.getroot(), str(path))


def load_document_string(text: str | bytes, source: str | None = None) -> Document:
    """Load a document from XML text."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    try:
        root = etree.fromstring(text)
    except etree.XMLSyntaxError as e:
        raise DocumentLoadError(f"Cannot parse document: {e}", source) from e

    return _read_document(root, source)


def _read_document(root: etree._Element, source: str | None) -> Document:
    if local_name(root.tag) != DocumentElementNames.DOCUMENT:
        raise DocumentLoadError(
            f"Root element must be <{DocumentElementNames.DOCUMENT}>, found <{local_name(root.tag)}>",
            source,
        )

    document = Document(source=source)

    for section in child_elements(root):
        if local_name(section.tag) != DocumentElementNames.ENTITIES:
            raise DocumentLoadError(f"Unexpected element <{local_name(section.tag)}>", source)

        for entity_element in child_elements(section):
            entity = _read_entity(entity_element, document, source)
            if entity.definition.name in document.entities:
                raise DocumentLoadError(
                    f"Entity '{entity.definition.name}' is declared more than once", source
                )
            document.entities[entity.definition.name] = entity

    logger.info("loaded document %s with %d entities", source or "<string>", len(document.entities))
    return document


def _read_entity(element: etree._Element, document: Document, source: str | None) -> EntityElement:
    if local_name(element.tag) != DocumentElementNames.ENTITY:
        raise DocumentLoadError(f"Unexpected element <{local_name(element.tag)}>", source)

    name = _required(element, DocumentAttributeNames.NAME, source)

    base = None
    base_name = find_attribute(element, DocumentAttributeNames.BASE)
    if base_name is not None:
        base = document.get_entity(base_name).definition

    properties = []
    variables = []
    records = None

    for child in child_elements(element):
        child_name = local_name(child.tag)

        if child_name == DocumentElementNames.DECLARATIONS:
            for declaration in child_elements(child):
                declaration_name = local_name(declaration.tag)
                if declaration_name == DocumentElementNames.PROPERTY:
                    properties.append(_read_property(declaration, source))
                elif declaration_name == DocumentElementNames.VARIABLE:
                    variables.append(
                        Variable(
                            name=_required(declaration, DocumentAttributeNames.NAME, source),
                            value=_required(declaration, DocumentAttributeNames.VALUE, source),
                        )
                    )
                else:
                    raise DocumentLoadError(f"Unexpected declaration <{declaration_name}>", source)

        elif child_name == DocumentElementNames.RECORDS:
            records = child

        else:
            raise DocumentLoadError(f"Unexpected element <{child_name}> in entity '{name}'", source)

    definition = EntityDefinition(
        name=name,
        properties=tuple(properties),
        variables=tuple(variables),
        base=base,
    )
    logger.debug("entity %s: %d properties, %d variables", name, len(properties), len(variables))
    return EntityElement(definition=definition, records=records)


def _read_property(element: etree._Element, source: str | None) -> PropertyDefinition:
    collection = find_attribute(element, DocumentAttributeNames.COLLECTION) or "false"
    if collection not in ("true", "false"):
        raise DocumentLoadError(
            f"Attribute '{DocumentAttributeNames.COLLECTION}' must be 'true' or 'false', got '{collection}'",
            source,
        )

    return PropertyDefinition(
        name=_required(element, DocumentAttributeNames.NAME, source),
        type=find_attribute(element, DocumentAttributeNames.TYPE) or DEFAULT_PROPERTY_TYPE,
        default_value=find_attribute(element, DocumentAttributeNames.DEFAULT),
        is_collection=collection == "true",
    )


def _required(element: etree._Element, name: str, source: str | None) -> str:
    value = find_attribute(element, name)
    if value is None:
        raise DocumentLoadError(
            f"Element <{local_name(element.tag)}> requires attribute '{name}'", source
        )
    return value

"""
Document walker that builds records from a records section.

The walker visits the children of a records element depth-first. A 'new'
element builds one record. A command element with children pushes its
commands onto the command scope, so every record created below it receives
them; a 'variable' element with children binds a variable for its subtree.
Command and variable elements without children have no effect here.

A record is built from, in order:

1. commands derived from its own attributes
2. commands derived from its child elements
3. commands inherited from enclosing command elements, outermost first
4. default values of scalar properties the commands left unset

Collection defaults are seeded right after the record is allocated, so
add commands extend the default list instead of replacing it.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from lxml import etree

from recordtree.commands import CommandCollection
from recordtree.commands.factory import CommandFactory
from recordtree.core.names import (
    AttributeNames,
    ElementKind,
    child_elements,
    classify,
    find_attribute,
    has_child_elements,
    iter_attributes,
    local_name,
)
from recordtree.exceptions import (
    DocumentDepthError,
    ErrorContext,
    InvalidValueError,
    MissingAttributeError,
    UnknownElementError,
    ValueParseError,
)
from recordtree.execution.record import Record
from recordtree.execution.scopes import CommandScope, VariableScope
from recordtree.parsing.values import resolve_value
from recordtree.schema import EntityDefinition, Variable
from recordtree.settings import ReaderSettings

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 120


class RecordCollector(ABC):
    """
    Base class for readers that turn a records element into records.

    Subclasses decide where finished records go (``add_record``) and how an
    empty record is allocated (``create_record``). Scope stacks belong to one
    call of ``produce_records`` and are discarded with it.

    Params:
        element: Element whose children declare records, commands and variables
        entity: Schema the records are validated against
        settings: Reader settings
        document: Name of the document, used in error locations
    """

    def __init__(
        self,
        element: etree._Element,
        entity: EntityDefinition,
        settings: ReaderSettings | None = None,
        document: str | None = None,
    ):
        self.element = element
        self.entity = entity
        self.settings = settings or ReaderSettings()
        self.document = document
        self.current: etree._Element | None = None

        self.commands = CommandScope()
        self.variables = VariableScope(entity)
        self.factory = CommandFactory(self)

    @abstractmethod
    def add_record(self, record: Record) -> None:
        """Take ownership of a finished record."""

    @abstractmethod
    def create_record(self, record_id: str | None) -> Record:
        """Allocate an empty record."""

    def produce_records(self) -> Iterator[Record]:
        """
        Walk the records element lazily.

        Each record is passed to ``add_record`` and then yielded, in document
        order. Stopping iteration early releases any open scopes.

        Yields:
            Finished records
        """
        self.reset()
        try:
            yield from self._collect(child_elements(self.element), depth=1)
        finally:
            self.current = None

    def reset(self) -> None:
        """
        Discard the state of any earlier traversal.

        Called at the start of every ``produce_records``. Subclasses holding
        per-read state extend it and call the base implementation.
        """
        self.commands = CommandScope()
        self.variables = VariableScope(self.entity)
        self.current = None

    def find_variable(self, name: str) -> Variable | None:
        return self.variables.find(name)

    def _collect(self, elements: list[etree._Element], depth: int) -> Iterator[Record]:
        if depth > self.settings.max_depth:
            raise DocumentDepthError(
                self.settings.max_depth, **self.error_options(elements[0])
            )

        for element in elements:
            self.current = element

            kind = classify(element)

            if kind is ElementKind.RECORD:
                record = self._build_record(element)
                self.add_record(record)
                yield record

            elif kind is ElementKind.COMMAND:
                if has_child_elements(element):
                    entry = self.factory.scope_entry(element)
                    children = child_elements(element)
                    if entry is None:
                        yield from self._collect(children, depth + 1)
                    else:
                        with self.commands.pushed(entry):
                            yield from self._collect(children, depth + 1)

            elif kind is ElementKind.VARIABLE:
                if has_child_elements(element):
                    variable = self._read_variable(element)
                    with self.variables.pushed(variable):
                        yield from self._collect(child_elements(element), depth + 1)

            else:
                raise UnknownElementError(local_name(element.tag), **self.error_options(element))

            self.current = None

    def _read_variable(self, element: etree._Element) -> Variable:
        name = self._required_attribute(element, AttributeNames.NAME)
        raw = self._required_attribute(element, AttributeNames.VALUE)
        return Variable(name=name, value=self.get_value(element, raw, AttributeNames.VALUE))

    def _required_attribute(self, element: etree._Element, name: str) -> str:
        value = find_attribute(element, name)
        if value is None:
            raise MissingAttributeError(name, **self.error_options(element))
        return value

    def _build_record(self, element: etree._Element) -> Record:
        record_id = None
        commands = CommandCollection()

        for name, raw in iter_attributes(element):
            if name == AttributeNames.ID:
                record_id = self.get_value(element, raw, name)
            else:
                commands.add(self.factory.from_attribute(element, name, raw))

        record = self.create_record(record_id)
        self._seed_collection_defaults(record)

        commands.execute_all(record)

        CommandCollection(self.factory.from_child_elements(element)).execute_all(record)
        self.current = element

        self.commands.execute_all(record)

        self._set_default_values(record)

        logger.debug(
            "built record id=%r with %d properties and %d tags",
            record.id,
            len(record.properties),
            len(record.tags),
        )
        return record

    def _seed_collection_defaults(self, record: Record) -> None:
        # add commands append to the default rather than replace it
        for prop in self.entity.properties_with_default():
            if prop.is_collection and not record.contains_property(prop.name):
                record.set(prop.name, [prop.default_value])

    def _set_default_values(self, record: Record) -> None:
        for prop in self.entity.properties_with_default():
            if not prop.is_collection and not record.contains_property(prop.name):
                record.set(prop.name, prop.default_value)

    def get_value(
        self, element: etree._Element, raw: str, attribute_name: str | None = None
    ) -> str:
        """
        Resolve variable references in a value held by an element or attribute.

        Raises:
            ValueParseError: When the value is malformed or names an unknown
                variable; the original InvalidValueError is the cause
        """
        if not self.settings.use_variables:
            return raw

        try:
            return resolve_value(raw, self.variables.lookup)
        except InvalidValueError as e:
            raise ValueParseError(e, **self.error_options(element, attribute_name)) from e

    def error_options(
        self, element: etree._Element | None = None, attribute_name: str | None = None
    ) -> dict[str, Any]:
        """Keyword arguments attributing a structural error to an element."""
        element = element if element is not None else self.current
        context = None

        if element is not None:
            snippet = etree.tostring(element, encoding="unicode", with_tail=False)
            if len(snippet) > SNIPPET_LENGTH:
                snippet = snippet[:SNIPPET_LENGTH] + "..."
            context = ErrorContext(
                element_name=local_name(element.tag),
                attribute_name=attribute_name,
                line=element.sourceline,
                document=self.document,
                snippet=snippet,
            )

        return {"context": context, "error_level": self.settings.error_level}

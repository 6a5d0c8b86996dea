"""
Concrete readers producing records from documents.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from lxml import etree

from recordtree.exceptions import DuplicateRecordIdError
from recordtree.execution.collector import RecordCollector
from recordtree.execution.record import Record
from recordtree.parsing.document import Document, load_document, load_document_string
from recordtree.schema import EntityDefinition
from recordtree.settings import ReaderSettings

logger = logging.getLogger(__name__)


class RecordReader(RecordCollector):
    """
    Reads the records of one entity into a list.

    Record ids must be unique within the reader; records without an id are
    always accepted.
    """

    def __init__(
        self,
        element: etree._Element,
        entity: EntityDefinition,
        settings: ReaderSettings | None = None,
        document: str | None = None,
    ):
        super().__init__(element, entity, settings, document)
        self.records: list[Record] = []
        self._ids: set[str] = set()

    def reset(self) -> None:
        super().reset()
        self.records = []
        self._ids = set()

    def create_record(self, record_id: str | None) -> Record:
        return Record(id=record_id, entity=self.entity)

    def add_record(self, record: Record) -> None:
        if record.id is not None:
            if record.id in self._ids:
                raise DuplicateRecordIdError(record.id, **self.error_options())
            self._ids.add(record.id)
        self.records.append(record)

    def read_records(self) -> list[Record]:
        """Read every record, discarding the results of any earlier read."""
        for _ in self.produce_records():
            pass
        logger.debug("read %d %s records", len(self.records), self.entity.name or "entity")
        return self.records


class DocumentReader:
    """
    Reads the records of every entity in a document.

    Params:
        document: Loaded document
        settings: Reader settings shared by every entity
    """

    def __init__(self, document: Document, settings: ReaderSettings | None = None):
        self.document = document
        self.settings = settings or ReaderSettings()

    @classmethod
    def from_file(cls, path: str | Path, settings: ReaderSettings | None = None) -> "DocumentReader":
        return cls(load_document(path), settings)

    @classmethod
    def from_string(
        cls, text: str | bytes, settings: ReaderSettings | None = None
    ) -> "DocumentReader":
        return cls(load_document_string(text), settings)

    @property
    def entities(self) -> list[EntityDefinition]:
        return [entity.definition for entity in self.document.entities.values()]

    def reader_for(self, entity_name: str) -> RecordReader | None:
        """
        Create a reader for one entity's records section.

        Returns:
            None when the entity declares no records section

        Raises:
            EntityNotDefinedError: When the document has no such entity
        """
        entity = self.document.get_entity(entity_name)
        if entity.records is None:
            return None
        return RecordReader(entity.records, entity.definition, self.settings, self.document.source)

    def iter_records(self, entity_name: str) -> Iterator[Record]:
        """Lazily yield the records of one entity in document order."""
        reader = self.reader_for(entity_name)
        if reader is not None:
            yield from reader.produce_records()

    def read_records(self, entity_name: str) -> list[Record]:
        reader = self.reader_for(entity_name)
        if reader is None:
            return []
        return reader.read_records()

    def read_all(self) -> dict[str, list[Record]]:
        """Read the records of every entity, keyed by entity name."""
        return {name: self.read_records(name) for name in self.document.entities}

"""
Shared test fixtures and utilities for the recordtree test suite.
"""

import pytest
from lxml import etree

from recordtree.execution import RecordReader
from recordtree.schema import EntityDefinition, PropertyDefinition, Variable
from recordtree.settings import ReaderSettings


def parse_records(xml: str) -> etree._Element:
    """Parse a <records> snippet into its element."""
    return etree.fromstring(xml.strip().encode("utf-8"))


def read(xml: str, entity: EntityDefinition, settings: ReaderSettings | None = None):
    """Read every record of a <records> snippet against an entity."""
    return RecordReader(parse_records(xml), entity, settings).read_records()


@pytest.fixture
def book_entity():
    """Entity with scalar, defaulted and collection properties plus one variable.

    Usage:
        def test_something(book_entity, read_records):
            records = read_records("<records><new Title='x'/></records>", book_entity)
    """
    return EntityDefinition(
        name="Book",
        properties=(
            PropertyDefinition(name="Title"),
            PropertyDefinition(name="Summary"),
            PropertyDefinition(name="Format", default_value="paperback"),
            PropertyDefinition(name="Authors", is_collection=True),
            PropertyDefinition(name="Tags", is_collection=True, default_value="core"),
        ),
        variables=(Variable(name="Publisher", value="ACME"),),
    )


@pytest.fixture
def read_records():
    """Function reading a <records> snippet: read_records(xml, entity, settings=None)."""
    return read


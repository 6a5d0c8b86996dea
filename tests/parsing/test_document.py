"""
Tests for loading recordtree documents.
"""

import pytest

from recordtree.exceptions import (
    DocumentLoadError,
    EntityNotDefinedError,
    PropertyNameIsReservedError,
)
from recordtree.parsing import load_document, load_document_string

DOCUMENT = """
<document>
  <entities>
    <entity name="Item">
      <declarations>
        <property name="Title"/>
        <property name="Tags" collection="true" default="core"/>
        <variable name="Publisher" value="ACME"/>
      </declarations>
    </entity>
    <entity name="Book" base="Item">
      <declarations>
        <property name="Pages" type="int" default="0"/>
      </declarations>
      <records>
        <new id="b1" Title="Dune"/>
      </records>
    </entity>
  </entities>
</document>
"""


class TestLoadDocument:
    """Tests for reading entity declarations."""

    def test_entities_in_order(self):
        """Test entities are keyed by name in declaration order."""
        document = load_document_string(DOCUMENT)
        assert list(document.entities) == ["Item", "Book"]

    def test_properties_and_variables(self):
        """Test declaration attributes map onto the schema."""
        item = load_document_string(DOCUMENT).get_entity("Item").definition

        tags = item.find_property("Tags")
        assert tags.is_collection
        assert tags.default_value == "core"
        assert item.find_property("Title").type == "string"
        assert item.find_variable("Publisher").value == "ACME"

    def test_base_entity(self):
        """Test a base attribute links the base definition."""
        book = load_document_string(DOCUMENT).get_entity("Book").definition

        assert book.base.name == "Item"
        assert book.find_property("Pages").type == "int"
        assert book.contains_property("Title")
        assert book.find_variable("Publisher").value == "ACME"

    def test_records_element(self):
        """Test the records section is kept for reading."""
        document = load_document_string(DOCUMENT)
        assert document.get_entity("Item").records is None
        assert document.get_entity("Book").records is not None

    def test_load_from_file(self, tmp_path):
        """Test loading from a path records the source."""
        path = tmp_path / "books.xml"
        path.write_text(DOCUMENT, encoding="utf-8")

        document = load_document(path)
        assert document.source == str(path)
        assert "Book" in document.entities

    def test_namespaced_document(self):
        """Test element names are matched by local name."""
        document = load_document_string(
            '<document xmlns="urn:records"><entities><entity name="A"/></entities></document>'
        )
        assert list(document.entities) == ["A"]


class TestLoadErrors:
    """Tests for invalid documents."""

    def test_malformed_xml(self):
        """Test XML syntax errors become DocumentLoadError."""
        with pytest.raises(DocumentLoadError):
            load_document_string("<document>")

    def test_missing_file(self, tmp_path):
        """Test a missing file becomes DocumentLoadError."""
        with pytest.raises(DocumentLoadError):
            load_document(tmp_path / "missing.xml")

    def test_wrong_root(self):
        """Test the root element must be a document."""
        with pytest.raises(DocumentLoadError, match="Root element"):
            load_document_string("<records/>")

    def test_unknown_base(self):
        """Test a base entity must be declared first."""
        with pytest.raises(EntityNotDefinedError):
            load_document_string(
                '<document><entities><entity name="A" base="B"/></entities></document>'
            )

    def test_duplicate_entity(self):
        """Test entity names are unique."""
        with pytest.raises(DocumentLoadError, match="more than once"):
            load_document_string(
                '<document><entities><entity name="A"/><entity name="A"/></entities></document>'
            )

    def test_missing_property_name(self):
        """Test property declarations require a name."""
        with pytest.raises(DocumentLoadError, match="requires attribute 'name'"):
            load_document_string(
                "<document><entities><entity name='A'><declarations>"
                "<property/></declarations></entity></entities></document>"
            )

    def test_invalid_collection_flag(self):
        """Test the collection flag must be a boolean literal."""
        with pytest.raises(DocumentLoadError, match="collection"):
            load_document_string(
                "<document><entities><entity name='A'><declarations>"
                "<property name='P' collection='yes'/></declarations></entity></entities></document>"
            )

    def test_reserved_property_name(self):
        """Test reserved names fail while the schema is built."""
        with pytest.raises(PropertyNameIsReservedError):
            load_document_string(
                "<document><entities><entity name='A'><declarations>"
                "<property name='id'/></declarations></entity></entities></document>"
            )

    def test_unknown_entity_lookup(self):
        """Test asking for an undeclared entity fails."""
        with pytest.raises(EntityNotDefinedError):
            load_document_string(DOCUMENT).get_entity("Missing")

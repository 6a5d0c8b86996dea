"""
recordtree - Build records from hierarchical XML documents

recordtree reads records declared in an XML document against an entity
schema, applying inherited commands and scoped variables.
"""

from importlib.metadata import version

from recordtree.execution import DocumentReader, Record, RecordCollector, RecordReader
from recordtree.schema import EntityDefinition, PropertyDefinition, Variable
from recordtree.settings import ReaderSettings

__version__ = version("recordtree")

__all__ = [
    "__version__",
    "DocumentReader",
    "EntityDefinition",
    "PropertyDefinition",
    "ReaderSettings",
    "Record",
    "RecordCollector",
    "RecordReader",
    "Variable",
]

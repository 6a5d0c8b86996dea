"""
Parsing of recordtree documents and of variable references inside values.
"""

from recordtree.parsing.document import (
    Document,
    EntityElement,
    load_document,
    load_document_string,
)
from recordtree.parsing.values import resolve_value

__all__ = [
    "Document",
    "EntityElement",
    "load_document",
    "load_document_string",
    "resolve_value",
]

"""
Record construction: records, scope stacks, the document walker and readers.
"""

from recordtree.execution.collector import RecordCollector
from recordtree.execution.reader import DocumentReader, RecordReader
from recordtree.execution.record import Record
from recordtree.execution.scopes import CommandScope, ScopeStack, VariableScope

__all__ = [
    "CommandScope",
    "DocumentReader",
    "Record",
    "RecordCollector",
    "RecordReader",
    "ScopeStack",
    "VariableScope",
]

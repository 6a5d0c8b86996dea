"""
Scope stacks for command and variable declarations.

A scope lives while its declaring element's children are being visited.
Entries are pushed and popped through ``pushed()`` so that every push is
matched by exactly one pop, also when an error propagates or a lazy
consumer stops iterating early.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Generic, TypeVar

from recordtree.commands import Command

if TYPE_CHECKING:
    from recordtree.execution.record import Record
    from recordtree.schema import EntityDefinition, Variable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScopeStack(Generic[T]):
    """LIFO stack of scope entries with push/pop accounting."""

    def __init__(self, name: str = "scope"):
        self.name = name
        self._entries: list[T] = []
        self.push_count = 0
        self.pop_count = 0

    def push(self, entry: T) -> None:
        self._entries.append(entry)
        self.push_count += 1
        logger.debug("push %s entry (depth %d): %r", self.name, len(self._entries), entry)

    def pop(self) -> T:
        entry = self._entries.pop()
        self.pop_count += 1
        logger.debug("pop %s entry (depth %d): %r", self.name, len(self._entries), entry)
        return entry

    @contextmanager
    def pushed(self, entry: T) -> Iterator[T]:
        """
        Keep an entry on the stack for the duration of a with-block.

        Params:
            entry: Entry to push

        Yields:
            The pushed entry
        """
        self.push(entry)
        try:
            yield entry
        finally:
            self.pop()

    @property
    def depth(self) -> int:
        return len(self._entries)

    def innermost_first(self) -> Iterator[T]:
        return reversed(self._entries)

    def outermost_first(self) -> Iterator[T]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


class VariableScope(ScopeStack["Variable"]):
    """
    Variables declared by enclosing elements, backed by entity-level variables.

    Lookup is nearest-enclosing-wins; entity variables are consulted only when
    no enclosing declaration binds the name.
    """

    def __init__(self, entity: "EntityDefinition"):
        super().__init__("variable")
        self.entity = entity

    def find(self, name: str) -> "Variable | None":
        for variable in self.innermost_first():
            if variable.name == name:
                return variable
        return self.entity.find_variable(name)

    def lookup(self, name: str) -> str | None:
        variable = self.find(name)
        return variable.value if variable is not None else None


class CommandScope(ScopeStack[Command]):
    """Commands inherited by every record created inside enclosing command elements."""

    def __init__(self):
        super().__init__("command")

    def execute_all(self, record: "Record") -> None:
        """Apply inherited commands, outermost scope first."""
        for command in self.outermost_first():
            command.execute(record)

"""
Commands that mutate a record while it is being built.

The command set is closed: set, add-item, append, prefix, add-tag, and a
group wrapper that lets several commands occupy a single scope entry.
Commands are immutable value objects.
"""

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import TYPE_CHECKING, Union

from attrs import field, frozen

if TYPE_CHECKING:
    from recordtree.execution.record import Record


class CommandKind(Enum):
    """Kind of record mutation."""

    SET = "set"
    ADD_ITEM = "add_item"
    APPEND = "append"
    PREFIX = "prefix"
    ADD_TAG = "add_tag"
    GROUP = "group"


@frozen
class SetCommand:
    """Overwrite a property value, whatever it held before."""

    property_name: str
    value: str

    kind = CommandKind.SET

    def execute(self, record: "Record") -> None:
        record.set(self.property_name, self.value)


@frozen
class AddItemCommand:
    """Append an item to a collection property."""

    property_name: str
    value: str

    kind = CommandKind.ADD_ITEM

    def execute(self, record: "Record") -> None:
        record.add_item(self.property_name, self.value)


@frozen
class AppendCommand:
    property_name: str
    value: str

    kind = CommandKind.APPEND

    def execute(self, record: "Record") -> None:
        record.append(self.property_name, self.value)


@frozen
class PrefixCommand:
    property_name: str
    value: str

    kind = CommandKind.PREFIX

    def execute(self, record: "Record") -> None:
        record.prefix(self.property_name, self.value)


@frozen
class AddTagCommand:
    value: str

    kind = CommandKind.ADD_TAG

    def execute(self, record: "Record") -> None:
        record.add_tag(self.value)


@frozen
class GroupCommand:
    """Several commands executed in order as one unit."""

    commands: tuple["Command", ...] = field(converter=tuple)

    kind = CommandKind.GROUP

    def execute(self, record: "Record") -> None:
        for command in self.commands:
            command.execute(record)


Command = Union[
    SetCommand,
    AddItemCommand,
    AppendCommand,
    PrefixCommand,
    AddTagCommand,
    GroupCommand,
]


class CommandCollection:
    """
    Ordered commands applied to a record in sequence.

    Later commands observe the mutations of earlier ones.
    """

    def __init__(self, commands: Iterable[Command] | None = None):
        self._commands: list[Command] = list(commands or ())

    def add(self, command: Command) -> None:
        self._commands.append(command)

    def execute_all(self, record: "Record") -> None:
        for command in self._commands:
            command.execute(record)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __bool__(self) -> bool:
        return bool(self._commands)

    def __repr__(self) -> str:
        return f"CommandCollection({self._commands!r})"

"""
Record commands and their translation from document elements.

This package contains the closed command set applied to records during
construction and the factory that derives commands from attributes and
child elements.
"""

from recordtree.commands.commands import (
    AddItemCommand,
    AddTagCommand,
    AppendCommand,
    Command,
    CommandCollection,
    CommandKind,
    GroupCommand,
    PrefixCommand,
    SetCommand,
)

__all__ = [
    "AddItemCommand",
    "AddTagCommand",
    "AppendCommand",
    "Command",
    "CommandCollection",
    "CommandKind",
    "GroupCommand",
    "PrefixCommand",
    "SetCommand",
]

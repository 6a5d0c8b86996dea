"""
Core type definitions for recordtree.

This module contains fundamental type aliases used throughout recordtree for
type safety and consistency.
"""

from collections.abc import Callable

PropertyValue = str | list[str]

VariableLookup = Callable[[str], str | None]

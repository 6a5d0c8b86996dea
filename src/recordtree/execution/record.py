"""
Record objects produced by reading a records section.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from recordtree.core.types import PropertyValue

if TYPE_CHECKING:
    from recordtree.schema import EntityDefinition


@dataclass
class Record:
    """
    A record built from one 'new' element.

    Property values are strings, or lists of strings for collection
    properties. Tags are kept in insertion order without duplicates.

    Params:
        id: Record identity, None when the element declared no id
        entity: Entity definition the record was built against
        properties: Property values by name
        tags: Tags added by tag commands
    """

    id: str | None = None
    entity: "EntityDefinition | None" = field(default=None, repr=False, compare=False)
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)

    def __getitem__(self, name: str) -> PropertyValue:
        return self.properties[name]

    def __contains__(self, name: str) -> bool:
        return name in self.properties

    def get(self, name: str, default: PropertyValue | None = None) -> PropertyValue | None:
        return self.properties.get(name, default)

    def contains_property(self, name: str) -> bool:
        return name in self.properties

    def set(self, name: str, value: PropertyValue) -> None:
        self.properties[name] = value

    def add_item(self, name: str, item: str) -> None:
        """Append an item to a collection property, creating the list when absent."""
        current = self.properties.get(name)
        if current is None:
            self.properties[name] = [item]
        elif isinstance(current, list):
            current.append(item)
        else:
            self.properties[name] = [current, item]

    def append(self, name: str, value: str) -> None:
        """Concatenate value after the current value; a list gets it on every item."""
        current = self.properties.get(name, "")
        if isinstance(current, list):
            self.properties[name] = [item + value for item in current]
        else:
            self.properties[name] = current + value

    def prefix(self, name: str, value: str) -> None:
        """Concatenate value before the current value; a list gets it on every item."""
        current = self.properties.get(name, "")
        if isinstance(current, list):
            self.properties[name] = [value + item for item in current]
        else:
            self.properties[name] = value + current

    def add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def get_string(self, name: str, default: str | None = None) -> str | None:
        """
        Get a property as a single string.

        Params:
            name: Property name
            default: Returned when the property is absent

        Returns:
            The scalar value, or the items joined by ', ' for collections
        """
        value = self.properties.get(name)
        if value is None:
            return default
        if isinstance(value, list):
            return ", ".join(value)
        return value

    def get_items(self, name: str) -> list[str]:
        """Get a property as a list; absent properties give an empty list."""
        value = self.properties.get(name)
        if value is None:
            return []
        if isinstance(value, list):
            return list(value)
        return [value]

    def get_boolean(self, name: str, default: bool = False) -> bool:
        """
        Get a property as a boolean.

        Raises:
            ValueError: When the value is neither 'true' nor 'false'
        """
        value = self.get_string(name)
        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
        raise ValueError(f"Property '{name}' value '{value}' is not a boolean")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "properties": {
                name: list(value) if isinstance(value, list) else value
                for name, value in self.properties.items()
            },
            "tags": list(self.tags),
        }

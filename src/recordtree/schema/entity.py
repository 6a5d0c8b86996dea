"""
Entity schema models for recordtree.

An entity definition is the static description of which properties a record
may carry, which of them are collections, their default values, and the
entity-level variables visible to every value in the entity's records.
"""

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator, model_validator

from recordtree.core.names import RESERVED_PROPERTY_NAMES
from recordtree.exceptions import (
    DuplicatePropertyError,
    DuplicateVariableError,
    PropertyNameIsReservedError,
)

DEFAULT_PROPERTY_TYPE = "string"


class PropertyDefinition(BaseModel):
    """
    A named property records of an entity may carry.

    The type is an informational tag; values are always stored as strings.

    Params:
        name: Property name, used as attribute or element name in documents
        type: Informational type tag
        default_value: Value applied when a record leaves the property unset
        is_collection: Whether the property holds an ordered list of strings
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = DEFAULT_PROPERTY_TYPE
    default_value: str | None = None
    is_collection: bool = False

    @field_validator("name")
    @classmethod
    def reject_reserved_name(cls, name: str) -> str:
        for reserved in RESERVED_PROPERTY_NAMES:
            if name.lower() == reserved.lower():
                raise PropertyNameIsReservedError(name)
        return name


class Variable(BaseModel):
    """A named string binding usable as $(name) inside values."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class EntityDefinition(BaseModel):
    """
    Schema of one entity: its properties, variables and optional base entity.

    Properties and variables declared on a base entity are inherited; a
    declaration on the derived entity shadows the inherited one of the same
    name.

    Params:
        name: Entity name
        properties: Properties declared directly on this entity
        variables: Entity-level variables declared directly on this entity
        base: Entity this one inherits declarations from
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    properties: tuple[PropertyDefinition, ...] = ()
    variables: tuple[Variable, ...] = ()
    base: "EntityDefinition | None" = None

    _properties_by_name: dict[str, PropertyDefinition] = PrivateAttr(default_factory=dict)
    _variables_by_name: dict[str, Variable] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def check_unique_names(self) -> "EntityDefinition":
        seen = set()
        for prop in self.properties:
            if prop.name in seen:
                raise DuplicatePropertyError(prop.name, self.name or None)
            seen.add(prop.name)

        seen = set()
        for variable in self.variables:
            if variable.name in seen:
                raise DuplicateVariableError(variable.name, self.name or None)
            seen.add(variable.name)

        return self

    def model_post_init(self, __context) -> None:
        self._properties_by_name = {prop.name: prop for prop in self.properties}
        self._variables_by_name = {var.name: var for var in self.variables}

    def find_property(self, name: str) -> PropertyDefinition | None:
        """Find a property on this entity or, failing that, on its base chain."""
        prop = self._properties_by_name.get(name)
        if prop is None and self.base is not None:
            return self.base.find_property(name)
        return prop

    def contains_property(self, name: str) -> bool:
        return self.find_property(name) is not None

    def find_variable(self, name: str) -> Variable | None:
        """Find an entity-level variable on this entity or its base chain."""
        variable = self._variables_by_name.get(name)
        if variable is None and self.base is not None:
            return self.base.find_variable(name)
        return variable

    def all_properties(self) -> list[PropertyDefinition]:
        """
        All properties visible on this entity, inherited ones first.

        Returns:
            Properties in declaration order, with shadowed base properties
            replaced by the derived declaration
        """
        if self.base is None:
            return list(self.properties)

        inherited = [
            prop
            for prop in self.base.all_properties()
            if prop.name not in self._properties_by_name
        ]
        return inherited + list(self.properties)

    def properties_with_default(self) -> list[PropertyDefinition]:
        return [prop for prop in self.all_properties() if prop.default_value is not None]

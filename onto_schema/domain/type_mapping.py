"""
Type resolution for schema fields.

Maps the semantic kind of a field (or its relation reference) to the
representation name a code generator emits for it.
"""

from typing import Dict, Mapping, Optional, Protocol

from ..config import SchemaSettings, get_settings
from ..constants import DefaultTypeNames


class TypeMapperProtocol(Protocol):
    """Protocol for objects resolving a field's representation name."""

    def effective_type(self, var) -> str:
        """Return the representation name of ``var``, or "" if it has none."""
        ...


class TypeMapper:
    """
    Resolves the representation name of a field.

    Rules:
    - a relation reference (whole or other) wins and maps to the relation
      representation, a foreign-key style integer id
    - otherwise the field's kind is looked up, with dates mapped to strings
    - an unknown kind without a relation has no representation and maps to ""
    """

    def __init__(self, type_names: Optional[Mapping[str, str]] = None):
        self.type_names: Dict[str, str] = dict(DefaultTypeNames.MAPPING)
        if type_names:
            self.type_names.update(type_names)

    @classmethod
    def from_settings(cls, settings: SchemaSettings) -> "TypeMapper":
        """Build a mapper from validated settings."""
        return cls(settings.type_names)

    def effective_type(self, var) -> str:
        if var.has_relation:
            return self.type_names[DefaultTypeNames.RELATION_KEY]
        return self.type_names.get(var.kind.value, "")


def get_type_mapper() -> TypeMapper:
    """Return a mapper for the active settings."""
    return TypeMapper.from_settings(get_settings())

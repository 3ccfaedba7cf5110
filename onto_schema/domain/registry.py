"""
Registry of domain classes for resolving relation references.

Fields refer to related classes by name. The registry turns those names back
into ``DomainClass`` instances without the classes holding references to each
other.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import DomainClass, DomainVar

logger = logging.getLogger(__name__)


class ClassRegistry:
    """Lookup of domain classes by name."""

    def __init__(self, classes: Optional[Iterable[DomainClass]] = None):
        self._classes: Dict[str, DomainClass] = {}
        for domain_class in classes or ():
            self.register(domain_class)

    def register(self, domain_class: DomainClass) -> DomainClass:
        """Register a class, replacing any class already using its name."""
        if domain_class.name in self._classes and self._classes[domain_class.name] is not domain_class:
            logger.warning(f"Replacing registered domain class '{domain_class.name}'")
        self._classes[domain_class.name] = domain_class
        return domain_class

    def get(self, name: Optional[str]) -> Optional[DomainClass]:
        """Get a class by name, or None if it is not registered."""
        if name is None:
            return None
        return self._classes.get(name)

    def resolve_whole(self, var: DomainVar) -> Optional[DomainClass]:
        """Resolve the whole/part relation of ``var``."""
        return self.get(var.relation_whole)

    def resolve_other(self, var: DomainVar) -> Optional[DomainClass]:
        """Resolve the generic relation of ``var``."""
        return self.get(var.relation_other)

    def unresolved_relations(self) -> List[Tuple[str, str, str]]:
        """
        List relation references that name an unregistered class.

        Returns:
            ``(class_name, field_name, target_name)`` tuples in registration
            and field order
        """
        missing = []
        for domain_class in self._classes.values():
            for var in domain_class.all_vars:
                for target in (var.relation_whole, var.relation_other):
                    if target is not None and target not in self._classes:
                        missing.append((domain_class.name, var.name, target))

        for class_name, field_name, target in missing:
            logger.warning(f"Unresolved relation {class_name}.{field_name} -> {target}")
        return missing

    @property
    def names(self) -> List[str]:
        return list(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator[DomainClass]:
        return iter(self._classes.values())

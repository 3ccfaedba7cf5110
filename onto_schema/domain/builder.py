"""
Fluent builder for domain classes.

Collects fields per partition and hands a fully populated ``DomainClass``
to the caller, so derived views are only ever queried after population.
"""

import logging
from typing import Dict, List, Optional

from ..constants import PartitionNames
from ..exceptions import SchemaBuildError
from .models import DomainClass, DomainVar

logger = logging.getLogger(__name__)


class DomainClassBuilder:
    """
    Builds a ``DomainClass`` partition by partition.

    Each partition method accepts either a ready ``DomainVar`` or the keyword
    arguments to create one, and returns the builder for chaining:

        >>> cls = (DomainClassBuilder("Task", table="tasks")
        ...        .argument(name="id", kind="integer")
        ...        .editable(name="title", kind="string", default="#untitled")
        ...        .build())

    A builder produces exactly one class.
    """

    def __init__(self, name: str, table: str = "", comment: str = ""):
        self.name = name
        self.table = table
        self.comment = comment
        self._partitions: Dict[str, List[DomainVar]] = {
            partition: [] for partition in PartitionNames.ORDER
        }
        self._built = False

    def _add(self, partition: str, var: Optional[DomainVar], fields: dict) -> "DomainClassBuilder":
        if self._built:
            raise SchemaBuildError(
                f"Cannot add to partition '{partition}' after build()",
                class_name=self.name,
            )
        if var is None:
            var = DomainVar(**fields)
        elif fields:
            raise SchemaBuildError(
                "Pass either a DomainVar or field keyword arguments, not both",
                class_name=self.name,
                context={'partition': partition, 'field': var.name},
            )
        self._partitions[partition].append(var)
        return self

    def argument(self, var: Optional[DomainVar] = None, **fields) -> "DomainClassBuilder":
        return self._add(PartitionNames.ARGUMENTS, var, fields)

    def editable(self, var: Optional[DomainVar] = None, **fields) -> "DomainClassBuilder":
        return self._add(PartitionNames.EDITABLES, var, fields)

    def updatable(self, var: Optional[DomainVar] = None, **fields) -> "DomainClassBuilder":
        return self._add(PartitionNames.UPDATABLES, var, fields)

    def external(self, var: Optional[DomainVar] = None, **fields) -> "DomainClassBuilder":
        return self._add(PartitionNames.EXTERNAL, var, fields)

    def auto(self, var: Optional[DomainVar] = None, **fields) -> "DomainClassBuilder":
        return self._add(PartitionNames.AUTOS, var, fields)

    def build(self) -> DomainClass:
        """Create the domain class. The builder cannot be reused afterwards."""
        if self._built:
            raise SchemaBuildError("build() was already called", class_name=self.name)
        self._built = True

        domain_class = DomainClass(
            name=self.name,
            table=self.table,
            comment=self.comment,
            **self._partitions,
        )
        logger.debug(
            f"Built domain class '{self.name}' with {len(domain_class.all_vars)} field(s)"
        )
        return domain_class

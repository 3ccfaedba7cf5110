"""
Core schema models for onto-schema.

A ``DomainClass`` describes one generated data entity as five declared
partitions of ``DomainVar`` field descriptors. Code generators query its
memoized derived views, which recombine and filter those partitions, and
project fields to (comment, name, type) triples with ``for_each_typed``.

The model trusts its inputs: missing partitions are empty, untyped fields
are skipped and empty names give empty derived names.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

from ..config import SchemaSettings, get_settings
from ..constants import DefaultMarkers, PartitionNames
from .naming import upper_first
from .type_mapping import TypeMapperProtocol, get_type_mapper
from .views import DerivedView, ViewCache, filter_across, union_ordered

logger = logging.getLogger(__name__)


class VarType(Enum):
    """Semantic value type of a field."""

    UNKNOWN = "unknown"
    INTEGER = "integer"
    STRING = "string"
    DATE = "date"
    BOOLEAN = "boolean"
    FLOAT = "float"


class Role(Enum):
    """Roles that fold a field into another partition's derived view."""

    AUTO = "auto"
    EDITABLE = "editable"
    UPDATABLE = "updatable"


@dataclass(frozen=True)
class IntRange:
    """
    Integer constraint attached to a field.

    Either open upward (``start`` and above), open downward (``end`` and
    below) or closed on both ends. Only carried for generated validation.
    """

    start: int = 0
    end: int = 0
    open_upward: bool = False
    open_downward: bool = False

    @classmethod
    def up(cls, start: int) -> "IntRange":
        """From ``start`` upward, unbounded."""
        return cls(start=start, open_upward=True)

    @classmethod
    def down(cls, end: int) -> "IntRange":
        """Up to ``end`` from below, unbounded."""
        return cls(end=end, open_downward=True)

    @classmethod
    def between(cls, start: int, end: int) -> "IntRange":
        """Between ``start`` and ``end`` inclusive."""
        return cls(start=start, end=end)

    def describe(self) -> str:
        if self.open_upward:
            return f">= {self.start}"
        if self.open_downward:
            return f"<= {self.end}"
        return f"{self.start}..{self.end}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'start': self.start,
            'end': self.end,
            'open_upward': self.open_upward,
            'open_downward': self.open_downward,
        }


def render_default(expr: str) -> Tuple[bool, str]:
    """
    Render a default-value expression.

    - ``""`` means no default: ``(False, "")``
    - ``$NAME`` is a code expression spliced as is
    - ``#text`` is a string literal, rendered as ``"text"``
    - anything else (numbers, booleans) is spliced as is

    The result is not checked for syntax.
    """
    if not expr:
        return False, ""
    if expr[0] == DefaultMarkers.EXPRESSION:
        return True, expr
    if expr[0] == DefaultMarkers.STRING_LITERAL:
        return True, DefaultMarkers.QUOTE + expr[1:] + DefaultMarkers.QUOTE
    return True, expr


@dataclass(eq=False)
class DomainVar:
    """
    Describes one typed attribute of a domain class.

    ``roles`` lets a field declared in one partition also appear in the
    Autos, Editables or Updatables derived view. Relation references hold
    the *name* of the referenced class; see ``ClassRegistry`` for lookup.

    Descriptors compare by identity, the same way a partition holds them.
    """

    name: str = ""
    kind: VarType = VarType.UNKNOWN
    comment: str = ""
    column: str = ""
    default: str = ""
    range: Optional[IntRange] = None
    roles: FrozenSet[Role] = frozenset()
    relation_whole: Optional[str] = None
    relation_other: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.kind, VarType):
            self.kind = VarType(self.kind)

        if isinstance(self.roles, (Role, str)):
            self.roles = [self.roles]
        self.roles = frozenset(Role(role) for role in (self.roles or ()))

        # Relations are stored by class name
        if isinstance(self.relation_whole, DomainClass):
            self.relation_whole = self.relation_whole.name
        if isinstance(self.relation_other, DomainClass):
            self.relation_other = self.relation_other.name

    @property
    def is_auto(self) -> bool:
        return Role.AUTO in self.roles

    @property
    def is_editable(self) -> bool:
        return Role.EDITABLE in self.roles

    @property
    def is_updatable(self) -> bool:
        return Role.UPDATABLE in self.roles

    @property
    def has_relation(self) -> bool:
        return self.relation_whole is not None or self.relation_other is not None

    @property
    def has_default(self) -> bool:
        return bool(self.default)

    def effective_type(self, mapper: Optional[TypeMapperProtocol] = None) -> str:
        """
        Return the representation name used for code generation.

        An empty string means the field has no generatable representation.
        """
        if mapper is None:
            mapper = get_type_mapper()
        return mapper.effective_type(self)

    def is_default(self) -> Tuple[bool, str]:
        """Return ``(has_default, rendered_default)``. See ``render_default``."""
        return render_default(self.default)

    def upper_first(self) -> str:
        """Return the field name with its first character uppercased."""
        return upper_first(self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'name': self.name,
            'kind': self.kind.value,
            'comment': self.comment,
            'column': self.column,
            'default': self.default,
            'range': self.range.to_dict() if self.range else None,
            'roles': sorted(role.value for role in self.roles),
            'relation_whole': self.relation_whole,
            'relation_other': self.relation_other,
        }


Visitor = Callable[[DomainVar, str, str, str], Any]
ViewSelector = Union[DerivedView, str, Callable[[], Sequence[DomainVar]]]


@dataclass
class DomainClass:
    """
    Schema description of one generated data entity.

    Fields are declared in five partitions. Derived views are computed on
    first access and memoized for the lifetime of the instance; changing a
    partition after a view was read does not change that view until
    ``reset_views()`` is called. Populate first, then query (or use
    ``DomainClassBuilder``).
    """

    name: str
    table: str = ""
    comment: str = ""

    arguments: List[DomainVar] = field(default_factory=list)
    editables: List[DomainVar] = field(default_factory=list)
    updatables: List[DomainVar] = field(default_factory=list)
    external: List[DomainVar] = field(default_factory=list)
    autos: List[DomainVar] = field(default_factory=list)

    _views: ViewCache = field(default_factory=ViewCache, init=False, repr=False, compare=False)

    def __post_init__(self):
        for partition in PartitionNames.ORDER:
            setattr(self, partition, list(getattr(self, partition) or []))

    def partitions(self) -> Dict[str, List[DomainVar]]:
        """Return the declared partitions in visitation order."""
        return {partition: getattr(self, partition) for partition in PartitionNames.ORDER}

    def _cached(self, view: DerivedView, compute: Callable[[], Iterable[DomainVar]]) -> Tuple[DomainVar, ...]:
        return self._views.get_or_compute(view, compute, owner=self.name)

    # --- Derived views ---

    @property
    def all_vars(self) -> Tuple[DomainVar, ...]:
        """Every declared field, each exactly once."""
        return self._cached(DerivedView.ALL_VARS, lambda: union_ordered(
            self.arguments, self.editables, self.updatables, self.external, self.autos
        ))

    @property
    def default_args(self) -> Tuple[DomainVar, ...]:
        """Arguments that declare a default. Other partitions are not scanned."""
        return self._cached(DerivedView.DEFAULT_ARGS, lambda: filter_across(
            _has_default, self.arguments
        ))

    @property
    def initval_vars(self) -> Tuple[DomainVar, ...]:
        """Autos, Editables and External fields that need an initial value."""
        return self._cached(DerivedView.INITVAL_VARS, lambda: filter_across(
            _has_default, self.autos, self.editables, self.external
        ))

    @property
    def all_autos(self) -> Tuple[DomainVar, ...]:
        """Declared autos, then auto-flagged arguments, editables and updatables."""
        return self._cached(DerivedView.ALL_AUTOS, lambda: union_ordered(
            self.autos,
            filter_across(_is_auto, self.arguments, self.editables, self.updatables),
        ))

    @property
    def all_editables(self) -> Tuple[DomainVar, ...]:
        """Declared editables, then editable-flagged arguments and autos."""
        return self._cached(DerivedView.ALL_EDITABLES, lambda: union_ordered(
            self.editables,
            filter_across(_is_editable, self.arguments, self.autos),
        ))

    @property
    def all_updatables(self) -> Tuple[DomainVar, ...]:
        """Declared updatables, then updatable-flagged arguments and autos."""
        return self._cached(DerivedView.ALL_UPDATABLES, lambda: union_ordered(
            self.updatables,
            filter_across(_is_updatable, self.arguments, self.autos),
        ))

    def view(self, name: Union[DerivedView, str]) -> Tuple[DomainVar, ...]:
        """Return a derived view by name."""
        return getattr(self, DerivedView(name).value)

    def reset_views(self) -> None:
        """Forget every computed view so the next access recomputes it."""
        self._views.clear()

    # --- Class-level queries ---

    @property
    def is_editable_class(self) -> bool:
        return len(self.all_editables) > 0

    @property
    def is_updatable_class(self) -> bool:
        return len(self.all_updatables) > 0

    @property
    def is_external_class(self) -> bool:
        """True when every field of the class is declared External."""
        return len(self.all_vars) == len(self.external)

    # --- Projection ---

    def for_each_typed(
        self,
        over: ViewSelector,
        visitor: Visitor,
        mapper: Optional[TypeMapperProtocol] = None,
        settings: Optional[SchemaSettings] = None,
    ) -> bool:
        """
        Visit the typed fields of a view in order.

        ``over`` is a ``DerivedView``, a view name or a callable returning a
        sequence of fields. For each field with a non-empty effective type,
        ``visitor(var, comment, name, type_name)`` is called. The comment is
        the configured prefix (``"//"``) plus the field comment; the field at
        position 0 of the view also gets a leading newline. Fields without a
        type are skipped.

        The visitor stops the traversal by returning ``False``.

        Returns:
            True if every field was visited, False if the visitor stopped early
        """
        if settings is None:
            settings = get_settings()
        if mapper is None:
            mapper = get_type_mapper()

        for index, var in enumerate(self._select(over)):
            type_name = mapper.effective_type(var)
            if not type_name:
                continue
            comment = settings.comment_prefix + var.comment
            if index == 0:
                comment = settings.first_comment_prefix + comment
            if visitor(var, comment, var.name, type_name) is False:
                return False
        return True

    def _select(self, over: ViewSelector) -> Sequence[DomainVar]:
        if isinstance(over, (DerivedView, str)):
            return self.view(over)
        if over is None:
            return ()
        return over() or ()

    # --- Lookups and diagnostics ---

    def get_var_by_name(self, name: str) -> Optional[DomainVar]:
        """Get a field by name from any partition."""
        for var in union_ordered(*self.partitions().values()):
            if var.name == name:
                return var
        return None

    def partition_of(self, var: DomainVar) -> Optional[str]:
        """Return the name of the partition that declares ``var``."""
        for partition, members in self.partitions().items():
            if any(member is var for member in members):
                return partition
        return None

    def duplicate_names(self) -> List[str]:
        """
        Names declared more than once across partitions.

        Uniqueness is the caller's responsibility; this only reports.
        """
        counts = Counter(var.name for var in union_ordered(*self.partitions().values()))
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            logger.warning(
                f"Domain class '{self.name}' has duplicate field names: {', '.join(duplicates)}"
            )
        return duplicates

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        result: Dict[str, Any] = {
            'name': self.name,
            'table': self.table,
            'comment': self.comment,
        }
        for partition, members in self.partitions().items():
            result[partition] = [var.to_dict() for var in members]
        result['is_editable_class'] = self.is_editable_class
        result['is_updatable_class'] = self.is_updatable_class
        result['is_external_class'] = self.is_external_class
        return result


def _has_default(var: DomainVar) -> bool:
    return var.is_default()[0]


def _is_auto(var: DomainVar) -> bool:
    return var.is_auto


def _is_editable(var: DomainVar) -> bool:
    return var.is_editable


def _is_updatable(var: DomainVar) -> bool:
    return var.is_updatable

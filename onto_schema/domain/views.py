"""
Partition combinators and the derived-view memo.

Derived views of a domain class are built from two primitives:
``union_ordered`` concatenates partitions and ``filter_across`` does the
same while keeping only fields that satisfy a predicate. Both preserve the
order of the partitions they are given and the order inside each of them.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DerivedView(str, Enum):
    """Names of the memoized derived views of a domain class."""

    ALL_VARS = "all_vars"
    DEFAULT_ARGS = "default_args"
    INITVAL_VARS = "initval_vars"
    ALL_AUTOS = "all_autos"
    ALL_EDITABLES = "all_editables"
    ALL_UPDATABLES = "all_updatables"


def union_ordered(*partitions: Optional[Iterable[T]]) -> Tuple[T, ...]:
    """
    Concatenate partitions in the order given.

    A ``None`` partition counts as empty.

    Example:
        >>> union_ordered([1, 2], None, [3])
        (1, 2, 3)
    """
    result = []
    for partition in partitions:
        if partition:
            result.extend(partition)
    return tuple(result)


def filter_across(predicate: Callable[[T], bool], *partitions: Optional[Iterable[T]]) -> Tuple[T, ...]:
    """
    Concatenate partitions keeping only the items matching ``predicate``.

    Example:
        >>> filter_across(lambda x: x % 2, [1, 2, 3], None, [5, 6])
        (1, 3, 5)
    """
    result = []
    for partition in partitions:
        if not partition:
            continue
        result.extend(item for item in partition if predicate(item))
    return tuple(result)


class ViewCache:
    """
    One-shot memo for derived views.

    Each view moves from uncomputed to computed exactly once. Nothing
    invalidates an entry except ``clear()``; later changes to the partitions
    the view was built from are not observed.
    """

    def __init__(self):
        self._values: Dict[str, tuple] = {}
        # Reentrant so a view may be computed from another view
        self._lock = threading.RLock()

    def get_or_compute(self, view: str, compute: Callable[[], tuple], owner: str = "") -> tuple:
        key = DerivedView(view).value
        cached = self._values.get(key)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._values.get(key)
            if cached is None:
                cached = tuple(compute())
                self._values[key] = cached
                logger.debug(f"Computing derived view '{key}' for '{owner}': {len(cached)} field(s)")
        return cached

    def is_computed(self, view: str) -> bool:
        return DerivedView(view).value in self._values

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

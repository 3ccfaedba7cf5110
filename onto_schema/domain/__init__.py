"""
Domain module for onto-schema.

This module contains the schema model consumed by code generators: field
descriptors, domain classes with their memoized derived views, and the
helpers used to build and relate them.
"""

from .models import (
    VarType,
    Role,
    IntRange,
    DomainVar,
    DomainClass,
    render_default,
)

from .views import (
    DerivedView,
    ViewCache,
    union_ordered,
    filter_across,
)

from .type_mapping import (
    TypeMapper,
    TypeMapperProtocol,
    get_type_mapper,
)

from .builder import DomainClassBuilder
from .registry import ClassRegistry
from .naming import upper_first

__all__ = [
    # Core models
    'VarType',
    'Role',
    'IntRange',
    'DomainVar',
    'DomainClass',
    'render_default',

    # Derived views
    'DerivedView',
    'ViewCache',
    'union_ordered',
    'filter_across',

    # Type mapping
    'TypeMapper',
    'TypeMapperProtocol',
    'get_type_mapper',

    # Construction and lookup
    'DomainClassBuilder',
    'ClassRegistry',

    # Naming
    'upper_first',
]

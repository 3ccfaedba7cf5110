"""
onto-schema: in-memory schema model for domain class code generation.
"""

from .domain import (
    ClassRegistry,
    DerivedView,
    DomainClass,
    DomainClassBuilder,
    DomainVar,
    IntRange,
    Role,
    TypeMapper,
    VarType,
)

__version__ = "0.3.0"

__all__ = [
    'ClassRegistry',
    'DerivedView',
    'DomainClass',
    'DomainClassBuilder',
    'DomainVar',
    'IntRange',
    'Role',
    'TypeMapper',
    'VarType',
]

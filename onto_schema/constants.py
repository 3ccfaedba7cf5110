"""
Centralized constants for onto-schema.

This module holds the default type representation names, comment styles and
partition/view names shared by the domain model and its configuration.
"""

from typing import Dict, List


# =============================================================================
# TYPE REPRESENTATION
# =============================================================================

class DefaultTypeNames:
    """Default representation names emitted for each semantic kind."""

    INTEGER = "int"
    STRING = "string"
    BOOLEAN = "bool"
    FLOAT = "float64"

    # Relation-valued fields are foreign-key style integer identifiers
    RELATION = "int"

    # Key used for relation-valued fields in the type name mapping
    RELATION_KEY = "relation"

    MAPPING: Dict[str, str] = {
        "integer": INTEGER,
        "string": STRING,
        # Dates are carried as opaque strings
        "date": STRING,
        "boolean": BOOLEAN,
        "float": FLOAT,
        RELATION_KEY: RELATION,
    }


# =============================================================================
# COMMENT RENDERING
# =============================================================================

class CommentStyle:
    """Comment rendering used by typed projections."""

    PREFIX = "//"
    FIRST_FIELD_PREFIX = "\n"


# =============================================================================
# DEFAULT EXPRESSIONS
# =============================================================================

class DefaultMarkers:
    """Leading characters that select how a default expression is rendered."""

    EXPRESSION = "$"
    STRING_LITERAL = "#"
    QUOTE = '"'


# =============================================================================
# PARTITIONS AND VIEWS
# =============================================================================

class PartitionNames:
    """Declared field partitions of a domain class."""

    ARGUMENTS = "arguments"
    EDITABLES = "editables"
    UPDATABLES = "updatables"
    EXTERNAL = "external"
    AUTOS = "autos"

    # Fixed visitation order used by every derived view
    ORDER: List[str] = [ARGUMENTS, EDITABLES, UPDATABLES, EXTERNAL, AUTOS]

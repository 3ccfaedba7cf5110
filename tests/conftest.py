# File: tests/conftest.py
# Shared fixtures for the schema model tests.

import pytest

from onto_schema.config import reset_settings
from onto_schema.domain.models import DomainClass, DomainVar, IntRange, Role, VarType


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts and ends with the default settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def task_class() -> DomainClass:
    """
    A class using every partition:
    - id: integer argument, also auto
    - owner: argument relating to User, no comment
    - title: editable string with a literal default
    - due: editable date
    - notes: unknown kind, never typed
    - done: updatable boolean, also editable
    - source: external string with an expression default
    - created: auto integer with a numeric default
    """
    return DomainClass(
        name="Task",
        table="tasks",
        comment="A unit of work",
        arguments=[
            DomainVar(name="id", kind=VarType.INTEGER, comment="identifier", roles={Role.AUTO}),
            DomainVar(name="owner", relation_whole="User"),
        ],
        editables=[
            DomainVar(name="title", kind=VarType.STRING, comment="title", default="#untitled"),
            DomainVar(name="due", kind=VarType.DATE, comment="due date"),
            DomainVar(name="notes", comment="free notes"),
        ],
        updatables=[
            DomainVar(name="done", kind=VarType.BOOLEAN, roles={Role.EDITABLE}),
        ],
        external=[
            DomainVar(name="source", kind=VarType.STRING, default="$DefaultSource"),
        ],
        autos=[
            DomainVar(name="created", kind=VarType.INTEGER, default="0", range=IntRange.up(0)),
        ],
    )

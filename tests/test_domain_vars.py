"""
Tests for field descriptors: type resolution, defaults, naming and roles.
"""

from dataclasses import FrozenInstanceError
from unittest import TestCase

from onto_schema.domain.models import (
    DomainClass,
    DomainVar,
    IntRange,
    Role,
    VarType,
    render_default,
)
from onto_schema.domain.type_mapping import TypeMapper


class TestEffectiveType(TestCase):
    """Test cases for DomainVar.effective_type"""

    def test_primitive_kinds(self):
        """Each primitive kind maps to its representation name"""
        expected = {
            VarType.INTEGER: "int",
            VarType.STRING: "string",
            VarType.BOOLEAN: "bool",
            VarType.FLOAT: "float64",
        }
        for kind, type_name in expected.items():
            with self.subTest(kind=kind):
                self.assertEqual(DomainVar(name="x", kind=kind).effective_type(), type_name)

    def test_date_maps_to_string(self):
        """Dates are represented as opaque strings, not a native date type"""
        var = DomainVar(name="due", kind=VarType.DATE)
        assert var.effective_type() == "string"

    def test_unknown_kind_has_no_type(self):
        """Unknown kind without a relation yields an empty type"""
        assert DomainVar(name="notes").effective_type() == ""

    def test_relation_overrides_kind(self):
        """A relation reference resolves to the integer id representation"""
        whole = DomainVar(name="project", relation_whole="Project")
        other = DomainVar(name="owner", kind=VarType.STRING, relation_other="User")

        assert whole.effective_type() == "int"
        assert other.effective_type() == "int"

    def test_custom_mapper(self):
        """An explicit mapper replaces the default representation names"""
        mapper = TypeMapper({"integer": "i64", "relation": "ID"})

        assert DomainVar(name="n", kind=VarType.INTEGER).effective_type(mapper) == "i64"
        assert DomainVar(name="r", relation_other="User").effective_type(mapper) == "ID"
        assert DomainVar(name="s", kind=VarType.STRING).effective_type(mapper) == "string"


class TestIsDefault(TestCase):
    """Test cases for default expression rendering"""

    def test_expression_default(self):
        assert DomainVar(name="a", default="$CONST").is_default() == (True, "$CONST")

    def test_string_literal_default(self):
        assert DomainVar(name="a", default="#hello").is_default() == (True, '"hello"')

    def test_plain_default(self):
        assert DomainVar(name="a", default="42").is_default() == (True, "42")

    def test_empty_default(self):
        var = DomainVar(name="a")
        assert var.is_default() == (False, "")
        assert var.has_default is False

    def test_lone_marker(self):
        """A bare marker still counts as a default"""
        assert render_default("#") == (True, '""')
        assert render_default("$") == (True, "$")

    def test_no_syntax_validation(self):
        """Malformed expressions are passed through untouched"""
        assert render_default("1 +") == (True, "1 +")


class TestNaming(TestCase):
    """Test cases for DomainVar.upper_first"""

    def test_upper_first(self):
        assert DomainVar(name="createdAt").upper_first() == "CreatedAt"

    def test_single_character(self):
        assert DomainVar(name="x").upper_first() == "X"

    def test_empty_name(self):
        """Empty names degrade to an empty string"""
        assert DomainVar().upper_first() == ""


class TestRolesAndNormalization(TestCase):
    """Test cases for role flags and constructor normalization"""

    def test_role_properties(self):
        var = DomainVar(name="id", roles={Role.AUTO, Role.UPDATABLE})

        assert var.is_auto
        assert var.is_updatable
        assert not var.is_editable
        assert isinstance(var.roles, frozenset)

    def test_roles_from_strings(self):
        var = DomainVar(name="id", roles=["auto", "editable"])
        self.assertEqual(var.roles, frozenset({Role.AUTO, Role.EDITABLE}))

    def test_single_role(self):
        self.assertEqual(DomainVar(name="id", roles=Role.EDITABLE).roles, frozenset({Role.EDITABLE}))

    def test_no_roles(self):
        var = DomainVar(name="id", roles=None)
        self.assertEqual(var.roles, frozenset())

    def test_kind_from_string(self):
        self.assertIs(DomainVar(name="n", kind="float").kind, VarType.FLOAT)

    def test_relation_class_is_stored_by_name(self):
        user = DomainClass(name="User")
        var = DomainVar(name="owner", relation_whole=user, relation_other=user)

        self.assertEqual(var.relation_whole, "User")
        self.assertEqual(var.relation_other, "User")
        assert var.has_relation

    def test_relation_to_unnamed_class_is_kept(self):
        """A class with an empty name is still a relation target"""
        var = DomainVar(name="ref", relation_whole=DomainClass(name=""))

        self.assertEqual(var.relation_whole, "")
        assert var.has_relation
        self.assertEqual(var.effective_type(), "int")

    def test_unnamed_relation_is_projected(self):
        holder = DomainClass(
            name="Holder",
            arguments=[DomainVar(name="ref", relation_other=DomainClass(name=""))],
        )
        visited = []
        holder.for_each_typed(
            "all_vars", lambda var, comment, name, type_name: visited.append((name, type_name))
        )

        self.assertEqual(visited, [("ref", "int")])

    def test_no_relation(self):
        assert not DomainVar(name="plain", kind=VarType.STRING).has_relation

    def test_identity_equality(self):
        """Two descriptors with the same data are still distinct fields"""
        a = DomainVar(name="id", kind=VarType.INTEGER)
        b = DomainVar(name="id", kind=VarType.INTEGER)

        assert a == a
        assert a != b

    def test_to_dict(self):
        var = DomainVar(
            name="score",
            kind=VarType.INTEGER,
            comment="score",
            default="0",
            range=IntRange.between(0, 100),
            roles={Role.EDITABLE, Role.AUTO},
        )
        result = var.to_dict()

        self.assertEqual(result['kind'], "integer")
        self.assertEqual(result['roles'], ["auto", "editable"])
        self.assertEqual(result['range'], {'start': 0, 'end': 100, 'open_upward': False, 'open_downward': False})
        self.assertIsNone(result['relation_whole'])


class TestIntRange(TestCase):
    """Test cases for IntRange constructors"""

    def test_up(self):
        r = IntRange.up(5)
        assert r.open_upward and not r.open_downward
        self.assertEqual(r.start, 5)
        self.assertEqual(r.describe(), ">= 5")

    def test_down(self):
        r = IntRange.down(10)
        assert r.open_downward and not r.open_upward
        self.assertEqual(r.end, 10)
        self.assertEqual(r.describe(), "<= 10")

    def test_between(self):
        r = IntRange.between(1, 3)
        assert not r.open_upward and not r.open_downward
        self.assertEqual(r.describe(), "1..3")

    def test_frozen(self):
        r = IntRange.up(1)
        with self.assertRaises(FrozenInstanceError):
            r.start = 2

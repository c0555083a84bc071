"""Tests for explicitly registered type metadata."""

from typelens.reflection.builder import build_descriptor
from typelens.reflection.declared import DeclaredIntrospector, DeclaredType, TypeBuilder
from typelens.reflection.types import NoneType


class Auditable:
    def get_created_by(self) -> str:
        return "system"


class TestTypeBuilder:
    """TypeBuilder records members against the type being built."""

    def test_given_members_when_built_then_registered_in_order(self) -> None:
        # When
        tp = (
            TypeBuilder("Account")
            .getter("getBalance", int)
            .setter("setBalance", int)
            .field("owner", str, final=True)
            .constructor(factory=dict)
            .build()
        )

        # Then
        assert isinstance(tp, DeclaredType)
        assert [m.name for m in tp.methods] == ["getBalance", "setBalance"]
        assert tp.methods[1].return_type is NoneType
        assert tp.methods[1].parameter_types == (int,)
        assert all(m.declaring_type is tp for m in tp.methods)
        assert tp.fields[0].final and not tp.fields[0].static
        assert tp.constructors[0].target is dict

    def test_given_interface_when_built_then_no_supertype(self) -> None:
        tp = TypeBuilder("Named", interface=True).build()

        assert tp.is_interface
        assert tp.supertype is None

    def test_declared_types_compare_by_identity(self) -> None:
        assert TypeBuilder("Same").build() != TypeBuilder("Same").build()
        assert repr(TypeBuilder("Same").build()) == "DeclaredType('Same')"


class TestDeclaredIntrospector:
    """Declared metadata and Python classes mix in one hierarchy."""

    def test_given_declared_subclass_of_python_class_when_described_then_inherits(self) -> None:
        # Given
        tp = TypeBuilder("Order", extends=Auditable).getter("getTotal", float).build()

        # When
        descriptor = build_descriptor(tp)

        # Then
        assert set(descriptor.readable_names) == {"total", "created_by"}
        assert descriptor.getter_type("created_by") is str

    def test_given_declared_hierarchy_when_checking_assignability_then_walks_parents(
        self,
    ) -> None:
        # Given
        named = TypeBuilder("Named", interface=True).build()
        base = TypeBuilder("Base", extends=Auditable).build()
        leaf = TypeBuilder("Leaf", extends=base, implements=[named]).build()
        introspector = DeclaredIntrospector()

        # Then
        assert introspector.is_assignable(base, leaf)
        assert introspector.is_assignable(named, leaf)
        assert introspector.is_assignable(Auditable, leaf)
        assert introspector.is_assignable(object, leaf)
        assert not introspector.is_assignable(leaf, base)
        assert not introspector.is_assignable(int, leaf)

    def test_given_private_interface_method_when_listed_then_skipped(self) -> None:
        """Only public interface members are contributed."""
        iface = (
            TypeBuilder("Iface", interface=True)
            .getter("getName", str)
            .getter("getHidden", str, public=False)
            .build()
        )

        names = [m.name for m in DeclaredIntrospector().interface_methods(iface)]

        assert names == ["getName"]

    def test_given_declared_constructor_when_invoked_then_factory_called(self) -> None:
        tp = TypeBuilder("Bag").constructor(factory=dict).build()

        descriptor = build_descriptor(tp)

        assert descriptor.default_constructor().new_instance() == {}

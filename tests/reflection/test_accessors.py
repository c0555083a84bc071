"""Tests for method, field and constructor accessors."""

import pytest

from typelens.reflection.accessors import ConstructorAccessor, FieldAccessor, MethodAccessor
from typelens.reflection.errors import NotConstructibleError
from typelens.reflection.members import ConstructorInfo, FieldInfo, MethodInfo


class Thermostat:
    def __init__(self) -> None:
        self.reading = 20

    def get_reading(self) -> int:
        return self.reading

    def set_reading(self, value: int) -> None:
        self.reading = value


class CalibratedThermostat(Thermostat):
    def get_reading(self) -> int:
        return self.reading + 1


class TestMethodAccessor:
    """Method accessors dispatch on the target."""

    def test_given_subclass_instance_when_read_then_override_invoked(self) -> None:
        """The accessor calls by name, so the target's override runs."""
        # Given
        method = MethodInfo(name="get_reading", declaring_type=Thermostat, return_type=int)
        accessor = MethodAccessor(method, int)

        # Then
        assert accessor.get(Thermostat()) == 20
        assert accessor.get(CalibratedThermostat()) == 21
        assert accessor.name == "get_reading"
        assert accessor.value_type is int

    def test_given_setter_when_written_then_value_stored(self) -> None:
        method = MethodInfo(
            name="set_reading", declaring_type=Thermostat, return_type=None, parameter_types=(int,)
        )
        target = Thermostat()

        MethodAccessor(method, int).set(target, 25)

        assert target.reading == 25

    def test_given_failing_method_when_invoked_then_error_propagates(self) -> None:
        class Broken:
            def get_value(self) -> int:
                raise RuntimeError("sensor offline")

        method = MethodInfo(name="get_value", declaring_type=Broken, return_type=int)

        with pytest.raises(RuntimeError, match="sensor offline"):
            MethodAccessor(method, int).get(Broken())


class TestFieldAccessor:
    """Field accessors touch storage directly."""

    def test_given_field_when_read_and_written_then_storage_used(self) -> None:
        # Given
        field = FieldInfo(name="reading", declaring_type=Thermostat, type=int)
        accessor = FieldAccessor(field, int)
        target = CalibratedThermostat()

        # When
        accessor.set(target, 30)

        # Then
        assert accessor.get(target) == 30
        assert repr(accessor) == "FieldAccessor('reading')"


class TestConstructorAccessor:
    """Zero-argument construction."""

    def test_given_target_when_invoked_then_new_instance(self) -> None:
        accessor = ConstructorAccessor(ConstructorInfo(declaring_type=Thermostat, target=Thermostat))

        first, second = accessor.new_instance(), accessor.new_instance()

        assert isinstance(first, Thermostat)
        assert first is not second

    def test_given_no_target_when_invoked_then_not_constructible(self) -> None:
        accessor = ConstructorAccessor(ConstructorInfo(declaring_type=Thermostat))

        with pytest.raises(NotConstructibleError, match="Thermostat"):
            accessor.new_instance()

"""Unit tests for domain exceptions."""

import pytest

from wirebox.domain.exceptions import (
    BindingResolutionException,
    CircularDependencyError,
    ContainerException,
    NotInstantiable,
    describe,
)


class TestDescribe:
    """Test cases for identifier descriptions."""

    def test_describe_class_uses_qualified_name(self):
        """Test that classes are described by their qualified name."""

        class Mailer:
            pass

        assert describe(Mailer).endswith("Mailer")
        assert "<locals>" in describe(Mailer)

    def test_describe_string_is_unchanged(self):
        """Test that string identifiers are described as-is."""
        assert describe("app.Mailer") == "app.Mailer"


class TestContainerException:
    """Test cases for the base ContainerException class."""

    def test_container_exception_is_exception(self):
        """Test that ContainerException inherits from Exception."""
        assert issubclass(ContainerException, Exception)

    def test_container_exception_can_be_raised(self):
        """Test that ContainerException can be raised with a message."""
        with pytest.raises(ContainerException, match="Test error"):
            raise ContainerException("Test error")


class TestBindingResolutionException:
    """Test cases for BindingResolutionException."""

    def test_inherits_from_container_exception(self):
        assert issubclass(BindingResolutionException, ContainerException)

    def test_message(self):
        error = BindingResolutionException("Unresolvable dependency resolving [name] in class Widget")
        assert str(error) == "Unresolvable dependency resolving [name] in class Widget"


class TestNotInstantiable:
    """Test cases for NotInstantiable."""

    def test_is_binding_resolution_exception(self):
        """Test that NotInstantiable can be caught as a resolution failure."""
        assert issubclass(NotInstantiable, BindingResolutionException)

    def test_message_without_build_stack(self):
        """Test the plain message when nothing is being built."""
        error = NotInstantiable("app.Logger")

        assert error.target == "app.Logger"
        assert error.build_stack == []
        assert str(error) == "Target [app.Logger] is not instantiable."

    def test_message_with_build_stack(self):
        """Test that the message lists the chain of types being built."""
        error = NotInstantiable("Logger", ["A", "B", "C"])

        assert error.build_stack == ["A", "B", "C"]
        assert str(error) == "Target [Logger] is not instantiable while building [A, B, C]."

    def test_build_stack_is_copied(self):
        """Test that later changes to the source stack do not affect the error."""
        stack = ["A"]
        error = NotInstantiable("Logger", stack)
        stack.append("B")

        assert error.build_stack == ["A"]


class TestCircularDependencyError:
    """Test cases for CircularDependencyError."""

    def test_is_binding_resolution_exception(self):
        assert issubclass(CircularDependencyError, BindingResolutionException)

    def test_message_lists_chain(self):
        """Test CircularDependencyError with a simple chain."""

        class ServiceA:
            pass

        class ServiceB:
            pass

        error = CircularDependencyError([ServiceA, ServiceB, ServiceA])

        assert error.chain == [ServiceA, ServiceB, ServiceA]
        assert "ServiceA -> " in str(error)
        assert str(error).startswith("Circular dependency detected: ")

    def test_message_with_string_identifiers(self):
        error = CircularDependencyError(["a", "b", "a"])
        assert str(error) == "Circular dependency detected: a -> b -> a"

"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from wirebox.domain import Alias, Binding, ContainerConfig, Factory, ParameterInfo


class TestContainerConfig:
    """Test cases for ContainerConfig."""

    def test_defaults(self):
        config = ContainerConfig()
        assert config.namespace_separators == "\\"
        assert config.detect_cycles is True

    def test_custom_values(self):
        config = ContainerConfig(namespace_separators="\\.", detect_cycles=False)
        assert config.namespace_separators == "\\."
        assert config.detect_cycles is False

    def test_config_is_frozen(self):
        """Test that configuration cannot be changed after creation."""
        config = ContainerConfig()
        with pytest.raises(ValidationError):
            config.detect_cycles = False


class TestFactory:
    """Test cases for the Factory strategy."""

    def test_factory_is_called_with_container_and_parameters(self):
        """Test that calling a Factory forwards both arguments."""
        calls = []

        def build(container, parameters):
            calls.append((container, parameters))
            return "built"

        factory = Factory(factory=build)
        container = object()

        assert factory(container, {"name": "gear"}) == "built"
        assert calls == [(container, {"name": "gear"})]

    def test_factory_requires_callable(self):
        with pytest.raises(ValidationError):
            Factory(factory=42)


class TestAlias:
    """Test cases for the Alias strategy."""

    def test_alias_accepts_class_target(self):
        class Mailer:
            pass

        assert Alias(target=Mailer).target is Mailer

    def test_alias_accepts_string_target(self):
        assert Alias(target="app.Mailer").target == "app.Mailer"

    def test_aliases_compare_by_target(self):
        assert Alias(target="a") == Alias(target="a")
        assert Alias(target="a") != Alias(target="b")


class TestBinding:
    """Test cases for Binding."""

    def test_binding_defaults_to_not_singleton(self):
        binding = Binding(abstract="mailer", strategy=Alias(target="app.Mailer"))
        assert binding.singleton is False

    def test_binding_keeps_strategy_instance(self):
        """Test that the strategy passed in is stored unchanged."""
        factory = Factory(factory=lambda c, p: None)
        binding = Binding(abstract="clock", strategy=factory, singleton=True)

        assert binding.strategy is factory
        assert binding.singleton is True

    def test_binding_is_frozen(self):
        binding = Binding(abstract="mailer", strategy=Alias(target="mailer"))
        with pytest.raises(ValidationError):
            binding.singleton = True


class TestParameterInfo:
    """Test cases for ParameterInfo."""

    def test_defaults(self):
        info = ParameterInfo(name="name", position=0)
        assert info.annotation is None
        assert info.has_default is False
        assert info.default is None
        assert info.positional_only is False

    def test_default_value_may_be_none(self):
        """Test that a None default is distinguishable from no default."""
        info = ParameterInfo(name="logger", position=1, has_default=True, default=None)
        assert info.has_default is True
        assert info.default is None

"""
Domain layer - Core models and rules.

This layer contains bindings, construction strategies, configuration and errors.
It has no dependencies on other layers.
"""

from .exceptions import (
    BindingResolutionException,
    CircularDependencyError,
    ContainerException,
    NotInstantiable,
)
from .interfaces import IContainer, ITypeIntrospector
from .models import (
    Alias,
    Binding,
    ConstructionStrategy,
    ContainerConfig,
    Factory,
    Identifier,
    ParameterInfo,
    Parameters,
)

__all__ = [
    # Exceptions
    "ContainerException",
    "BindingResolutionException",
    "NotInstantiable",
    "CircularDependencyError",
    # Interfaces
    "IContainer",
    "ITypeIntrospector",
    # Models
    "Alias",
    "Binding",
    "ConstructionStrategy",
    "ContainerConfig",
    "Factory",
    "Identifier",
    "ParameterInfo",
    "Parameters",
]

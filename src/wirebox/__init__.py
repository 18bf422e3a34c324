"""
wirebox: Inversion-of-control container with constructor auto-wiring.

Public API exports for the wirebox package.
"""

# Application exports
from wirebox.application.container import Container

# Domain exports
from wirebox.domain.exceptions import (
    BindingResolutionException,
    CircularDependencyError,
    ContainerException,
    NotInstantiable,
)
from wirebox.domain.models import Alias, ContainerConfig, Factory

__version__ = "0.1.0"

__all__ = [
    # Container
    "Container",
    "ContainerConfig",
    # Strategies
    "Alias",
    "Factory",
    # Exceptions
    "ContainerException",
    "BindingResolutionException",
    "NotInstantiable",
    "CircularDependencyError",
]

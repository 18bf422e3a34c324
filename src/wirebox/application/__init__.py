"""
Application layer - Registration and resolution.

This layer contains the registry, caches and resolution logic.
It depends only on the Domain layer.
"""

from .build_stack import BuildStack
from .container import Container
from .instance_cache import InstanceCache
from .introspector import SignatureIntrospector
from .registry import BindingRegistry
from .resolver import DependencyResolver, key_parameters_by_argument

__all__ = [
    "Container",
    "BindingRegistry",
    "InstanceCache",
    "BuildStack",
    "DependencyResolver",
    "SignatureIntrospector",
    "key_parameters_by_argument",
]

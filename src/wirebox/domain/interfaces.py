from abc import ABC, abstractmethod
from typing import Any, List, Optional

from wirebox.domain.models import Identifier, ParameterInfo, Parameters


class IContainer(ABC):
    """Abstract interface for container operations."""

    @abstractmethod
    def bind(self, abstract: Identifier, concrete: Any = None, singleton: bool = False) -> None:
        """Register a construction strategy for an abstract identifier.

        Args:
            abstract: The identifier to bind.
            concrete: A class or identifier to alias, or a factory callable.
            singleton: Whether the built instance is cached and reused.
        """

    @abstractmethod
    def singleton(self, abstract: Identifier, concrete: Any = None) -> None:
        """Register a shared binding.

        Args:
            abstract: The identifier to bind.
            concrete: A class or identifier to alias, or a factory callable.
        """

    @abstractmethod
    def make(self, abstract: Identifier, parameters: Optional[Parameters] = None) -> Any:
        """Resolve an identifier into an instance.

        Args:
            abstract: The identifier to resolve.
            parameters: Constructor overrides keyed by parameter name or position.
        """

    @abstractmethod
    def unbind(self, abstract: Identifier) -> None:
        """Remove the binding and cached instance for an identifier."""

    @abstractmethod
    def has_binding(self, abstract: Identifier) -> bool:
        """Check whether a binding exists for an identifier."""

    @abstractmethod
    def bound(self, abstract: Identifier) -> bool:
        """Check whether an identifier has a binding or a cached instance."""


class ITypeIntrospector(ABC):
    """Abstract interface reporting constructor metadata for constructible types."""

    @abstractmethod
    def load(self, identifier: Identifier) -> Any:
        """Return the class an identifier refers to.

        Raises:
            BindingResolutionException: If the identifier does not name a class.
        """

    @abstractmethod
    def is_instantiable(self, target: Any) -> bool:
        """Check whether the target can be constructed."""

    @abstractmethod
    def has_constructor(self, target: type) -> bool:
        """Check whether the target declares its own constructor."""

    @abstractmethod
    def parameters(self, target: type) -> List[ParameterInfo]:
        """List the constructor parameters of the target in declaration order."""

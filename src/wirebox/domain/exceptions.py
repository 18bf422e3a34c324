from typing import Any, List, Optional, Sequence


def describe(identifier: Any) -> str:
    """Return a readable name for an identifier (class or string key)."""
    if isinstance(identifier, type):
        return identifier.__qualname__
    return str(identifier)


class ContainerException(Exception):
    """Base exception for container errors."""


class BindingResolutionException(ContainerException):
    """Raised when a dependency cannot be resolved.

    This occurs when:
    - A required constructor parameter has no binding, no resolvable type and no default.
    - A string identifier names a class that cannot be imported.
    - Constructor type hints cannot be evaluated.
    """


class NotInstantiable(BindingResolutionException):
    """Raised when a target type cannot be constructed.

    Abstract base classes, protocols and non-class objects are not instantiable.

    Attributes:
        target: The identifier that could not be constructed.
        build_stack: Identifiers that were under construction when the failure occurred.
    """

    def __init__(self, target: Any, build_stack: Optional[Sequence[Any]] = None) -> None:
        self.target = target
        self.build_stack: List[Any] = list(build_stack or [])
        if self.build_stack:
            chain = ", ".join(describe(item) for item in self.build_stack)
            message = f"Target [{describe(target)}] is not instantiable while building [{chain}]."
        else:
            message = f"Target [{describe(target)}] is not instantiable."
        super().__init__(message)


class CircularDependencyError(BindingResolutionException):
    """Raised when a type is reached again while it is still being built.

    Attributes:
        chain: Identifiers forming the cycle, first and last being the same.
    """

    def __init__(self, chain: Sequence[Any]) -> None:
        self.chain: List[Any] = list(chain)
        message = f"Circular dependency detected: {' -> '.join(describe(item) for item in self.chain)}"
        super().__init__(message)

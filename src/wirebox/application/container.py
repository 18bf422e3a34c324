import inspect
import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

from wirebox.application.build_stack import BuildStack
from wirebox.application.instance_cache import InstanceCache
from wirebox.application.introspector import SignatureIntrospector
from wirebox.application.registry import BindingRegistry
from wirebox.application.resolver import DependencyResolver
from wirebox.domain import (
    Alias,
    Binding,
    CircularDependencyError,
    ConstructionStrategy,
    ContainerConfig,
    Factory,
    IContainer,
    Identifier,
    ITypeIntrospector,
    Parameters,
)

logger = logging.getLogger(__name__)


class Container(IContainer):
    """Inversion-of-control container.

    Maps abstract identifiers (classes or string keys) to construction
    strategies and builds fully wired instances on demand. Unbound classes
    are built directly by constructor injection.

    Item access and attribute access are shortcuts for the same operations:

        >>> container["mailer"] = lambda c, p: Mailer()   # bind a factory
        >>> container["settings"] = {"debug": True}        # bind a shared value
        >>> container["mailer"]                            # make
        >>> container.settings                             # make
        >>> del container["mailer"]                        # unbind

    Attribute assignment cannot bind names that are attributes of the class,
    such as ``config`` or ``bind``; use item access for those.

    Attributes:
        _config: Container configuration.
        _registry: Bindings keyed by normalized identifier.
        _instances: Cached singleton instances.
        _build_stack: Types currently under construction, per thread.
        _resolver: Component performing constructor injection.
        _lock: Serializes whole resolutions, so a singleton is built at most once.
        _depth: Nesting level of make calls in the thread holding the lock.
        _written: Identifiers cached during the current top-level make.
    """

    def __init__(
        self,
        config: Optional[ContainerConfig] = None,
        introspector: Optional[ITypeIntrospector] = None,
    ) -> None:
        """Initialize the container with empty bindings and cache.

        Args:
            config: Container configuration; defaults apply when omitted.
            introspector: Source of constructor metadata; inspects signatures when omitted.
        """
        self._config = config or ContainerConfig()
        self._registry = BindingRegistry()
        self._instances = InstanceCache()
        self._build_stack = BuildStack(detect_cycles=self._config.detect_cycles)
        self._resolver = DependencyResolver(introspector or SignatureIntrospector(), self._build_stack)
        self._lock = threading.RLock()
        self._depth = 0
        self._written: List[Identifier] = []

    @property
    def config(self) -> ContainerConfig:
        return self._config

    def _normalize(self, abstract: Identifier) -> Identifier:
        if isinstance(abstract, str):
            return abstract.lstrip(self._config.namespace_separators)
        return abstract

    def _to_strategy(self, concrete: Any) -> ConstructionStrategy:
        if isinstance(concrete, (Factory, Alias)):
            return concrete
        if inspect.isclass(concrete) or isinstance(concrete, str):
            return Alias(target=self._normalize(concrete))
        if callable(concrete):
            return Factory(factory=concrete)
        raise TypeError(
            f"Concrete must be a class, an identifier string or a factory callable, got {type(concrete).__name__}"
        )

    def bind(self, abstract: Identifier, concrete: Any = None, singleton: bool = False) -> None:
        """Register a construction strategy for an identifier.

        Rebinding replaces the previous binding but does not evict an instance
        that is already cached for the identifier.

        Args:
            abstract: The identifier to bind.
            concrete: A class or identifier string to alias, a factory callable
                receiving ``(container, parameters)``, or None to build
                ``abstract`` itself.
            singleton: Whether the first built instance is cached and reused.

        Raises:
            TypeError: If ``concrete`` is not a class, string or callable.

        Example:
            >>> container.bind(Repository, SqlRepository)
            >>> container.bind("clock", lambda c, p: SystemClock())
            >>> container.bind(Settings, singleton=True)
        """
        abstract = self._normalize(abstract)
        strategy = self._to_strategy(abstract if concrete is None else concrete)
        self._registry.bind(Binding(abstract=abstract, strategy=strategy, singleton=singleton))

    def singleton(self, abstract: Identifier, concrete: Any = None) -> None:
        """Register a binding whose instance is built once and shared."""
        self.bind(abstract, concrete, singleton=True)

    def instance(self, abstract: Identifier, instance: Any) -> None:
        """Register an existing object as the shared instance of an identifier.

        The identifier counts as singleton because it is cached.

        Args:
            abstract: The identifier to register.
            instance: The object every ``make`` call will return.
        """
        abstract = self._normalize(abstract)
        self._instances.store(abstract, instance)
        logger.debug("Registered instance for %r", abstract)

    def unbind(self, abstract: Identifier) -> None:
        """Remove the binding and cached instance for an identifier.

        Unbinding an identifier that is not registered is a no-op.
        """
        abstract = self._normalize(abstract)
        self._registry.unbind(abstract)
        self._instances.remove(abstract)
        logger.debug("Unbound %r", abstract)

    def has_binding(self, abstract: Identifier) -> bool:
        return self._registry.has_binding(self._normalize(abstract))

    def bound(self, abstract: Identifier) -> bool:
        abstract = self._normalize(abstract)
        return self._registry.has_binding(abstract) or self._instances.contains(abstract)

    def is_singleton(self, abstract: Identifier) -> bool:
        """Check whether an identifier is shared.

        An identifier is singleton when an instance is cached for it, or when
        its binding is marked singleton.
        """
        abstract = self._normalize(abstract)
        if self._instances.contains(abstract):
            return True
        binding = self._registry.get(abstract)
        return binding is not None and binding.singleton

    def get_concrete(self, abstract: Identifier) -> ConstructionStrategy:
        """Return the bound strategy, or an alias to the identifier itself when unbound."""
        return self._registry.get_concrete(self._normalize(abstract))

    def get_bindings(self) -> Dict[Identifier, Binding]:
        """Get a copy of the current bindings."""
        return self._registry.copy()

    def make(self, abstract: Identifier, parameters: Optional[Parameters] = None) -> Any:
        """Resolve an identifier into an instance.

        A cached instance is returned as-is. Otherwise the bound strategy is
        followed: factories and direct classes are built, aliases are resolved
        recursively. The result is cached when the identifier is singleton.

        Whole resolutions are serialized, so concurrent calls build a
        singleton once. If the outermost call fails, every instance it cached
        along the way is discarded.

        Args:
            abstract: The identifier to resolve.
            parameters: Constructor overrides keyed by parameter name or
                position, applied to this call only.

        Returns:
            The resolved instance.

        Raises:
            NotInstantiable: If the target type cannot be constructed.
            BindingResolutionException: If a required dependency cannot be resolved.
            CircularDependencyError: If a type or an alias chain leads back to itself.

        Example:
            >>> container.bind(Repository, SqlRepository)
            >>> service = container.make(UserService)
            >>> widget = container.make(Widget, {"name": "gear"})
        """
        with self._lock:
            outermost = self._depth == 0
            self._depth += 1
            try:
                return self._make(self._normalize(abstract), parameters, ())
            except Exception:
                if outermost:
                    for written in self._written:
                        self._instances.remove(written)
                    logger.debug("Discarded %d instances cached by failed make", len(self._written))
                raise
            finally:
                self._depth -= 1
                if outermost:
                    self._written.clear()

    def _make(self, abstract: Identifier, parameters: Optional[Parameters], aliases: Tuple[Identifier, ...]) -> Any:
        if self._instances.contains(abstract):
            logger.debug("Returning cached instance for %r", abstract)
            return self._instances.get(abstract)

        concrete = self._registry.get_concrete(abstract)

        if isinstance(concrete, Factory):
            instance = self.build(concrete, parameters)
        else:
            target = self._normalize(concrete.target)
            if target == abstract:
                instance = self.build(Alias(target=target), parameters)
            else:
                chain = aliases + (abstract,)
                if target in chain:
                    raise CircularDependencyError(list(chain[chain.index(target) :]) + [target])
                instance = self._make(target, parameters, chain)

        if self.is_singleton(abstract):
            self._instances.store(abstract, instance)
            self._written.append(abstract)

        return instance

    def build(self, concrete: Any, parameters: Optional[Parameters] = None) -> Any:
        """Construct an instance from a strategy, a factory or a class.

        Factories are called with ``(container, parameters)`` and their result
        is returned verbatim. Classes are built by constructor injection.
        Nothing is cached.

        Args:
            concrete: A Factory, an Alias, a factory callable, a class or a class import path.
            parameters: Constructor overrides keyed by parameter name or position.

        Returns:
            The new instance.
        """
        strategy = self._to_strategy(concrete)
        parameters = dict(parameters or {})

        if isinstance(strategy, Factory):
            logger.debug("Calling factory %r", strategy.factory)
            return strategy(self, parameters)

        return self._resolver.resolve_dependencies(strategy.target, self, parameters)

    def __contains__(self, key: Identifier) -> bool:
        return self.has_binding(key)

    def __getitem__(self, key: Identifier) -> Any:
        return self.make(key)

    def __setitem__(self, key: Identifier, value: Any) -> None:
        """Bind a factory, or share a plain value.

        Callables other than classes are bound as factories. Any other value,
        classes included, is bound as a singleton that returns that exact value.
        """
        if callable(value) and not inspect.isclass(value):
            self.bind(key, value)
        else:
            self.bind(key, lambda container, parameters: value, singleton=True)

    def __delitem__(self, key: Identifier) -> None:
        self.unbind(key)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            super().__setattr__(name, value)
        elif hasattr(type(self), name):
            raise AttributeError(
                f"Cannot bind '{name}' by attribute, it is a {type(self).__name__} attribute; use container['{name}']"
            )
        else:
            self[name] = value

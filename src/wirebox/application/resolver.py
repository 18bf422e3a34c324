import inspect
import logging
from typing import Any, Dict, List, Optional, Sequence

from wirebox.application.build_stack import BuildStack
from wirebox.domain import (
    BindingResolutionException,
    IContainer,
    Identifier,
    ITypeIntrospector,
    NotInstantiable,
    ParameterInfo,
    Parameters,
)
from wirebox.domain.exceptions import describe

logger = logging.getLogger(__name__)


def key_parameters_by_argument(
    declared: Sequence[ParameterInfo], parameters: Optional[Parameters]
) -> Dict[Any, Any]:
    """Re-key positional overrides to the name of the parameter at that position.

    Integer keys with no parameter at that position are kept unchanged.

    Example:
        >>> key_parameters_by_argument(widget_params, {0: "gear"})
        {'name': 'gear'}
    """
    names_by_position = {param.position: param.name for param in declared}
    keyed: Dict[Any, Any] = {}
    for key, value in (parameters or {}).items():
        if isinstance(key, int) and not isinstance(key, bool) and key in names_by_position:
            keyed[names_by_position[key]] = value
        else:
            keyed[key] = value
    return keyed


class DependencyResolver:
    """Builds classes by constructor introspection and automatic injection.

    Constructor parameters are filled from caller overrides first, then by
    resolving their declared types through the container, then from their
    default values.

    Attributes:
        _introspector: Source of constructor metadata.
        _build_stack: Chain of types currently under construction.
    """

    def __init__(self, introspector: ITypeIntrospector, build_stack: BuildStack) -> None:
        self._introspector = introspector
        self._build_stack = build_stack

    def resolve_dependencies(
        self,
        concrete: Identifier,
        container: IContainer,
        parameters: Optional[Parameters] = None,
    ) -> Any:
        """Construct a class with all constructor dependencies injected.

        Args:
            concrete: The class, or import path of the class, to build.
            container: The container to resolve dependencies from.
            parameters: Overrides keyed by parameter name or position.

        Returns:
            The new instance.

        Raises:
            NotInstantiable: If the target is abstract, a protocol or not a class.
            BindingResolutionException: If a required dependency cannot be resolved.

        Example:
            >>> class UserService:
            ...     def __init__(self, db: DatabaseConnection, retries: int = 3):
            ...         self.db = db
            ...         self.retries = retries
            >>>
            >>> service = resolver.resolve_dependencies(UserService, container, {"retries": 5})
        """
        target = self._introspector.load(concrete)

        if not self._introspector.is_instantiable(target):
            raise NotInstantiable(concrete, self._build_stack.snapshot())

        self._build_stack.push(target)

        if not self._introspector.has_constructor(target):
            self._build_stack.pop()
            return target()

        try:
            declared = self._introspector.parameters(target)
            overrides = key_parameters_by_argument(declared, parameters)
            args: List[Any] = []
            kwargs: Dict[str, Any] = {}
            for param in declared:
                if param.name in overrides:
                    value = overrides[param.name]
                else:
                    value = self._resolve_parameter(target, param, container)

                if param.positional_only:
                    args.append(value)
                else:
                    kwargs[param.name] = value
        finally:
            self._build_stack.pop()

        logger.debug("Building %s with %s", describe(target), sorted(kwargs))
        return target(*args, **kwargs)

    def _resolve_parameter(self, target: type, param: ParameterInfo, container: IContainer) -> Any:
        if self._is_resolvable(param.annotation, container):
            try:
                return container.make(param.annotation)
            except BindingResolutionException as e:
                if not param.has_default:
                    raise
                logger.debug(
                    "Using default for parameter '%s' of %s: %s", param.name, describe(target), e
                )
                return param.default

        if param.has_default:
            return param.default

        raise BindingResolutionException(
            f"Unresolvable dependency resolving [{param.name}] in class {describe(target)}"
        )

    @staticmethod
    def _is_resolvable(annotation: Any, container: IContainer) -> bool:
        """Builtin and non-class annotations resolve only when explicitly bound."""
        if annotation is None:
            return False
        if container.bound(annotation):
            return True
        return inspect.isclass(annotation) and annotation.__module__ != "builtins"

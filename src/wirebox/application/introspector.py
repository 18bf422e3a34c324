import importlib
import inspect
import types
from typing import Any, List, Union, get_args, get_origin, get_type_hints

from wirebox.domain import BindingResolutionException, Identifier, ITypeIntrospector, ParameterInfo


def _unwrap_optional(annotation: Any) -> Any:
    """Reduce ``Optional[X]`` and ``X | None`` to ``X``."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


class SignatureIntrospector(ITypeIntrospector):
    """Reports constructor metadata using ``inspect`` and type hints.

    String identifiers are treated as import paths, either dotted
    (``"app.services.Mailer"``) or with a colon before the attribute
    (``"app.services:Mailer"``).
    """

    def load(self, identifier: Identifier) -> Any:
        """Return the class an identifier refers to.

        Args:
            identifier: A class, or a string import path.

        Returns:
            The class itself, the imported attribute for strings, or the
            identifier unchanged for anything else.

        Raises:
            BindingResolutionException: If a string identifier cannot be imported.
        """
        if not isinstance(identifier, str):
            return identifier

        if ":" in identifier:
            module_name, _, attribute_path = identifier.partition(":")
        else:
            module_name, _, attribute_path = identifier.rpartition(".")

        if not module_name or not attribute_path:
            raise BindingResolutionException(f"Target class [{identifier}] does not exist.")

        try:
            target: Any = importlib.import_module(module_name)
            for attribute in attribute_path.split("."):
                target = getattr(target, attribute)
        except (ImportError, AttributeError) as e:
            raise BindingResolutionException(f"Target class [{identifier}] does not exist.") from e

        return target

    def is_instantiable(self, target: Any) -> bool:
        if not inspect.isclass(target):
            return False
        if inspect.isabstract(target):
            return False
        return not getattr(target, "_is_protocol", False)

    def has_constructor(self, target: type) -> bool:
        return target.__init__ is not object.__init__

    def parameters(self, target: type) -> List[ParameterInfo]:
        """List constructor parameters in declaration order.

        ``self``, ``*args`` and ``**kwargs`` are skipped and do not take a position.

        Args:
            target: The class to inspect.

        Returns:
            Parameter metadata with ``Optional`` annotations unwrapped.

        Raises:
            BindingResolutionException: If the signature or type hints cannot be read.
        """
        try:
            signature = inspect.signature(target.__init__)
            type_hints = get_type_hints(target.__init__)
        except (NameError, TypeError, ValueError) as e:
            raise BindingResolutionException(
                f"Cannot inspect constructor of [{target.__qualname__}]: {e}"
            ) from e

        parameters: List[ParameterInfo] = []
        for param_name, param in signature.parameters.items():
            if param_name == "self":
                continue
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            annotation = type_hints.get(param_name)
            has_default = param.default is not inspect.Parameter.empty
            parameters.append(
                ParameterInfo(
                    name=param_name,
                    position=len(parameters),
                    annotation=_unwrap_optional(annotation) if annotation is not None else None,
                    has_default=has_default,
                    default=param.default if has_default else None,
                    positional_only=param.kind is inspect.Parameter.POSITIONAL_ONLY,
                )
            )

        return parameters

from typing import Any, Callable, Hashable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Identifier = Hashable
Parameters = Mapping[Union[str, int], Any]


class ContainerConfig(BaseModel):
    """Container configuration.

    Attributes:
        namespace_separators: Characters stripped from the start of string identifiers.
        detect_cycles: Raise CircularDependencyError when a type is reached while
            it is still being built.
    """

    model_config = ConfigDict(frozen=True)

    namespace_separators: str = Field(
        default="\\",
        description="Characters stripped from the start of string identifiers.",
    )
    detect_cycles: bool = Field(
        default=True,
        description="Whether re-entering a type under construction raises an error.",
    )


class Factory(BaseModel):
    """Construction strategy that delegates to a callable.

    The callable receives ``(container, parameters)`` and its result is
    returned verbatim; no further injection is attempted.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    factory: Callable[..., Any] = Field(
        ..., description="Callable producing the instance."
    )

    def __call__(self, container: Any, parameters: Parameters) -> Any:
        return self.factory(container, parameters)


class Alias(BaseModel):
    """Construction strategy that points at another identifier.

    An alias whose target equals the abstract it is bound under means
    "construct the target directly".
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    target: Any = Field(..., description="Identifier to resolve instead.")


ConstructionStrategy = Union[Factory, Alias]


class Binding(BaseModel):
    """Value object representing a registered binding.

    Attributes:
        abstract: Normalized identifier the binding is keyed by.
        strategy: How to produce the instance.
        singleton: Whether the first built instance is cached and reused.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    abstract: Any = Field(..., description="The normalized abstract identifier.")
    strategy: ConstructionStrategy = Field(..., description="The construction strategy.")
    singleton: bool = Field(default=False, description="Whether the instance is shared.")


class ParameterInfo(BaseModel):
    """Constructor parameter metadata reported by a type introspector.

    Attributes:
        name: Parameter name.
        position: Zero-based position in the constructor signature, ``self`` excluded.
        annotation: Declared type, or None when the parameter is unannotated.
        has_default: Whether the parameter declares a default value.
        default: The default value when ``has_default`` is true.
        positional_only: Whether the parameter can only be passed positionally.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    position: int
    annotation: Optional[Any] = None
    has_default: bool = False
    default: Any = None
    positional_only: bool = False

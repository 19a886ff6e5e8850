import inspect
from typing import Any, List, Type

from pydantic import BaseModel, ConfigDict, Field


class FactoryEntry(BaseModel):
    """Value object pairing a result type with the method that produces it.

    Attributes:
        result_type: The bean type this factory produces.
        factory_name: Attribute name of the method on the configuration source.
        factory: The raw class attribute (function or static/class method).
        owner: The class in the MRO that declared the method.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    result_type: Any = Field(..., description="The bean type produced by the factory.")
    factory_name: str = Field(..., description="Name of the factory method.")
    factory: Any = Field(..., description="The unbound factory attribute.")
    owner: Type = Field(..., description="The class declaring the factory method.")

    def invoke(self, config_instance: Any) -> Any:
        """Call the factory through the configuration source instance.

        Attribute lookup on the instance lets an unmarked subclass override
        replace the marked base implementation.
        """
        return getattr(config_instance, self.factory_name)()


class ParameterDescriptor(BaseModel):
    """A single injectable constructor parameter."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    dependency_type: Any
    kind: inspect._ParameterKind
    default: Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty


class ConstructorDescriptor(BaseModel):
    """Transient description of one constructor of a target type.

    Attributes:
        owner: The type being constructed.
        name: ``__init__`` or the name of an alternative-constructor classmethod.
        autowired: Whether the constructor carries the @autowired marker.
        parameters: Injectable parameters, in declaration order.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    owner: Type = Field(..., description="The type being constructed.")
    name: str = Field(..., description="Constructor name.")
    autowired: bool = Field(default=False, description="Whether @autowired is present.")
    parameters: List[ParameterDescriptor] = Field(default_factory=list)

    @property
    def parameter_types(self) -> List[Type]:
        return [parameter.dependency_type for parameter in self.parameters]

    @property
    def is_init(self) -> bool:
        return self.name == "__init__"

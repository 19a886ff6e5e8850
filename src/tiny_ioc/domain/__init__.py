"""
Domain layer - Core types for bean registration and autowiring.

This layer contains the markers, value objects and errors shared by the container.
It has no dependencies on other layers.
"""

from .enums import ABSENT, Absent, ContainerState, Lifetime, MissingDependencyPolicy
from .exceptions import (
    AmbiguousAutowireError,
    BeanNotFoundError,
    ConstructionError,
    ContainerNotReadyError,
    InitializationError,
    IoCException,
    MissingDependencyError,
)
from .interfaces import IBeanRegistry, IContainer, IResolver, ISingletonCache
from .markers import autowired, bean, is_autowired, is_bean, provided_type
from .models import ConstructorDescriptor, FactoryEntry, ParameterDescriptor

__all__ = [
    # Enums
    "ABSENT",
    "Absent",
    "ContainerState",
    "Lifetime",
    "MissingDependencyPolicy",
    # Exceptions
    "IoCException",
    "InitializationError",
    "ContainerNotReadyError",
    "ConstructionError",
    "AmbiguousAutowireError",
    "BeanNotFoundError",
    "MissingDependencyError",
    # Interfaces
    "IBeanRegistry",
    "IContainer",
    "IResolver",
    "ISingletonCache",
    # Markers
    "bean",
    "autowired",
    "is_bean",
    "is_autowired",
    "provided_type",
    # Models
    "FactoryEntry",
    "ConstructorDescriptor",
    "ParameterDescriptor",
]

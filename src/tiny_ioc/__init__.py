"""
tiny-ioc: Minimal inversion-of-control container with @bean factories and constructor autowiring.

Public API exports for the tiny-ioc package.
"""

# Application exports
from tiny_ioc.application.container import IoCContainer
from tiny_ioc.application.settings import ContainerSettings

# Domain exports
from tiny_ioc.domain.enums import ABSENT, Absent, ContainerState, Lifetime, MissingDependencyPolicy
from tiny_ioc.domain.exceptions import (
    AmbiguousAutowireError,
    BeanNotFoundError,
    ConstructionError,
    ContainerNotReadyError,
    InitializationError,
    IoCException,
    MissingDependencyError,
)
from tiny_ioc.domain.markers import autowired, bean

__version__ = "0.1.0"

__all__ = [
    # Container
    "IoCContainer",
    "ContainerSettings",
    # Markers
    "bean",
    "autowired",
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
]

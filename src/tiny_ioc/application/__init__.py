"""
Application layer - Registration and resolution.

This layer contains the registry, the resolver and the container facade.
It depends only on the Domain layer.
"""

from .container import IoCContainer
from .registry import BeanRegistry, load_config_source
from .resolver import ConstructorResolver
from .settings import ContainerSettings
from .singleton_cache import SingletonCache

__all__ = [
    "IoCContainer",
    "BeanRegistry",
    "ConstructorResolver",
    "ContainerSettings",
    "SingletonCache",
    "load_config_source",
]

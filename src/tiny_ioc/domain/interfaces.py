from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Type, TypeVar, Union

from tiny_ioc.domain.enums import Absent, ContainerState, Lifetime
from tiny_ioc.domain.models import ConstructorDescriptor, FactoryEntry

T = TypeVar("T")


class ISingletonCache(ABC):
    """Abstract interface for the per-type singleton cache."""

    @abstractmethod
    def get_or_create(self, dependency_type: Type, factory: Callable[[], Any]) -> Any:
        """Return the cached instance for a type, creating and caching it if needed.

        Args:
            dependency_type: The cache key.
            factory: Called once to produce the instance on a miss.
        """

    @abstractmethod
    def contains(self, dependency_type: Type) -> bool:
        """Whether an instance is cached for the type."""

    @abstractmethod
    def cached_types(self) -> List[Type]:
        """Types currently cached."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every cached instance."""


class IBeanRegistry(ABC):
    """Abstract interface for factory discovery and factory-backed singletons."""

    @property
    @abstractmethod
    def state(self) -> ContainerState:
        """Current lifecycle state."""

    @abstractmethod
    def init(self) -> None:
        """Scan the configuration source and build the factory mapping.

        Raises:
            InitializationError: If the configuration source cannot be loaded.
        """

    @abstractmethod
    def get_bean(self, dependency_type: Type[T]) -> Union[T, Absent]:
        """Return the singleton for a type, or ABSENT if no factory exists.

        Raises:
            ContainerNotReadyError: If init() has not completed.
            ConstructionError: If the factory raises.
        """

    @abstractmethod
    def has_factory(self, dependency_type: Type) -> bool:
        """Whether a factory is registered for the type."""

    @abstractmethod
    def factory_entries(self) -> Dict[Any, FactoryEntry]:
        """Copy of the factory mapping."""


class IResolver(ABC):
    """Abstract interface for constructor-based instance creation."""

    @abstractmethod
    def describe_constructors(self, target_type: Type) -> List[ConstructorDescriptor]:
        """List the constructors of a type that take part in selection."""

    @abstractmethod
    def create(self, target_type: Type[T], registry: IBeanRegistry) -> T:
        """Build a new instance, autowiring from the registry where marked.

        Raises:
            ConstructionError: If no usable constructor exists or it raises.
        """


class IContainer(ABC):
    """Abstract interface for the container facade."""

    @abstractmethod
    def init(self) -> None:
        """Initialize the container; must run before any resolution call."""

    @abstractmethod
    def get_bean(self, dependency_type: Type[T]) -> Union[T, Absent]:
        """Return a factory-backed singleton or ABSENT."""

    @abstractmethod
    def create(self, target_type: Type[T]) -> T:
        """Build a new, uncached instance."""

    @abstractmethod
    def resolve(self, dependency_type: Type[T]) -> T:
        """Return a singleton for factory-backed types, otherwise a new instance."""

    @abstractmethod
    def lifetime_of(self, dependency_type: Type) -> Lifetime:
        """Lifetime the container applies to the type."""

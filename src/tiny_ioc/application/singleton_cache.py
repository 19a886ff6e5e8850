import logging
import threading
from typing import Any, Callable, Dict, List, Type

from tiny_ioc.domain import ConstructionError, IoCException, ISingletonCache

logger = logging.getLogger(__name__)


class SingletonCache(ISingletonCache):
    """Caches factory-produced instances, one per type.

    A factory runs at most once per type between two clear() calls, even when
    several threads miss the cache at the same time.

    Attributes:
        _instances: Cached instances keyed by type.
        _lock: Guards the check-create-store sequence.
    """

    def __init__(self) -> None:
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    def get_or_create(self, dependency_type: Type, factory: Callable[[], Any]) -> Any:
        """Return the cached instance or create, cache and return a new one.

        Args:
            dependency_type: The cache key.
            factory: Function producing the instance on a miss.

        Returns:
            The cached instance. A None result is cached like any other value.

        Raises:
            ConstructionError: If the factory raises. Nothing is cached.
        """
        with self._lock:
            if dependency_type in self._instances:
                logger.debug("Singleton cache hit for %s", dependency_type)
                return self._instances[dependency_type]

            logger.debug("Singleton cache miss for %s", dependency_type)
            try:
                instance = factory()
            except IoCException:
                raise
            except Exception as e:
                raise ConstructionError(dependency_type, f"Factory failed: {e}") from e

            self._instances[dependency_type] = instance
            return instance

    def contains(self, dependency_type: Type) -> bool:
        return dependency_type in self._instances

    def cached_types(self) -> List[Type]:
        return list(self._instances)

    def clear(self) -> None:
        with self._lock:
            self._instances.clear()

import importlib
import inspect
import logging
import threading
from typing import Any, Dict, List, Optional, Type, TypeVar, Union, get_type_hints

from tiny_ioc.application.singleton_cache import SingletonCache
from tiny_ioc.domain import (
    ABSENT,
    Absent,
    ContainerNotReadyError,
    ContainerState,
    FactoryEntry,
    IBeanRegistry,
    InitializationError,
    ISingletonCache,
    is_bean,
    provided_type,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ConfigSource = Union[str, type]


def load_config_source(source: ConfigSource) -> type:
    """Locate the configuration source class.

    Args:
        source: A class, or an identifier of the form ``"pkg.module:Name"`` or
            ``"pkg.module.Name"``.

    Returns:
        The configuration source class.

    Raises:
        InitializationError: If the identifier cannot be resolved to a class.
    """
    if isinstance(source, type):
        return source
    if not isinstance(source, str) or not source.strip():
        raise InitializationError(source, "identifier must be a non-empty string or a class")

    if ":" in source:
        module_name, _, attribute_path = source.partition(":")
    else:
        module_name, _, attribute_path = source.rpartition(".")
    if not module_name or not attribute_path:
        raise InitializationError(source, "identifier must name a module and a class")

    try:
        target: Any = importlib.import_module(module_name)
    except Exception as e:
        raise InitializationError(source, f"module '{module_name}' could not be imported: {e}") from e

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as e:
            raise InitializationError(source, f"'{attribute}' not found") from e

    if not isinstance(target, type):
        raise InitializationError(source, f"{target!r} is not a class")
    return target


class BeanRegistry(IBeanRegistry):
    """Discovers @bean factories on a configuration source and serves their singletons.

    The registry is ``uninitialized`` until init() succeeds. Every lookup made
    before that raises ContainerNotReadyError.

    Attributes:
        _source: The configuration source identifier or class.
        _factories: Mapping from result type to factory entry.
        _cache: Singleton cache for factory-produced instances.
        _config_instance: The single configuration source instance.
        _state: Current lifecycle state.
        _lock: Initialization barrier shared with get_bean().
    """

    def __init__(self, source: ConfigSource, cache: Optional[ISingletonCache] = None) -> None:
        self._source = source
        self._factories: Dict[Any, FactoryEntry] = {}
        self._cache: ISingletonCache = cache if cache is not None else SingletonCache()
        self._config_instance: Any = None
        self._state = ContainerState.UNINITIALIZED
        self._lock = threading.RLock()

    @property
    def source(self) -> ConfigSource:
        return self._source

    @property
    def state(self) -> ContainerState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is ContainerState.READY

    @property
    def config_instance(self) -> Any:
        """The configuration source instance factories are invoked against."""
        self._ensure_ready("config_instance")
        return self._config_instance

    def init(self) -> None:
        """Scan the configuration source and build the factory mapping from scratch.

        Bean methods are collected from every class in the source's MRO, base
        classes first, each in declaration order. When two methods produce the
        same type the later one wins.

        Raises:
            InitializationError: If the source cannot be located, introspected or
                instantiated. The registry is left uninitialized and empty.
        """
        with self._lock:
            self._reset()
            config_class = load_config_source(self._source)
            factories = self._scan(config_class)
            config_instance = self._instantiate(config_class)

            self._factories = factories
            self._config_instance = config_instance
            self._state = ContainerState.READY
            logger.debug(
                "Initialized %s with %d bean factories",
                config_class.__qualname__,
                len(factories),
            )

    def get_bean(self, dependency_type: Type[T]) -> Union[T, Absent]:
        """Return the singleton for a type.

        Args:
            dependency_type: The bean type to look up.

        Returns:
            The cached or newly produced instance, or ABSENT when no factory is
            registered for the type.

        Raises:
            ContainerNotReadyError: If init() has not completed.
            ConstructionError: If the factory raises.
        """
        with self._lock:
            self._ensure_ready("get_bean")
            entry = self._factories.get(dependency_type)
            if entry is None:
                logger.debug("No bean defined for %s", dependency_type)
                return ABSENT
            config_instance = self._config_instance
            return self._cache.get_or_create(dependency_type, lambda: entry.invoke(config_instance))

    def has_factory(self, dependency_type: Type) -> bool:
        return dependency_type in self._factories

    def factory_entries(self) -> Dict[Any, FactoryEntry]:
        return self._factories.copy()

    def factory_types(self) -> List[Any]:
        return list(self._factories)

    def cached_types(self) -> List[Type]:
        return self._cache.cached_types()

    def _reset(self) -> None:
        self._state = ContainerState.UNINITIALIZED
        self._factories = {}
        self._config_instance = None
        self._cache.clear()

    def _ensure_ready(self, operation: str) -> None:
        if self._state is not ContainerState.READY:
            raise ContainerNotReadyError(operation)

    def _scan(self, config_class: type) -> Dict[Any, FactoryEntry]:
        factories: Dict[Any, FactoryEntry] = {}
        for owner in reversed(config_class.__mro__):
            if owner is object:
                continue
            for name, attribute in vars(owner).items():
                if not is_bean(attribute):
                    continue
                shadow = next(cls for cls in config_class.__mro__ if name in vars(cls))
                if shadow is not owner and is_bean(vars(shadow)[name]):
                    # A marked redefinition further down the MRO registers itself
                    continue
                result_type = self._result_type(config_class, owner, name, attribute)
                if result_type in factories:
                    logger.debug(
                        "Bean %s.%s overrides %s.%s for %s",
                        owner.__qualname__,
                        name,
                        factories[result_type].owner.__qualname__,
                        factories[result_type].factory_name,
                        result_type,
                    )
                factories[result_type] = FactoryEntry(
                    result_type=result_type,
                    factory_name=name,
                    factory=attribute,
                    owner=owner,
                )
                logger.debug("Registered bean factory %s.%s -> %s", owner.__qualname__, name, result_type)
        return factories

    @staticmethod
    def _result_type(config_class: type, owner: type, name: str, attribute: Any) -> Any:
        explicit = provided_type(attribute)
        if explicit is not None:
            return explicit

        function = getattr(attribute, "__func__", attribute)
        try:
            hints = get_type_hints(function)
        except Exception as e:
            raise InitializationError(
                config_class, f"return annotation of '{owner.__qualname__}.{name}' cannot be resolved: {e}"
            ) from e

        result_type = hints.get("return")
        if result_type is None or result_type is type(None):
            raise InitializationError(
                config_class,
                f"bean method '{owner.__qualname__}.{name}' declares no result type; "
                "add a return annotation or use @bean(provides=...)",
            )
        return result_type

    @staticmethod
    def _instantiate(config_class: type) -> Any:
        try:
            inspect.signature(config_class).bind()
        except TypeError as e:
            raise InitializationError(config_class, f"no no-argument constructor: {e}") from e
        except ValueError:
            # No introspectable signature; let the call below decide.
            pass

        try:
            return config_class()
        except Exception as e:
            raise InitializationError(config_class, f"constructor raised {type(e).__name__}: {e}") from e

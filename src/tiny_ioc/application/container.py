import logging
from typing import Optional, Type, TypeVar, Union

from tiny_ioc.application.registry import BeanRegistry, ConfigSource
from tiny_ioc.application.resolver import ConstructorResolver
from tiny_ioc.application.settings import ContainerSettings
from tiny_ioc.domain import (
    Absent,
    ContainerNotReadyError,
    ContainerState,
    IBeanRegistry,
    IContainer,
    IResolver,
    Lifetime,
    MissingDependencyPolicy,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IoCContainer(IContainer):
    """Main inversion-of-control container.

    Two phases: init() scans the configuration source for @bean factories,
    then get_bean()/create()/resolve() hand out instances. Factory-backed types
    are singletons; everything else is built fresh on every create().

    Attributes:
        _settings: Settings used for defaults.
        _registry: Factory discovery and singleton cache.
        _resolver: Constructor selection and autowiring.

    Example:
        >>> container = IoCContainer("shop.config:AppConfig")
        >>> container.init()
        >>> customer = container.get_bean(Customer)
        >>> order = container.create(Order)
        >>> assert order.customer is customer
    """

    def __init__(
        self,
        config_source: Optional[ConfigSource] = None,
        settings: Optional[ContainerSettings] = None,
        missing_dependency_policy: Optional[MissingDependencyPolicy] = None,
        registry: Optional[IBeanRegistry] = None,
        resolver: Optional[IResolver] = None,
    ) -> None:
        """Set up an uninitialized container.

        Args:
            config_source: Configuration source class or identifier. Defaults to
                ``settings.config_source``.
            settings: Settings; loaded from the environment when omitted.
            missing_dependency_policy: Overrides ``settings.missing_dependency_policy``.
            registry: Custom registry; built from ``config_source`` when omitted.
            resolver: Custom resolver; built from the policy when omitted.
        """
        self._settings = settings if settings is not None else ContainerSettings()
        source = config_source if config_source is not None else self._settings.config_source
        policy = (
            missing_dependency_policy
            if missing_dependency_policy is not None
            else self._settings.missing_dependency_policy
        )
        self._registry: IBeanRegistry = registry if registry is not None else BeanRegistry(source)
        self._resolver: IResolver = resolver if resolver is not None else ConstructorResolver(policy)

    @property
    def settings(self) -> ContainerSettings:
        return self._settings

    @property
    def registry(self) -> IBeanRegistry:
        return self._registry

    @property
    def resolver(self) -> IResolver:
        return self._resolver

    @property
    def state(self) -> ContainerState:
        return self._registry.state

    @property
    def is_ready(self) -> bool:
        return self.state is ContainerState.READY

    def init(self) -> None:
        """Scan the configuration source and move the container to ``ready``.

        Re-running init() rebuilds the factory mapping and empties the singleton
        cache.

        Raises:
            InitializationError: If the configuration source cannot be loaded.
                The container stays ``uninitialized``.
        """
        self._registry.init()
        logger.debug("Container ready")

    def get_bean(self, dependency_type: Type[T]) -> Union[T, Absent]:
        """Return the singleton for a factory-backed type, or ABSENT.

        Raises:
            ContainerNotReadyError: If init() has not completed.
            ConstructionError: If the factory raises.
        """
        self._ensure_ready("get_bean")
        return self._registry.get_bean(dependency_type)

    def create(self, target_type: Type[T]) -> T:
        """Build a new instance, autowiring an @autowired constructor if present.

        Raises:
            ContainerNotReadyError: If init() has not completed.
            ConstructionError: If the type cannot be built.
        """
        self._ensure_ready("create")
        return self._resolver.create(target_type, self._registry)

    def resolve(self, dependency_type: Type[T]) -> T:
        """Return the singleton for factory-backed types, otherwise a new instance.

        Raises:
            ContainerNotReadyError: If init() has not completed.
            ConstructionError: If the instance cannot be produced.
        """
        self._ensure_ready("resolve")
        if self.lifetime_of(dependency_type) is Lifetime.SINGLETON:
            return self.get_bean(dependency_type)
        return self.create(dependency_type)

    def lifetime_of(self, dependency_type: Type) -> Lifetime:
        self._ensure_ready("lifetime_of")
        if self._registry.has_factory(dependency_type):
            return Lifetime.SINGLETON
        return Lifetime.TRANSIENT

    def _ensure_ready(self, operation: str) -> None:
        if self.state is not ContainerState.READY:
            raise ContainerNotReadyError(operation)

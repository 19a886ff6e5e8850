import inspect
import logging
import types
from typing import Any, Dict, List, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from tiny_ioc.domain import (
    ABSENT,
    AmbiguousAutowireError,
    ConstructionError,
    ConstructorDescriptor,
    IBeanRegistry,
    IoCException,
    IResolver,
    MissingDependencyError,
    MissingDependencyPolicy,
    ParameterDescriptor,
    is_autowired,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def dependency_key(hint: Any) -> Any:
    """Registry key for a parameter hint; ``Optional[X]`` is looked up as ``X``."""
    if get_origin(hint) in (Union, types.UnionType):
        members = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return hint


class ConstructorResolver(IResolver):
    """Builds instances through an @autowired constructor or the no-argument constructor.

    Autowired parameters are looked up by type with ``registry.get_bean``. What
    happens when no bean exists is decided by the missing dependency policy.
    Instances built here are never cached.

    Attributes:
        _policy: Missing dependency policy applied during autowiring.
    """

    def __init__(self, policy: MissingDependencyPolicy = MissingDependencyPolicy.PLACEHOLDER) -> None:
        self._policy = MissingDependencyPolicy(policy)

    @property
    def policy(self) -> MissingDependencyPolicy:
        return self._policy

    def describe_constructors(self, target_type: Type) -> List[ConstructorDescriptor]:
        """List ``__init__`` and every @autowired classmethod of a type.

        Parameters are only described for autowired constructors; unmarked ones
        carry an empty parameter list since they are never autowired.

        Raises:
            ConstructionError: If an autowired constructor has a parameter without
                a resolvable type hint.
        """
        descriptors = []

        init_owner = next(owner for owner in target_type.__mro__ if "__init__" in vars(owner))
        init_function = vars(init_owner)["__init__"]
        descriptors.append(self._describe(target_type, "__init__", init_function))

        seen = set()
        for owner in target_type.__mro__:
            for name, attribute in vars(owner).items():
                if not isinstance(attribute, classmethod) or name in seen:
                    continue
                seen.add(name)
                if is_autowired(attribute):
                    descriptors.append(self._describe(target_type, name, attribute.__func__))

        return descriptors

    def create(self, target_type: Type[T], registry: IBeanRegistry) -> T:
        """Build a new instance of a type.

        Args:
            target_type: The type to instantiate.
            registry: Where autowired parameters are looked up.

        Returns:
            A new, uncached instance.

        Raises:
            AmbiguousAutowireError: If more than one constructor is @autowired.
            MissingDependencyError: If a bean is missing under the fail-fast policy.
            ConstructionError: If no usable constructor exists or it raises.

        Example:
            >>> class Order:
            ...     @autowired
            ...     def __init__(self, customer: Customer, address: Address):
            ...         self.customer = customer
            ...         self.address = address
            >>>
            >>> order = resolver.create(Order, registry)
        """
        if not isinstance(target_type, type):
            raise ConstructionError(target_type, "target is not a class")

        candidates = [descriptor for descriptor in self.describe_constructors(target_type) if descriptor.autowired]
        if len(candidates) > 1:
            raise AmbiguousAutowireError(target_type, [descriptor.name for descriptor in candidates])
        if candidates:
            return self._autowire(target_type, candidates[0], registry)
        return self._default_construct(target_type)

    def _describe(self, target_type: Type, name: str, function: Any) -> ConstructorDescriptor:
        autowired = is_autowired(function)
        parameters = self._parameters(target_type, name, function) if autowired else []
        return ConstructorDescriptor(owner=target_type, name=name, autowired=autowired, parameters=parameters)

    @staticmethod
    def _parameters(target_type: Type, name: str, function: Any) -> List[ParameterDescriptor]:
        try:
            signature = inspect.signature(function)
            type_hints = get_type_hints(function)
        except Exception as e:
            raise ConstructionError(target_type, f"Cannot introspect constructor '{name}': {e}") from e

        parameters = []
        # First positional parameter is self for __init__ and cls for classmethods
        for param in list(signature.parameters.values())[1:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param.name not in type_hints:
                raise ConstructionError(
                    target_type,
                    f"Parameter '{param.name}' of constructor '{name}' lacks a type hint.",
                )
            parameters.append(
                ParameterDescriptor(
                    name=param.name,
                    dependency_type=dependency_key(type_hints[param.name]),
                    kind=param.kind,
                    default=param.default,
                )
            )
        return parameters

    def _autowire(self, target_type: Type[T], descriptor: ConstructorDescriptor, registry: IBeanRegistry) -> T:
        args: List[Any] = []
        kwargs: Dict[str, Any] = {}

        for parameter in descriptor.parameters:
            value = registry.get_bean(parameter.dependency_type)
            if value is ABSENT:
                value = self._missing(target_type, parameter)
            if parameter.kind is inspect.Parameter.POSITIONAL_ONLY:
                args.append(value)
            else:
                kwargs[parameter.name] = value

        constructor = target_type if descriptor.is_init else getattr(target_type, descriptor.name)
        instance = self._invoke(target_type, descriptor.name, lambda: constructor(*args, **kwargs))
        logger.debug("Autowired %s through %s", target_type.__qualname__, descriptor.name)
        return instance

    def _missing(self, target_type: Type, parameter: ParameterDescriptor) -> Any:
        if self._policy is MissingDependencyPolicy.FAIL_FAST:
            raise MissingDependencyError(target_type, parameter.name, parameter.dependency_type)

        if parameter.has_default:
            logger.debug(
                "No bean for %s.%s; using parameter default",
                target_type.__qualname__,
                parameter.name,
            )
            return parameter.default

        logger.warning(
            "No bean defined for %s (parameter '%s' of %s); injecting None",
            parameter.dependency_type,
            parameter.name,
            target_type.__qualname__,
        )
        return None

    def _default_construct(self, target_type: Type[T]) -> T:
        try:
            inspect.signature(target_type).bind()
        except TypeError as e:
            raise ConstructionError(target_type, f"no @autowired or no-argument constructor: {e}") from e
        except ValueError:
            # No introspectable signature; let the call below decide.
            pass

        instance = self._invoke(target_type, "__init__", target_type)
        logger.debug("Default-constructed %s", target_type.__qualname__)
        return instance

    @staticmethod
    def _invoke(target_type: Type, name: str, constructor: Any) -> Any:
        try:
            return constructor()
        except IoCException:
            raise
        except Exception as e:
            raise ConstructionError(target_type, f"Constructor '{name}' raised {type(e).__name__}: {e}") from e

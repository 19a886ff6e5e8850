from typing import Any, Optional, Sequence, Type


def _type_name(obj: Any) -> str:
    return getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or repr(obj)


class IoCException(Exception):
    """Base exception for container errors."""


class InitializationError(IoCException):
    """Raised when the configuration source cannot be loaded.

    This occurs when:
    - The identifier does not point at an importable class.
    - The class has no usable no-argument constructor, or it raises.
    - A bean method has no resolvable result type.

    Attributes:
        source: The identifier or class that failed to initialize.
        reason: Optional reason for the failure.
    """

    def __init__(self, source: Any, reason: Optional[str] = None) -> None:
        self.source = source
        self.reason = reason
        name = source if isinstance(source, str) else _type_name(source)
        message = f"Cannot initialize configuration source: {name}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class ContainerNotReadyError(IoCException):
    """Raised when a resolution call is made before init() has completed."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Container is not initialized; call init() before {operation}()")


class ConstructionError(IoCException):
    """Raised when an instance cannot be built.

    This occurs when:
    - A factory method raises.
    - The target type has neither an autowired nor a no-argument constructor.
    - The selected constructor raises.

    Attributes:
        cls: The type that could not be built.
        reason: Optional reason for the failure.
    """

    def __init__(self, cls: Type, reason: Optional[str] = None) -> None:
        self.cls = cls
        self.reason = reason
        message = f"Cannot construct instance of type: {_type_name(cls)}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class AmbiguousAutowireError(ConstructionError):
    """Raised when a type marks more than one constructor with @autowired.

    Attributes:
        candidates: Names of the marked constructors.
    """

    def __init__(self, cls: Type, candidates: Sequence[str]) -> None:
        self.candidates = list(candidates)
        super().__init__(cls, f"multiple @autowired constructors: {', '.join(self.candidates)}")


class MissingDependencyError(ConstructionError):
    """Raised under the fail-fast policy when a parameter type has no bean.

    Attributes:
        parameter: Name of the constructor parameter.
        dependency_type: The type no factory was registered for.
    """

    def __init__(self, cls: Type, parameter: str, dependency_type: Type) -> None:
        self.parameter = parameter
        self.dependency_type = dependency_type
        super().__init__(
            cls,
            f"no bean defined for parameter '{parameter}' of type {_type_name(dependency_type)}",
        )


class BeanNotFoundError(IoCException):
    """Raised by callers that require a bean when get_bean reports ABSENT.

    Attributes:
        dependency_type: The type no factory was registered for.
    """

    def __init__(self, dependency_type: Type) -> None:
        self.dependency_type = dependency_type
        super().__init__(f"No bean defined for type: {_type_name(dependency_type)}")

"""Declarative markers read by the registry and the resolver."""

from typing import Any, Callable, Optional, Type, TypeVar, overload

F = TypeVar("F", bound=Callable[..., Any])

BEAN_MARKER = "__tiny_ioc_bean__"
PROVIDES_ATTRIBUTE = "__tiny_ioc_provides__"
AUTOWIRED_MARKER = "__tiny_ioc_autowired__"


def _unwrap(obj: Any) -> Any:
    """Return the function behind a staticmethod/classmethod, or obj itself."""
    return getattr(obj, "__func__", obj)


@overload
def bean(func: F) -> F: ...


@overload
def bean(*, provides: Optional[Type] = None) -> Callable[[F], F]: ...


def bean(func: Optional[F] = None, *, provides: Optional[Type] = None) -> Any:
    """Mark a configuration-source method as a bean factory.

    The bean is registered under ``provides`` when given, otherwise under the
    method's return annotation.

    Example:
        >>> class Config:
        ...     @bean
        ...     def customer(self) -> Customer:
        ...         return Customer("GangTan", "gangtann@126.com")
        ...
        ...     @bean(provides=Address)
        ...     def address(self):
        ...         return Address("China", "100000")
    """

    def decorator(target: F) -> F:
        function = _unwrap(target)
        setattr(function, BEAN_MARKER, True)
        setattr(function, PROVIDES_ATTRIBUTE, provides)
        return target

    if func is not None:
        return decorator(func)
    return decorator


def autowired(func: F) -> F:
    """Mark ``__init__`` or an alternative-constructor classmethod for autowiring.

    Example:
        >>> class Order:
        ...     @autowired
        ...     def __init__(self, customer: Customer, address: Address):
        ...         self.customer = customer
        ...         self.address = address
    """
    setattr(_unwrap(func), AUTOWIRED_MARKER, True)
    return func


def is_bean(obj: Any) -> bool:
    return bool(getattr(_unwrap(obj), BEAN_MARKER, False))


def is_autowired(obj: Any) -> bool:
    return bool(getattr(_unwrap(obj), AUTOWIRED_MARKER, False))


def provided_type(obj: Any) -> Optional[Type]:
    """Explicit result type given to ``@bean(provides=...)``, if any."""
    return getattr(_unwrap(obj), PROVIDES_ATTRIBUTE, None)

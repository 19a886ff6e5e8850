from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Type, TypeVar

from fastapi import FastAPI

from tiny_ioc.domain import ABSENT, BeanNotFoundError, IContainer

T = TypeVar("T")


def create_bean_dependency(container: IContainer, dependency_type: Type[T]) -> Callable[[], T]:
    """Create a FastAPI Depends() callable returning a factory-backed singleton.

    Args:
        container: The initialized container.
        dependency_type: The bean type to look up.

    Returns:
        A callable FastAPI can use with Depends().

    Raises:
        BeanNotFoundError: When called and no bean is defined for the type.

    Example:
        >>> get_customer = create_bean_dependency(container, Customer)
        >>>
        >>> @app.get("/customer")
        >>> def read_customer(customer: Customer = Depends(get_customer)):
        ...     return {"name": customer.name}
    """

    def bean_dependency() -> T:
        """Look up the bean in the container."""
        instance = container.get_bean(dependency_type)
        if instance is ABSENT:
            raise BeanNotFoundError(dependency_type)
        return instance

    return bean_dependency


def create_instance_dependency(container: IContainer, target_type: Type[T]) -> Callable[[], T]:
    """Create a FastAPI Depends() callable building a new instance per request.

    Example:
        >>> get_order = create_instance_dependency(container, Order)
        >>>
        >>> @app.post("/orders")
        >>> def place_order(order: Order = Depends(get_order)):
        ...     return {"customer": order.customer.name}
    """

    def instance_dependency() -> T:
        """Build a new instance through the container."""
        return container.create(target_type)

    return instance_dependency


def create_fastapi_dependency(container: IContainer, dependency_type: Type[T]) -> Callable[[], T]:
    """Create a FastAPI Depends() callable following the container's lifetime for the type.

    Factory-backed types resolve to their singleton, everything else is built
    fresh on each request.
    """

    def dependency() -> T:
        """Resolve the dependency from the container."""
        return container.resolve(dependency_type)

    return dependency


def container_lifespan(container: IContainer) -> Callable[[FastAPI], Any]:
    """Build a FastAPI lifespan handler that initializes the container on startup.

    The container is also exposed as ``app.state.ioc_container``.

    Example:
        >>> container = IoCContainer("shop.config:AppConfig")
        >>> app = FastAPI(lifespan=container_lifespan(container))
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        container.init()
        app.state.ioc_container = container
        yield

    return lifespan

"""
FastAPI integration module.

Provides helpers for exposing tiny-ioc beans and instances to FastAPI routes.
"""

from .integration import (
    container_lifespan,
    create_bean_dependency,
    create_fastapi_dependency,
    create_instance_dependency,
)

__all__ = [
    "create_bean_dependency",
    "create_instance_dependency",
    "create_fastapi_dependency",
    "container_lifespan",
]

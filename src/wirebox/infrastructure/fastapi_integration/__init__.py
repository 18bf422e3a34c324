"""
FastAPI integration module.

Provides helpers for making container instances available to FastAPI endpoints.
"""

from .integration import ContainerMiddleware, create_fastapi_dependency, resolve_from_request

__all__ = [
    "create_fastapi_dependency",
    "resolve_from_request",
    "ContainerMiddleware",
]

from typing import Any, Awaitable, Callable, Optional

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from wirebox.domain import IContainer, Identifier, Parameters


def create_fastapi_dependency(
    container: IContainer, abstract: Identifier, parameters: Optional[Parameters] = None
) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that makes an identifier from the container.

    The returned instance follows the binding: shared for singletons, fresh
    otherwise.

    Args:
        container: The container to resolve from.
        abstract: The identifier to make when the dependency is called.
        parameters: Constructor overrides passed to every make call.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = Container()
        >>> container.singleton(UserRepository, SqlUserRepository)
        >>>
        >>> get_user_repo = create_fastapi_dependency(container, UserRepository)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Make the identifier from the container."""
        return container.make(abstract, parameters)

    return dependency


def resolve_from_request(abstract: Identifier) -> Callable[[Request], Any]:
    """Create a FastAPI dependency that makes from the container attached to the request.

    Requires ContainerMiddleware to be installed.

    Args:
        abstract: The identifier to make.

    Returns:
        A callable resolving from ``request.state.container``.

    Example:
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> @app.get("/clock")
        >>> async def now(clock: Clock = Depends(resolve_from_request(Clock))):
        ...     return {"now": clock.now()}
    """

    def request_dependency(request: Request) -> Any:
        """Make from the request's container."""
        if not hasattr(request.state, "container"):
            raise RuntimeError("Request does not have a container. Did you forget to add ContainerMiddleware?")
        container: IContainer = request.state.container
        return container.make(abstract)

    return request_dependency


class ContainerMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes a container on every request.

    The container is accessible via ``request.state.container``.

    Attributes:
        container: The container shared by all requests.
    """

    def __init__(self, app: FastAPI, container: IContainer):
        """Initialize the middleware.

        Args:
            app: The FastAPI/Starlette application.
            container: The container to expose.
        """
        super().__init__(app)
        self.container = container

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request.state.container = self.container
        return await call_next(request)

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from fastapi import APIRouter
from starlette.routing import Route

from commitai.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _relative_path(router: APIRouter, route: Route) -> str:
    if router.prefix and route.path.startswith(router.prefix):
        return route.path[len(router.prefix) :]
    return route.path


def iter_endpoints(router: APIRouter, prefix: str = "") -> Iterator[tuple[str, str, str]]:
    """
    Yield ``(method, path, name)`` for each route registered on ``router``.

    Paths include ``prefix`` and the router's own prefix. Routers included into
    ``router`` are not walked; pass them separately.
    """
    for route in router.routes:
        if not isinstance(route, Route) or route.methods is None:
            continue
        path = prefix + router.prefix + _relative_path(router, route)
        for method in sorted(route.methods):
            # HEAD is added implicitly alongside GET.
            if method == "HEAD":
                continue
            yield method, path, route.name


def ensure_unique_routes(routers: Iterable[APIRouter], prefix: str = "") -> None:
    """
    Fail if two routes answer the same method on the same path.

    Starlette dispatches to the first match, so a second registration would
    otherwise be unreachable without any warning. Run this before the routers
    are included into the app.
    """
    seen: dict[tuple[str, str], str] = {}
    for router in routers:
        for method, path, name in iter_endpoints(router, prefix):
            key = (method, path)
            if key in seen:
                raise ConfigurationError(f"Duplicate route {method} {path}: handlers {seen[key]!r} and {name!r}.")
            seen[key] = name
    logger.debug("Route table verified", extra={"route_count": len(seen)})

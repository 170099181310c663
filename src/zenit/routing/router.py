"""Route table with per-method buckets and first-match-wins lookup.

Routes are registered during setup, in order, and the table is then
used read-only. The earliest registered route for a method always wins
when several could match the same path.
"""

import logging
import threading
from typing import Generic, TypeVar

from zenit.config import RouterConfig
from zenit.errors import DuplicateRouteName, RouterFrozenError
from zenit.http.method import Method
from zenit.routing.route import MatchResult, Route

logger = logging.getLogger("zenit.routing")

H = TypeVar("H")


class Router(Generic[H]):
    """Registry of routes and their handlers.

    Handlers are opaque: they are stored on ``register`` and handed back
    inside the ``MatchResult``, never called or inspected.

    Usage::

        router = Router()
        router.register(Route(Method.GET, "/users/{id}", "user_detail"), show_user)
        result = router.match(Method.GET, "/users/42")
        result.parameters   # {"id": "42"}

    No internal locking guards ``register`` against ``match``. Build the
    table from one thread, then either stop mutating it or ``freeze()``
    it before sharing it with concurrent readers.
    """

    __slots__ = ("_by_method", "_config", "_freeze_lock", "_frozen", "_names", "_order")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config: RouterConfig = config or RouterConfig()
        self._by_method: dict[Method, list[tuple[Route, H]]] = {}
        self._names: dict[str, tuple[Route, H]] = {}
        # Global registration order, across methods
        self._order: list[Route] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    @property
    def config(self) -> RouterConfig:
        return self._config

    # -- Registration --

    def register(self, route: Route, handler: H) -> None:
        """Add *route* bound to *handler*.

        Raises ``DuplicateRouteName`` if a route with the same name was
        already registered, whatever its method or schema.
        Raises ``RouterFrozenError`` once the router is frozen.
        """
        self._check_not_frozen()
        if route.name in self._names:
            raise DuplicateRouteName(route.name)

        entry = (route, handler)
        self._names[route.name] = entry
        self._by_method.setdefault(route.method, []).append(entry)
        self._order.append(route)
        logger.debug("Registered %s %s as %r", route.method.value, route.schema, route.name)

    def clear(self) -> None:
        """Drop every route and release every name."""
        self._check_not_frozen()
        self._by_method.clear()
        self._names.clear()
        self._order.clear()

    # -- Lookup --

    def match(self, method: Method, requested_path: str) -> MatchResult[H] | None:
        """Find the first route registered for *method* that matches the path.

        Returns ``None`` when no route for *method* matches; a miss is a
        normal result, not an error.
        """
        if self._config.freeze_on_match and not self._frozen:
            self.freeze()

        for route, handler in self._by_method.get(method, ()):
            parameters = route.matches(method, requested_path)
            if parameters is not None:
                if self._config.debug:
                    logger.debug(
                        "%s %s matched %r with %r",
                        method.value,
                        requested_path,
                        route.name,
                        parameters,
                    )
                return MatchResult(route_name=route.name, parameters=parameters, handler=handler)

        if self._config.debug:
            logger.debug("%s %s matched no route", method.value, requested_path)
        return None

    def get(self, name: str) -> tuple[Route, H] | None:
        """Return the ``(route, handler)`` pair registered under *name*."""
        return self._names.get(name)

    # -- Introspection --

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in registration order across methods."""
        return list(self._order)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._order)

    # -- Freezing --

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Forbid further mutation. Safe to call more than once.

        Uses a lock + double-check so exactly one caller performs the
        transition when several threads race on the first request.
        """
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._frozen = True
            logger.debug("Route table frozen with %d route(s)", len(self._order))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot modify routes after the router is frozen."
            raise RouterFrozenError(msg)

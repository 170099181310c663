"""Zenit — a small URL routing table.

Matches an (HTTP method, path) pair against registered schemas with
named placeholders and hands back the route name, the extracted
parameters, and whatever handler was registered with the route.

Basic usage::

    from zenit import Method, Route, Router

    router = Router()
    router.register(Route(Method.GET, "/{article}/page-{page}", "article_page"), show)

    result = router.match(Method.GET, "/tdd-for-dummies/page-2")
    result.parameters   # {"article": "tdd-for-dummies", "page": "2"}
    result.handler      # show
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "DuplicateRouteName",
    "MalformedSchema",
    "MatchResult",
    "Method",
    "Route",
    "Router",
    "RouterConfig",
    "RouterFrozenError",
    "ZenitError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import zenit`` fast while providing a clean top-level API.
    """
    if name in ("Route", "MatchResult"):
        from zenit.routing import route as _route

        return getattr(_route, name)

    if name == "Router":
        from zenit.routing.router import Router

        return Router

    if name == "RouterConfig":
        from zenit.config import RouterConfig

        return RouterConfig

    if name == "Method":
        from zenit.http.method import Method

        return Method

    if name in (
        "ZenitError",
        "ConfigurationError",
        "DuplicateRouteName",
        "MalformedSchema",
        "RouterFrozenError",
    ):
        from zenit import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

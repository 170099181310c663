"""Router import resolution — resolves ``"module:attribute"`` strings to Routers.

Shared utility used by ``zenit routes`` and ``zenit match`` to locate a
route table from a user-supplied import string.
"""

import importlib
import logging
import sys

from zenit.routing.router import Router

logger = logging.getLogger("zenit.cli")


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a zenit Router instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"router"`` (e.g. ``"myapp.urls"`` resolves
    to ``myapp.urls.router``).

    Supports factory functions: if the resolved object is callable and
    not a Router instance, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a zenit ``Router``.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Router):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a zenit.Router instance"
        raise TypeError(msg)

    return obj


def load_router(import_string: str, log_level: str | None) -> Router:
    """Resolve *import_string* for a CLI command, exiting 1 on failure.

    Logging is configured at *log_level*, falling back to the level in
    the router's own ``RouterConfig``.
    """
    from zenit.cli import configure_logging

    try:
        router = resolve_router(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(log_level or router.config.log_level)
    logger.debug("Resolved %r to a router with %d route(s)", import_string, len(router))
    return router

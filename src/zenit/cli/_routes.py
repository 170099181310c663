"""``zenit routes`` — list registered routes.

Resolves an import string to a zenit Router and prints every route
with method, schema, name, and handler, in registration order.
"""

import argparse

from zenit.cli._resolve import load_router


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, SCHEMA, NAME, and HANDLER."""
    router = load_router(args.router, args.log_level)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        entry = router.get(route.name)
        handler = entry[1] if entry is not None else None
        handler_name = getattr(handler, "__name__", repr(handler))
        rows.append((route.method.value, route.schema, route.name, handler_name))

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_schema = max(max(len(r[1]) for r in rows), 6)  # "SCHEMA" header
    max_name = max(max(len(r[2]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_method}}}  {{:<{max_schema}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("METHOD", "SCHEMA", "NAME", "HANDLER"))
    sep_len = max_method + max_schema + max_name + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))

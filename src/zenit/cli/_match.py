"""``zenit match`` — look up a method and path in a route table.

Prints the matched route name and its parameters. Exits with code 1
when nothing matches, or when the method is not supported.
"""

import argparse
import sys

from zenit.cli._resolve import load_router
from zenit.http.method import Method


def run_match(args: argparse.Namespace) -> None:
    router = load_router(args.router, args.log_level)

    try:
        method = Method.parse(args.method)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    result = router.match(method, args.path)
    if result is None:
        print(f"No match for {method.value} {args.path}")
        raise SystemExit(1)

    print(f"{method.value} {args.path} -> {result.route_name}")
    for name, value in result.parameters.items():
        print(f"  {name} = {value}")

"""Route and MatchResult frozen dataclasses."""

import re
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from zenit.http.method import Method
from zenit.routing.schema import compile_schema

H = TypeVar("H")


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled, immutable binding of method, schema, and name.

    The schema is validated and compiled during construction; a malformed
    schema raises ``MalformedSchema`` and no Route is created::

        route = Route(Method.GET, "/{article}/page-{page}/", "article_page")
        route.schema             # "/{article}/page-{page}"
        route.parameter_names    # ("article", "page")
    """

    method: Method
    schema: str
    name: str
    parameter_names: tuple[str, ...] = field(init=False)
    matcher: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = compile_schema(self.schema)
        object.__setattr__(self, "schema", compiled.schema)
        object.__setattr__(self, "parameter_names", compiled.parameter_names)
        object.__setattr__(self, "matcher", compiled.matcher)

    def matches(self, method: Method, requested_path: str) -> dict[str, str] | None:
        """Test *requested_path* against this route's schema.

        Returns the extracted parameters (empty for a literal hit), or
        ``None`` when the path does not match. Never raises.

        *method* is informational only: method filtering is done by the
        Router, which keeps one bucket per method. A route never rejects
        a path because of the method passed here.
        """
        if requested_path == self.schema:
            return {}

        found = self.matcher.fullmatch(requested_path)
        if found is None:
            return None
        return dict(zip(self.parameter_names, found.groups(), strict=True))


@dataclass(frozen=True, slots=True)
class MatchResult(Generic[H]):
    """Result of a successful lookup. Created fresh for every match."""

    route_name: str
    parameters: dict[str, str]
    handler: H

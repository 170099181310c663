"""Schema compilation — validation, canonicalization, and matcher building.

A schema is a path such as ``/{article}/page-{page}``. Placeholders are
delimited by ``{`` and ``}``; everything else is matched literally.

Examples::

    compile_schema("/users/")            -> CompiledSchema("/users", (), ...)
    compile_schema("/{map}-hiscores")    -> CompiledSchema("/{map}-hiscores", ("map",), ...)
    compile_schema("/{a}/{b}/{a}")       -> parameter_names == ("a", "b", "a")
"""

import re
from dataclasses import dataclass, field

from zenit.errors import MalformedSchema

OPEN_MARKER = "{"
CLOSE_MARKER = "}"

# Anything between a pair of markers. Only valid once delimitation is checked.
_PLACEHOLDER = re.compile(r"\{([^}]*)\}")

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*")

# Greedy "one or more characters" capture substituted for each placeholder
_CAPTURE = "(.+)"


@dataclass(frozen=True, slots=True)
class CompiledSchema:
    """The derived artifacts of a validated schema."""

    schema: str
    parameter_names: tuple[str, ...]
    matcher: re.Pattern[str] = field(repr=False, compare=False)


def check_delimitation(schema: str) -> None:
    """Reject unmatched and nested markers in a single pass.

    Raises ``MalformedSchema`` naming the whole schema.
    """
    depth = 0
    for char in schema:
        if char == OPEN_MARKER:
            depth += 1
        elif char == CLOSE_MARKER:
            depth -= 1
        if depth < 0 or depth > 1:
            raise MalformedSchema.delimitation(schema)
    if depth != 0:
        raise MalformedSchema.delimitation(schema)


def check_adjacency(schema: str) -> None:
    """Reject placeholders with no literal text between them (``{a}{b}``).

    Greedy captures cannot split such a span deterministically.
    """
    if CLOSE_MARKER + OPEN_MARKER in schema:
        raise MalformedSchema.adjacent(schema)


def canonicalize(schema: str) -> str:
    """Strip the trailing run of slashes, leaving interior slashes alone.

    A schema made only of slashes collapses to ``/`` so the root stays routable.
    """
    stripped = schema.rstrip("/")
    if not stripped and schema:
        return "/"
    return stripped


def extract_parameter_names(schema: str) -> tuple[str, ...]:
    """Placeholder names in left-to-right order, duplicates preserved."""
    return tuple(_PLACEHOLDER.findall(schema))


def is_valid_parameter_name(name: str) -> bool:
    return _IDENTIFIER.fullmatch(name) is not None


def check_parameter_names(schema: str, names: tuple[str, ...]) -> None:
    """Raise ``MalformedSchema`` for the first name that is not an identifier."""
    for name in names:
        if not is_valid_parameter_name(name):
            raise MalformedSchema.parameter_name(schema, name)


def build_matcher(schema: str) -> re.Pattern[str]:
    """Compile a schema into a pattern with one capture group per placeholder.

    Literal text is escaped. The pattern is meant for ``fullmatch`` so the
    whole requested path must be consumed.
    """
    literals = _PLACEHOLDER.split(schema)[::2]
    pattern = _CAPTURE.join(re.escape(literal) for literal in literals)
    return re.compile(pattern, re.DOTALL)


def compile_schema(schema: str) -> CompiledSchema:
    """Validate *schema* and derive everything a Route needs from it.

    Raises ``MalformedSchema`` on bad delimitation, bad parameter names,
    or adjacent placeholders, in that order of checking.
    """
    check_delimitation(schema)
    canonical = canonicalize(schema)

    names = extract_parameter_names(schema)
    check_parameter_names(schema, names)
    check_adjacency(schema)

    matcher = build_matcher(canonical)
    return CompiledSchema(schema=canonical, parameter_names=names, matcher=matcher)

"""Zenit exception hierarchy.

Shared across Route, Router, and the CLI so every module raises and
catches the same types. Every error here is a setup-time mistake: a
request path that matches nothing is not an error, ``Router.match``
simply returns ``None``.
"""


class ZenitError(Exception):
    """Base for all zenit-specific errors."""


class ConfigurationError(ZenitError):
    """Raised when the route table is built incorrectly.

    Meant to fail fast at startup, never to be recovered from per request.
    """


class MalformedSchema(ConfigurationError, ValueError):  # noqa: N818
    """A route schema has unbalanced, nested, or adjacent placeholders,
    or a placeholder whose name is not a valid identifier.

    ``schema`` is always the schema as written by the caller.
    ``parameter`` is set only for naming errors.
    """

    def __init__(self, message: str, schema: str, parameter: str | None = None) -> None:
        super().__init__(message)
        self.schema = schema
        self.parameter = parameter

    @classmethod
    def delimitation(cls, schema: str) -> "MalformedSchema":
        return cls(f"Malformed schema: {schema}", schema)

    @classmethod
    def adjacent(cls, schema: str) -> "MalformedSchema":
        return cls(f"Adjacent parameters without separator: {schema}", schema)

    @classmethod
    def parameter_name(cls, schema: str, name: str) -> "MalformedSchema":
        return cls(f"Invalid parameter name: '{name}'", schema, parameter=name)


class DuplicateRouteName(ConfigurationError, ValueError):  # noqa: N818
    """A route name is already registered in this router (any method)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Route name already in use: '{name}'")
        self.name = name


class RouterFrozenError(ConfigurationError):
    """The router was frozen and can no longer be mutated."""

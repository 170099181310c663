"""HTTP method symbols.

Members compare by identity: ``Method.GET == "GET"`` is ``False``.
Use :meth:`Method.parse` at the edges where methods arrive as text.
"""

from enum import Enum


class Method(Enum):
    """The closed set of HTTP methods a route can be bound to."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, text: str) -> "Method":
        """Look up a method by name, ignoring case and surrounding whitespace.

        Raises ``ValueError`` for anything outside the supported set.
        """
        try:
            return cls[text.strip().upper()]
        except KeyError:
            allowed = ", ".join(m.value for m in cls)
            msg = f"Unsupported HTTP method {text!r}. Expected one of: {allowed}"
            raise ValueError(msg) from None

"""HTTP vocabulary shared by the routing table."""

from zenit.http.method import Method

__all__ = ["Method"]

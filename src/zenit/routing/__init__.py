"""Routing — schema compilation and an ordered, first-match route table.

Routes are compiled when constructed, registered during setup, and
looked up read-only afterwards.
"""

from zenit.routing.route import MatchResult, Route
from zenit.routing.router import Router

__all__ = ["MatchResult", "Route", "Router"]

"""Tests for zenit.errors — exception hierarchy and error messages."""

import pytest

from zenit.errors import (
    ConfigurationError,
    DuplicateRouteName,
    MalformedSchema,
    RouterFrozenError,
    ZenitError,
)
from zenit.http.method import Method
from zenit.routing.route import Route
from zenit.routing.router import Router


class TestHierarchy:
    def test_configuration_error_is_zenit_error(self) -> None:
        assert issubclass(ConfigurationError, ZenitError)

    def test_malformed_schema_is_configuration_error(self) -> None:
        assert issubclass(MalformedSchema, ConfigurationError)
        assert issubclass(MalformedSchema, ValueError)

    def test_duplicate_route_name_is_configuration_error(self) -> None:
        assert issubclass(DuplicateRouteName, ConfigurationError)
        assert issubclass(DuplicateRouteName, ValueError)

    def test_router_frozen_is_configuration_error(self) -> None:
        assert issubclass(RouterFrozenError, ConfigurationError)


class TestMalformedSchema:
    def test_delimitation(self) -> None:
        err = MalformedSchema.delimitation("/id}")
        assert str(err) == "Malformed schema: /id}"
        assert err.schema == "/id}"
        assert err.parameter is None

    def test_parameter_name(self) -> None:
        err = MalformedSchema.parameter_name("/{42}", "42")
        assert str(err) == "Invalid parameter name: '42'"
        assert err.schema == "/{42}"
        assert err.parameter == "42"

    def test_adjacent(self) -> None:
        err = MalformedSchema.adjacent("/{a}{b}")
        assert str(err) == "Adjacent parameters without separator: /{a}{b}"


class TestDuplicateRouteName:
    def test_message(self) -> None:
        err = DuplicateRouteName("home")
        assert str(err) == "Route name already in use: 'home'"
        assert err.name == "home"


class TestCaughtAsBase:
    def test_route_construction(self) -> None:
        with pytest.raises(ZenitError):
            Route(Method.GET, "/{oops", "broken")

    def test_registration(self) -> None:
        r = Router()
        r.register(Route(Method.GET, "/", "home"), None)
        with pytest.raises(ConfigurationError):
            r.register(Route(Method.GET, "/", "home"), None)

"""Tests for zenit.cli — entrypoint, ``routes`` and ``match`` commands."""

import logging
import sys
import types
from collections.abc import Iterator

import pytest

from zenit.cli import main
from zenit.config import RouterConfig
from zenit.http.method import Method
from zenit.routing.route import Route
from zenit.routing.router import Router


def show_article() -> str:
    return "article"


def list_users() -> str:
    return "users"


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """The CLI configures logging globally; undo it after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    zenit_level = logging.getLogger("zenit").level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    logging.getLogger("zenit").setLevel(zenit_level)


@pytest.fixture
def _fake_urls_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module exposing a populated router on sys.modules."""
    router = Router()
    router.register(Route(Method.GET, "/users", "user_list"), list_users)
    router.register(Route(Method.GET, "/{article}/page-{page}", "article_page"), show_article)
    router.register(Route(Method.POST, "/users", "user_create"), list_users)

    mod = types.ModuleType("_fake_zenit_urls")
    mod.router = router  # type: ignore[attr-defined]
    mod.empty = Router()  # type: ignore[attr-defined]
    mod.debug = Router(RouterConfig(log_level="debug"))  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_zenit_urls", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_match_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_router(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_match_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_zenit_urls", "GET"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "zenit" in captured.out


@pytest.mark.usefixtures("_fake_urls_module")
class TestRoutesCommand:
    def test_lists_routes_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_zenit_urls"])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].split() == ["METHOD", "SCHEMA", "NAME", "HANDLER"]
        assert set(lines[1]) == {"-"}
        assert lines[2].split() == ["GET", "/users", "user_list", "list_users"]
        assert lines[3].split() == [
            "GET",
            "/{article}/page-{page}",
            "article_page",
            "show_article",
        ]
        assert lines[4].split() == ["POST", "/users", "user_create", "list_users"]

    def test_empty_router(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_zenit_urls:empty"])
        assert capsys.readouterr().out.strip() == "No routes registered."

    def test_unresolvable(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_zenit_urls:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


@pytest.mark.usefixtures("_fake_urls_module")
class TestMatchCommand:
    def test_hit_prints_parameters(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "_fake_zenit_urls", "get", "/tdd/page-2"])
        out = capsys.readouterr().out.splitlines()

        assert out[0] == "GET /tdd/page-2 -> article_page"
        assert out[1:] == ["  article = tdd", "  page = 2"]

    def test_literal_hit(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "_fake_zenit_urls", "POST", "/users"])
        assert capsys.readouterr().out.strip() == "POST /users -> user_create"

    def test_miss_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_zenit_urls", "DELETE", "/users"])
        assert exc_info.value.code == 1
        assert "No match for DELETE /users" in capsys.readouterr().out

    def test_unknown_method(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_zenit_urls", "BREW", "/users"])
        assert exc_info.value.code == 1
        assert "Unsupported HTTP method" in capsys.readouterr().err


@pytest.mark.usefixtures("_fake_urls_module")
class TestLogLevel:
    def test_explicit_level(self) -> None:
        main(["--log-level", "debug", "routes", "_fake_zenit_urls:empty"])
        assert logging.getLogger("zenit").level == logging.DEBUG

    def test_router_config_level(self) -> None:
        main(["routes", "_fake_zenit_urls:debug"])
        assert logging.getLogger("zenit").level == logging.DEBUG

    def test_default_level(self) -> None:
        main(["routes", "_fake_zenit_urls:empty"])
        assert logging.getLogger("zenit").level == logging.WARNING

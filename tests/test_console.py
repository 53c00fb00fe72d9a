"""Tests for the artisan CLI."""

import textwrap

import pytest
from sanic import Sanic

from novasanic.console.artisan import Artisan, main
from novasanic.support import Config


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.setattr(Sanic, "test_mode", True)

    controllers = tmp_path / "app" / "Controllers"
    controllers.mkdir(parents=True)
    (controllers / "Blog.py").write_text(textwrap.dedent("""
        class Blog:
            async def index(self, request):
                return "blog"

            async def show(self, request, post_id):
                return post_id
    """))

    routes = tmp_path / "routes"
    routes.mkdir()
    (routes / "web.py").write_text(textwrap.dedent("""
        def register(router):
            router.get('post/(:num)', 'blog/show/$1')
    """))

    Config.set("session.DRIVER", "array")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestArtisan:
    def test_discovers_builtin_commands(self) -> None:
        commands = Artisan().commands
        assert "route:list" in commands
        assert "controller:list" in commands

    def test_help(self, capsys) -> None:
        assert main(["artisan"]) == 0
        assert "route:list" in capsys.readouterr().out

    def test_unknown_command(self, capsys) -> None:
        assert main(["artisan", "nope"]) == 1
        assert "Unknown command: nope" in capsys.readouterr().out

    def test_parse_args(self) -> None:
        assert Artisan._parse_args(["--verbose", "--format=json", "plain"]) == {
            "verbose": True,
            "format": "json",
        }


class TestListCommands:
    def test_route_list(self, project, capsys) -> None:
        assert main(["artisan", "route:list"]) == 0

        out = capsys.readouterr().out
        assert "post/(:num)" in out
        assert "blog/show/$1" in out
        assert "Showing 1 routes" in out

    def test_controller_list(self, project, capsys) -> None:
        assert main(["artisan", "controller:list"]) == 0

        out = capsys.readouterr().out
        assert "App.Controllers.Blog" in out
        assert "index, show" in out

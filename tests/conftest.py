"""Shared fixtures: fake requests, controller trees and a clean Config."""

import textwrap
from pathlib import Path
from types import SimpleNamespace

import pytest

from novasanic.routing import AutoDispatcher, ControllerRegistry, Router
from novasanic.support import Config


def _make_request(path: str = "/", method: str = "GET", cookies: dict | None = None):
    """The parts of a Sanic request the router and middlewares read."""
    return SimpleNamespace(
        path=path,
        method=method,
        cookies=cookies or {},
        ctx=SimpleNamespace(),
    )


def _write_controller(app_path: Path, relative: str, source: str) -> Path:
    """Write <app_path>/<relative>.py and create its directories."""
    file_path = app_path / f"{relative}.py"
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(textwrap.dedent(source), encoding="utf-8")
    return file_path


@pytest.fixture(autouse=True)
def clean_config():
    Config.clear_runtime_overrides()
    yield
    Config.clear_runtime_overrides()


@pytest.fixture
def app_path(tmp_path: Path) -> Path:
    """An application tree with a few controllers and a module."""
    app = tmp_path / "app"

    _write_controller(app, "Controllers/Welcome", """
        class Welcome:
            async def index(self, request):
                return "<h1>Welcome</h1>"
    """)
    _write_controller(app, "Controllers/Blog", """
        class Blog:
            async def index(self, request):
                return "blog index"

            async def show(self, request, post_id=None):
                return f"post {post_id}"

            def sync_list(self, request, *args):
                return {"args": list(args)}

            async def _secret(self, request):
                return "hidden"
    """)
    _write_controller(app, "Controllers/Admin/Users", """
        class Users:
            async def index(self, request):
                return "admin users"

            async def edit(self, request, user_id):
                return f"edit {user_id}"
    """)
    _write_controller(app, "Modules/Clients/Controllers/Clients", """
        class Clients:
            async def index(self, request):
                return "clients index"

            async def view(self, request, client_id):
                return f"client {client_id}"
    """)
    _write_controller(app, "Modules/Clients/Controllers/Invoices", """
        class Invoices:
            async def index(self, request):
                return "invoices"
    """)
    return app


@pytest.fixture
def registry(app_path: Path) -> ControllerRegistry:
    return ControllerRegistry(app_path).scan()


@pytest.fixture
def router(registry: ControllerRegistry, tmp_path: Path) -> Router:
    public = tmp_path / "public"
    public.mkdir()
    return Router(AutoDispatcher(registry), asset_path=public)


@pytest.fixture
def make_request():
    return _make_request


@pytest.fixture
def write_controller():
    return _write_controller

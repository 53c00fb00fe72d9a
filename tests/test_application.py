"""Tests for novasanic.application: the container and the default providers."""

import textwrap

import pytest
from sanic import Sanic

from novasanic.application import Application
from novasanic.routing import ControllerRegistry, Router
from novasanic.service_provider import ServiceProvider
from novasanic.support import Config


@pytest.fixture(autouse=True)
def sanic_test_mode(monkeypatch):
    monkeypatch.setattr(Sanic, "test_mode", True)


@pytest.fixture
def base_path(tmp_path):
    controllers = tmp_path / "app" / "Controllers"
    controllers.mkdir(parents=True)
    (controllers / "Welcome.py").write_text(textwrap.dedent("""
        class Welcome:
            async def index(self, request):
                return "home"

            async def greet(self, request, name):
                return f"hello {name}"
    """))

    routes = tmp_path / "routes"
    routes.mkdir()
    (routes / "web.py").write_text(textwrap.dedent("""
        def register(router):
            router.get('hi/(:any)', 'welcome/greet/$1')
    """))

    (tmp_path / "public").mkdir()
    Config.set("session.DRIVER", "array")
    return tmp_path


class TestContainer:
    def test_singleton_factory_is_lazy_and_cached(self, base_path) -> None:
        app = Application(base_path, providers=[])
        calls = []
        app.singleton("thing", lambda app: calls.append(1) or object())

        assert calls == []
        assert app.make("thing") is app.make("thing")
        assert calls == [1]

    def test_singleton_instance(self, base_path) -> None:
        app = Application(base_path, providers=[])
        value = {"a": 1}
        app.singleton("value", value)
        assert app.make("value") is value

    def test_bind_creates_each_time(self, base_path) -> None:
        app = Application(base_path, providers=[])
        app.bind("thing", lambda app: object())
        assert app.make("thing") is not app.make("thing")

    def test_unknown_binding(self, base_path) -> None:
        app = Application(base_path, providers=[])
        assert not app.has("nope")
        with pytest.raises(KeyError):
            app.make("nope")

    def test_provider_returning_false_is_not_booted(self, base_path) -> None:
        booted = []

        class Skipped(ServiceProvider):
            def register(self):
                return False

            def boot(self):
                booted.append(self)

        app = Application(base_path, providers=[])
        app.register_provider(Skipped)
        app.boot()

        assert booted == []


class TestDefaultProviders:
    @pytest.fixture
    def app(self, base_path) -> Application:
        app = Application(base_path)
        app.boot()
        return app

    def test_routing_services(self, app: Application) -> None:
        assert isinstance(app.make("router"), Router)
        assert isinstance(app.make("controller_registry"), ControllerRegistry)
        assert app.make("controller_registry").has("App.Controllers.Welcome")

    def test_route_file_is_loaded(self, app: Application) -> None:
        patterns = [route.pattern for route in app.make("router").get_routes()]
        assert patterns == ["hi/(:any)"]

    def test_middlewares_in_order(self, app: Application) -> None:
        assert app.make("middleware_manager").names() == ["session", "language"]

    def test_boot_is_idempotent(self, app: Application) -> None:
        app.boot()
        assert len(app.make("router").get_routes()) == 1

    def test_sanic_app_name(self, app: Application) -> None:
        assert app.sanic_app.name == "novasanic"

    async def test_dispatch_through_container(self, app: Application, make_request) -> None:
        router = app.make("router")

        routed = await router.dispatch(make_request("/hi/ann"))
        home = await router.dispatch(make_request("/"))

        assert routed.response.body == b"hello ann"
        assert home.response.body == b"home"

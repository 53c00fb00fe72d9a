"""Tests for novasanic.routing.router: registration and the dispatch pipeline."""

import json

import pytest

from novasanic.defaults import HTTP_METHODS
from novasanic.routing import Router


def hello(request, name):
    return f"hi {name}"


class TestRegistration:
    def test_any_accepts_every_verb(self, router: Router) -> None:
        assert router.register("any", "x").get_methods() == HTTP_METHODS
        assert router.register("ANY", "y").get_methods() == HTTP_METHODS

    def test_verbs_are_normalized(self, router: Router) -> None:
        route = router.register(["post", "get"], "contact")
        assert route.get_methods() == ["GET", "POST"]

    def test_unknown_verbs_are_dropped(self, router: Router) -> None:
        route = router.register(["get", "FETCH"], "x")
        assert route.get_methods() == ["GET"]

    def test_only_unknown_verbs_widen_to_all(self, router: Router) -> None:
        route = router.register("FETCH", "x")
        assert route.get_methods() == HTTP_METHODS

    @pytest.mark.parametrize("verb", ["get", "post", "put", "patch", "delete", "options"])
    def test_verb_helpers(self, router: Router, verb: str) -> None:
        route = getattr(router, verb)("x", "y")
        assert route.get_methods() == [verb.upper()]

    def test_match_helper(self, router: Router) -> None:
        route = router.match(["GET", "PUT"], "x", "y")
        assert route.get_methods() == ["GET", "PUT"]

    def test_routes_keep_registration_order(self, router: Router) -> None:
        a = router.get("a", "x")
        b = router.get("b", "x")
        assert router.get_routes() == [a, b]

    def test_group_prefixes_patterns(self, router: Router) -> None:
        def admin_routes():
            router.get("/users", "admin/users/index")
            router.group({"prefix": "/reports/"}, lambda: router.get("daily", "x"))

        router.group({"prefix": "admin"}, admin_routes)
        after = router.get("home", "x")

        patterns = [route.pattern for route in router.get_routes()]
        assert patterns == ["admin/users", "admin/reports/daily", "home"]
        assert after.pattern == "home"

    def test_group_stack_is_unwound_on_error(self, router: Router) -> None:
        def broken():
            router.get("ok", "x")
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            router.group({"prefix": "api"}, broken)

        assert router.get("later", "x").pattern == "later"


class TestDispatch:
    async def test_direct_route(self, router: Router, make_request) -> None:
        router.get("hello/(:any)", hello)

        result = await router.dispatch(make_request("/hello/bob"))

        assert result.handled is True
        assert result.response.status == 200
        assert result.response.body == b"hi bob"

    async def test_async_direct_route(self, router: Router, make_request) -> None:
        async def greet(request):
            return {"greeting": "hello"}

        router.post("greet", greet)

        result = await router.dispatch(make_request("/greet", method="POST"))

        assert json.loads(result.response.body) == {"greeting": "hello"}

    async def test_direct_route_returning_none_is_empty(self, router: Router, make_request) -> None:
        router.delete("items/(:num)", lambda request, item_id: None)

        result = await router.dispatch(make_request("/items/3", method="DELETE"))

        assert result.handled is True
        assert result.response.status == 204

    async def test_rewrite_route_auto_dispatches(self, router: Router, make_request) -> None:
        router.get("post/(:num)", "blog/show/$1")

        result = await router.dispatch(make_request("/post/12"))

        assert result.handled is True
        assert result.response.body == b"post 12"

    async def test_root_rewrite(self, router: Router, make_request) -> None:
        router.get("/", "blog")

        result = await router.dispatch(make_request("/"))

        assert result.response.body == b"blog index"

    async def test_first_matching_route_wins(self, router: Router, make_request) -> None:
        router.get("blog/(:any)", "blog/show/$1")
        router.get("blog/(:num)", lambda request, n: "never")

        result = await router.dispatch(make_request("/blog/5"))

        assert result.response.body == b"post 5"

    async def test_matched_route_is_recorded(self, router: Router, make_request) -> None:
        route = router.get("hello/(:any)", hello)
        request = make_request("/hello/ann")

        await router.dispatch(request)

        assert router.matched_route is route
        assert request.ctx.route is route

    async def test_method_mismatch_falls_through(self, router: Router, make_request) -> None:
        router.post("hello/(:any)", hello)

        result = await router.dispatch(make_request("/hello/bob"))

        assert result.handled is False
        assert result.response.status == 404

    async def test_auto_dispatch_without_routes(self, router: Router, make_request) -> None:
        result = await router.dispatch(make_request("/blog/show/9"))

        assert result.handled is True
        assert result.response.body == b"post 9"

    async def test_default_controller_for_root(self, router: Router, make_request) -> None:
        result = await router.dispatch(make_request("/"))

        assert result.response.body == b"<h1>Welcome</h1>"

    async def test_percent_encoded_path_is_decoded(self, router: Router, make_request) -> None:
        router.get("hello/(:any)", hello)

        result = await router.dispatch(make_request("/hello/J%C3%BCrgen"))

        assert result.response.body == "hi Jürgen".encode()

    async def test_not_found_page(self, router: Router, make_request) -> None:
        result = await router.dispatch(make_request("/nothing/here"))

        assert result.handled is False
        assert result.response.status == 404
        assert b"Page not found" in result.response.body
        assert b"nothing/here" in result.response.body

    async def test_not_found_page_escapes_uri(self, router: Router, make_request) -> None:
        result = await router.dispatch(make_request('/<script>"x"</script>'))

        body = result.response.body.decode()
        assert "<script>" not in body
        assert "&lt;script&gt;&quot;x&quot;&lt;/script&gt;" in body


class TestAssets:
    async def test_serves_file_for_get(self, router: Router, make_request) -> None:
        css = router.asset_path / "css" / "app.css"
        css.parent.mkdir()
        css.write_text("body { color: red; }")

        result = await router.dispatch(make_request("/css/app.css"))

        assert result.handled is True
        assert result.response.status == 200
        assert result.response.body == b"body { color: red; }"

    async def test_assets_win_over_routes(self, router: Router, make_request) -> None:
        (router.asset_path / "robots.txt").write_text("User-agent: *")
        router.get("robots.txt", lambda request: "route")

        result = await router.dispatch(make_request("/robots.txt"))

        assert result.response.body == b"User-agent: *"

    async def test_assets_only_for_get(self, router: Router, make_request) -> None:
        (router.asset_path / "robots.txt").write_text("User-agent: *")

        result = await router.dispatch(make_request("/robots.txt", method="POST"))

        assert result.handled is False
        assert result.response.status == 404

    async def test_directories_are_not_served(self, router: Router, make_request) -> None:
        (router.asset_path / "images").mkdir()

        result = await router.dispatch(make_request("/images"))

        assert result.handled is False

    async def test_no_escape_from_asset_directory(self, router: Router, make_request) -> None:
        (router.asset_path.parent / "secret.txt").write_text("secret")

        result = await router.dispatch(make_request("/../secret.txt"))

        assert result.response.status == 404
        assert result.response.body != b"secret"

    async def test_no_asset_path(self, registry, make_request) -> None:
        from novasanic.routing import AutoDispatcher

        router = Router(AutoDispatcher(registry))

        assert await router.dispatch_file("anything.txt") is None

    async def test_null_byte_falls_through_to_routes(self, router: Router, make_request) -> None:
        router.get("(:any)", lambda request, slug: f"slug {len(slug)}")

        result = await router.dispatch(make_request("/foo%00bar"))

        assert result.handled is True
        assert result.response.body == b"slug 7"

    async def test_overlong_name_falls_through_to_routes(self, router: Router, make_request) -> None:
        router.get("(:any)", lambda request, slug: f"slug {len(slug)}")

        result = await router.dispatch(make_request("/" + "a" * 300))

        assert result.handled is True
        assert result.response.body == b"slug 300"


class TestHandlerArity:
    async def test_surplus_segments_are_dropped_for_controllers(
        self, router: Router, make_request
    ) -> None:
        result = await router.dispatch(make_request("/blog/index/extra"))

        assert result.handled is True
        assert result.response.body == b"blog index"

    async def test_surplus_captures_are_dropped_for_closures(
        self, router: Router, make_request
    ) -> None:
        router.get("archive/(:num)/(:num)", lambda request, year: f"year {year}")

        result = await router.dispatch(make_request("/archive/2024/06"))

        assert result.response.body == b"year 2024"

    async def test_missing_required_segment_is_not_found(self, router: Router, make_request) -> None:
        result = await router.dispatch(make_request("/admin/users/edit"))

        assert result.handled is False
        assert result.response.status == 404

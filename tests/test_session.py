"""Tests for novasanic.session: the session manager and its stores."""

import json
import time

import pytest

from novasanic.session import (
    ArraySessionStore,
    CookieSessionStore,
    FileSessionStore,
    SessionManager,
)


class TestSessionManager:
    async def test_start_loads_from_store(self) -> None:
        store = ArraySessionStore()
        await store.write("abc", {"user_id": 7})

        session = SessionManager(store, "abc")
        await session.start()

        assert session.get("user_id") == 7
        assert session.is_dirty() is False

    async def test_put_get_forget(self) -> None:
        session = SessionManager(ArraySessionStore(), "abc")
        await session.start()

        session.put("a", 1)
        session["b"] = 2

        assert session.has("a")
        assert "b" in session
        assert session["b"] == 2
        assert session.is_dirty() is True

        session.forget(["a", "b"])
        assert session.all() == {}

    async def test_pull_removes_value(self) -> None:
        session = SessionManager(ArraySessionStore(), "abc")
        session.put("flash", "saved")

        assert session.pull("flash") == "saved"
        assert session.pull("flash", "gone") == "gone"

    async def test_save_writes_only_when_dirty(self) -> None:
        store = ArraySessionStore()
        session = SessionManager(store, "abc")
        await session.start()

        await session.save()
        assert await store.read("abc") == {}

        session.put("language", "Fr")
        await session.save()

        assert await store.read("abc") == {"language": "Fr"}
        assert session.is_dirty() is False

    async def test_regenerate_destroys_old_session(self) -> None:
        store = ArraySessionStore()
        await store.write("old", {"user_id": 1})

        session = SessionManager(store, "old")
        await session.start()
        new_id = session.regenerate(destroy_old=True)
        await session.save()

        assert new_id != "old"
        assert session.get_id() == new_id
        assert await store.read("old") == {}
        assert await store.read(new_id) == {"user_id": 1}

    def test_all_hides_internal_keys(self) -> None:
        session = SessionManager(ArraySessionStore(), "abc")
        session.put("_token", "x")
        session.put("name", "ann")

        assert session.all() == {"name": "ann"}
        assert session.has("_token")


class TestFileSessionStore:
    async def test_write_read_destroy(self, tmp_path) -> None:
        store = FileSessionStore(tmp_path / "sessions", lifetime=60)

        assert await store.write("abc", {"n": 1}) is True
        assert await store.read("abc") == {"n": 1}

        await store.destroy("abc")
        assert await store.read("abc") == {}

    async def test_expired_session_reads_empty(self, tmp_path) -> None:
        store = FileSessionStore(tmp_path, lifetime=60)
        (tmp_path / "session_old.json").write_text(
            json.dumps({"data": {"n": 1}, "_expire_at": time.time() - 1})
        )

        assert await store.read("old") == {}
        assert not (tmp_path / "session_old.json").exists()

    async def test_gc_removes_expired_and_corrupt(self, tmp_path) -> None:
        store = FileSessionStore(tmp_path, lifetime=60)
        await store.write("fresh", {"n": 1})
        (tmp_path / "session_stale.json").write_text(
            json.dumps({"data": {}, "_expire_at": time.time() - 10})
        )
        (tmp_path / "session_corrupt.json").write_text("{")

        assert await store.gc(60) == 2
        assert await store.read("fresh") == {"n": 1}

    async def test_unserializable_data_fails_write(self, tmp_path) -> None:
        store = FileSessionStore(tmp_path, lifetime=60)
        assert await store.write("abc", {"obj": object()}) is False


class TestCookieSessionStore:
    async def test_signed_round_trip(self) -> None:
        store = CookieSessionStore("secret")
        cookie = store.serialize({"language": "De"})

        assert await store.read(cookie) == {"language": "De"}

    @pytest.mark.parametrize("cookie", ["", "garbage", "eyJhIjoxfQ.bad.sig"])
    async def test_bad_cookie_reads_empty(self, cookie: str) -> None:
        assert await CookieSessionStore("secret").read(cookie) == {}

    async def test_other_key_is_rejected(self) -> None:
        cookie = CookieSessionStore("one").serialize({"a": 1})
        assert await CookieSessionStore("two").read(cookie) == {}

"""Tests for novasanic.language: language selection and translation lookup."""

import json
from pathlib import Path

import pytest

from novasanic.defaults import LANGUAGE_CODES
from novasanic.exceptions import LanguageLoadException
from novasanic.language import Language
from novasanic.session import ArraySessionStore, SessionManager
from novasanic.support import Str


def write_language(path: Path, code: str, name: str, strings) -> None:
    directory = path / code
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{name}.json").write_text(json.dumps(strings), encoding="utf-8")


@pytest.fixture
def language_path(tmp_path: Path) -> Path:
    path = tmp_path / "Language"
    write_language(path, "En", "welcome", {"title": "Welcome", "bye": "Goodbye", "empty": ""})
    write_language(path, "Fr", "welcome", {"title": "Bienvenue", "empty": ""})
    return path


@pytest.fixture
def session() -> SessionManager:
    return SessionManager(ArraySessionStore(), "test-session")


class TestInit:
    def test_cookie_sets_session_language(self, session, language_path) -> None:
        language = Language(session=session, cookies={"nova_language": "fr"}, path=language_path)
        language.init()
        assert session.get("language") == "Fr"

    def test_existing_session_language_is_kept(self, session, language_path) -> None:
        session.put("language", "De")
        language = Language(session=session, cookies={"nova_language": "fr"}, path=language_path)
        language.init()
        assert session.get("language") == "De"

    @pytest.mark.parametrize("cookie", ["xx", "FR", "Fr", ""])
    def test_invalid_cookie_is_ignored(self, session, language_path, cookie: str) -> None:
        language = Language(session=session, cookies={"nova_language": cookie}, path=language_path)
        language.init()
        assert not session.has("language")

    def test_cookie_prefix(self, session, language_path) -> None:
        language = Language(
            session=session, cookies={"site_language": "de"}, path=language_path, cookie_prefix="site_"
        )
        language.init()
        assert session.get("language") == "De"

    def test_without_session(self, language_path) -> None:
        language = Language(cookies={"nova_language": "fr"}, path=language_path)
        language.init()
        assert language.current_code() == "En"


class TestCurrentCode:
    def test_default(self, language_path) -> None:
        assert Language(path=language_path).current_code() == "En"

    def test_configured_default(self, language_path) -> None:
        assert Language(path=language_path, default_code="de").current_code() == "De"

    def test_session_language(self, session, language_path) -> None:
        session.put("language", "Fr")
        assert Language(session=session, path=language_path).current_code() == "Fr"

    def test_explicit_code_wins_over_session(self, session, language_path) -> None:
        session.put("language", "Fr")
        assert Language(session=session, path=language_path).current_code("it") == "It"


class TestLookup:
    def test_get_loaded_key(self, language_path) -> None:
        language = Language(path=language_path)
        language.load("welcome")
        assert language.get("title") == "Welcome"

    def test_missing_key_returns_key(self, language_path) -> None:
        language = Language(path=language_path)
        language.load("welcome")
        assert language.get("no_such_key") == "no_such_key"

    def test_nothing_loaded_returns_key(self, language_path) -> None:
        assert Language(path=language_path).get("title") == "title"

    def test_session_language_is_used(self, session, language_path) -> None:
        session.put("language", "Fr")
        language = Language(session=session, path=language_path)
        language.load("welcome")
        assert language.get("title") == "Bienvenue"

    def test_falls_back_to_default_language(self, session, language_path) -> None:
        language = Language(session=session, path=language_path)
        language.load("welcome")

        session.put("language", "Fr")
        language.load("welcome")

        assert language.get("title") == "Bienvenue"
        assert language.get("bye") == "Goodbye"

    def test_empty_value_counts_as_missing(self, language_path) -> None:
        language = Language(path=language_path)
        language.load("welcome")
        assert language.get("empty") == "empty"

    def test_explicit_code(self, language_path) -> None:
        language = Language(path=language_path)
        language.load("welcome", "fr")
        assert language.get("title", "fr") == "Bienvenue"

    @pytest.mark.parametrize("code", LANGUAGE_CODES)
    def test_every_supported_code_loads(self, tmp_path: Path, code: str) -> None:
        directory_name = Str.ucfirst(code)
        write_language(tmp_path, directory_name, "common", {"greeting": f"hello-{code}"})

        language = Language(path=tmp_path)
        language.load("common", code)

        assert language.get("greeting", code) == f"hello-{code}"


class TestShow:
    def test_show_reads_file(self, language_path) -> None:
        assert Language.show("title", "welcome", "fr", path=language_path) == "Bienvenue"

    def test_show_missing_key(self, language_path) -> None:
        assert Language.show("nope", "welcome", path=language_path) == "nope"

    def test_show_uses_session_language(self, session, language_path) -> None:
        session.put("language", "Fr")
        assert Language.show("title", "welcome", session=session, path=language_path) == "Bienvenue"


class TestLoadErrors:
    def test_missing_file(self, language_path) -> None:
        language = Language(path=language_path)

        with pytest.raises(LanguageLoadException) as exc_info:
            language.load("nonexistent")

        assert exc_info.value.code == "En"
        assert exc_info.value.name == "nonexistent"
        assert exc_info.value.status_code == 500

    def test_malformed_file(self, language_path) -> None:
        (language_path / "En" / "broken.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(LanguageLoadException):
            Language(path=language_path).load("broken")

    def test_non_object_file(self, language_path) -> None:
        (language_path / "En" / "list.json").write_text('["a", "b"]', encoding="utf-8")

        with pytest.raises(LanguageLoadException, match="key/value"):
            Language(path=language_path).load("list")

# backend/tests/test_utils_config.py

from movie_fill.utils.config import get_env


def test_get_env_returns_value(monkeypatch):
    monkeypatch.setenv("MOVIE_FILL_TEST_VAR", "  value  ")

    assert get_env("MOVIE_FILL_TEST_VAR", default="fallback") == "value"


def test_get_env_unset_returns_default(monkeypatch):
    monkeypatch.delenv("MOVIE_FILL_TEST_VAR", raising=False)

    assert get_env("MOVIE_FILL_TEST_VAR", default="fallback") == "fallback"
    assert get_env("MOVIE_FILL_TEST_VAR", default="fallback", keep_empty=True) == "fallback"


def test_get_env_empty_value(monkeypatch):
    monkeypatch.setenv("MOVIE_FILL_TEST_VAR", "   ")

    # 空文字は通常「未設定」扱い、keep_empty=True のときだけ空文字のまま返す
    assert get_env("MOVIE_FILL_TEST_VAR", default="fallback") == "fallback"
    assert get_env("MOVIE_FILL_TEST_VAR", default="fallback", keep_empty=True) == ""

import pytest

from config import Settings, load_settings

ENV_VARS = (
    "LOG_LEVEL", "SENTRY_DSN", "CORS_ALLOWED_ORIGINS", "MAX_UPLOAD_BYTES",
    "CV_MIN_WORDS", "CV_MAX_WORDS", "FEEDBACK_TOP_N",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_settings() == Settings()
    assert Settings().cors_allowed_origins == ("*",)
    assert Settings().max_upload_bytes == 5 * 1024 * 1024


def test_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CV_MIN_WORDS", "150")
    monkeypatch.setenv("CV_MAX_WORDS", "900")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example/1")

    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.min_words == 150
    assert settings.max_words == 900
    assert settings.cors_allowed_origins == ("https://a.example", "https://b.example")
    assert settings.sentry_dsn == "https://key@sentry.example/1"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("CV_MIN_WORDS", "many")
    monkeypatch.setenv("FEEDBACK_TOP_N", "")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", " , ")

    settings = load_settings()
    assert settings.min_words == 200
    assert settings.feedback_top_n == 8
    assert settings.cors_allowed_origins == ("*",)


def test_frozen():
    with pytest.raises(AttributeError):
        Settings().min_words = 1

from pathlib import Path

from contextpack.config import Settings


def test_settings_defaults(monkeypatch):
    for name in (
        "DOCS_ZIP_PATH",
        "CHUNK_SIZE",
        "MAX_CONTEXT_CHUNKS",
        "MAX_MESSAGES",
        "MAX_CONVERSATION_AGE",
        "CLEANUP_INTERVAL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.chunk_size == 1000
    assert settings.max_context_chunks == 5
    assert settings.max_messages == 20
    assert settings.max_conversation_age == 3600.0


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DOCS_ZIP_PATH", "/srv/docs.zip")
    monkeypatch.setenv("CHUNK_SIZE", "400")
    monkeypatch.setenv("MAX_CONTEXT_CHUNKS", "3")
    monkeypatch.setenv("MAX_MESSAGES", "8")
    monkeypatch.setenv("MAX_CONVERSATION_AGE", "120")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.docs_zip_path == Path("/srv/docs.zip")
    assert settings.chunk_size == 400
    assert settings.max_context_chunks == 3
    assert settings.max_messages == 8
    assert settings.max_conversation_age == 120.0
    assert settings.log_level == "debug"

from todo_persistence.settings import get_settings


def test_defaults(monkeypatch):
    for name in ("PERSISTENCE_BACKEND", "SQLITE_DB_PATH", "CORS_ALLOW_ORIGINS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.persistence_backend == "memory"
    assert s.sqlite_db_path == "./data/todos.db"
    assert s.cors_allow_origins == ["*"]
    assert s.log_level == "INFO"
    assert s.log_format == "text"


def test_unknown_choices_fall_back(monkeypatch):
    monkeypatch.setenv("PERSISTENCE_BACKEND", "postgres")
    monkeypatch.setenv("LOG_FORMAT", "xml")
    s = get_settings()
    assert s.persistence_backend == "memory"
    assert s.log_format == "text"


def test_explicit_values(monkeypatch):
    monkeypatch.setenv("PERSISTENCE_BACKEND", " SQLite ")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, ,http://b.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    s = get_settings()
    assert s.persistence_backend == "sqlite"
    assert s.cors_allow_origins == ["http://a.test", "http://b.test"]
    assert s.log_level == "DEBUG"
    assert s.log_format == "json"

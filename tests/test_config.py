import pytest

from vehicle_api.app import config


def test_database_url_wins_when_set(monkeypatch):
    monkeypatch.setattr(config, "DATABASE_URL", "postgresql://u:p@db:5432/vehicles")
    assert config.database_url() == "postgresql://u:p@db:5432/vehicles"


def test_database_url_built_from_db_parts(monkeypatch):
    monkeypatch.setattr(config, "DATABASE_URL", None)
    monkeypatch.setattr(config, "DB_USER", "vehicle")
    monkeypatch.setattr(config, "DB_PASSWORD", "secret")
    monkeypatch.setattr(config, "DB_HOST", "db")
    monkeypatch.setattr(config, "DB_PORT", "5433")
    monkeypatch.setattr(config, "DB_NAME", "vehicles")
    assert config.database_url() == "host=db port=5433 dbname=vehicles user=vehicle password=secret"


def test_database_url_omits_empty_password(monkeypatch):
    monkeypatch.setattr(config, "DATABASE_URL", None)
    monkeypatch.setattr(config, "DB_USER", "vehicle")
    monkeypatch.setattr(config, "DB_PASSWORD", None)
    monkeypatch.setattr(config, "DB_HOST", "localhost")
    monkeypatch.setattr(config, "DB_PORT", "5432")
    monkeypatch.setattr(config, "DB_NAME", "vehicles")
    assert config.database_url() == "host=localhost port=5432 dbname=vehicles user=vehicle"


@pytest.mark.parametrize("user,name", [(None, "vehicles"), ("vehicle", None), (None, None)])
def test_database_url_requires_configuration(monkeypatch, user, name):
    monkeypatch.setattr(config, "DATABASE_URL", None)
    monkeypatch.setattr(config, "DB_USER", user)
    monkeypatch.setattr(config, "DB_NAME", name)
    with pytest.raises(RuntimeError):
        config.database_url()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("", []),
        ("https://a.example", ["https://a.example"]),
        (" https://a.example , ,http://localhost:3000 ", ["https://a.example", "http://localhost:3000"]),
    ],
)
def test_cors_origins_splitting(raw, expected):
    assert config.cors_origins(raw) == expected


def test_cors_origins_defaults_to_env_value(monkeypatch):
    monkeypatch.setattr(config, "CORS_ALLOW_ORIGINS", "https://b.example")
    assert config.cors_origins() == ["https://b.example"]

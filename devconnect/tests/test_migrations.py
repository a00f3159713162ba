from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

MIGRATIONS = Path(__file__).resolve().parents[1] / "migrations"


def _config(url):
    # no ini file: keeps alembic from reconfiguring logging mid-suite
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def test_upgrade_creates_tables_and_downgrade_drops_them(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrate.db'}"
    monkeypatch.delenv("ALEMBIC_DATABASE_URL", raising=False)
    monkeypatch.setenv("DATABASE_URL", url)

    command.upgrade(_config(url), "head")

    engine = create_engine(url)
    try:
        insp = inspect(engine)
        assert {"users", "profiles", "alembic_version"} <= set(insp.get_table_names())
        columns = {c["name"] for c in insp.get_columns("profiles")}
        assert {"handle", "skills", "social", "experience", "education"} <= columns
        unique = {ix["name"] for ix in insp.get_indexes("profiles") if ix["unique"]}
        assert "ix_profiles_handle" in unique
    finally:
        engine.dispose()

    command.downgrade(_config(url), "base")

    engine = create_engine(url)
    try:
        assert "profiles" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()


def test_alembic_database_url_wins_over_config(tmp_path, monkeypatch):
    target = f"sqlite:///{tmp_path / 'target.db'}"
    ignored = f"sqlite:///{tmp_path / 'ignored.db'}"
    monkeypatch.setenv("ALEMBIC_DATABASE_URL", target)
    monkeypatch.setenv("DATABASE_URL", ignored)

    command.upgrade(_config(ignored), "head")

    engine = create_engine(target)
    try:
        assert "users" in inspect(engine).get_table_names()
    finally:
        engine.dispose()
    assert not (tmp_path / "ignored.db").exists()

"""
Startup schema upgrade through Alembic.
"""

from sqlalchemy import create_engine, inspect, text

from frameshop.database import Base
from frameshop.main import BASE_REVISION, upgrade_schema

HEAD_REVISION = "9b41d7c3e2a8"


def _sqlite(tmp_path, name):
    url = f"sqlite:///{tmp_path / name}"
    return url, create_engine(url)


def _version(engine):
    with engine.connect() as conn:
        return conn.execute(text("SELECT version_num FROM alembic_version")).scalar()


def test_empty_database_upgrades_to_head(tmp_path):
    url, engine = _sqlite(tmp_path, "fresh.db")
    assert upgrade_schema(engine, url) is True

    insp = inspect(engine)
    assert {"orders", "payments", "alembic_version"} <= set(insp.get_table_names())
    columns = {c["name"] for c in insp.get_columns("orders")}
    assert {"amount_paid", "payment_status", "internal_notes"} <= columns
    assert _version(engine) == HEAD_REVISION
    engine.dispose()


def test_create_all_database_is_stamped_then_upgraded(tmp_path):
    url, engine = _sqlite(tmp_path, "legacy.db")
    Base.metadata.create_all(bind=engine)
    assert "alembic_version" not in inspect(engine).get_table_names()

    assert upgrade_schema(engine, url) is True
    assert BASE_REVISION != HEAD_REVISION
    assert _version(engine) == HEAD_REVISION
    engine.dispose()


def test_missing_alembic_ini_skips_upgrade(tmp_path):
    url, engine = _sqlite(tmp_path, "skipped.db")
    assert upgrade_schema(engine, url, ini_path=str(tmp_path / "alembic.ini")) is False
    assert inspect(engine).get_table_names() == []
    engine.dispose()

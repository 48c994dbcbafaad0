import pytest

from ascend_upsc.core.config import Settings
from ascend_upsc.db.init_db import initialize_database
from ascend_upsc.db.session import engine_from_settings, make_session_factory


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DB_TYPE="sqlite",
        STORAGE_MODE="portable",
        INSTALL_ROOT=tmp_path,
        LOG_DIR=tmp_path / "logs",
    )


@pytest.fixture
def db_path(settings):
    return settings.INSTALL_ROOT / settings.DB_FILENAME


@pytest.fixture
def seeded_settings(settings):
    assert initialize_database(settings) is True
    return settings


@pytest.fixture
def db(seeded_settings):
    engine = engine_from_settings(seeded_settings)
    SessionLocal = make_session_factory(engine)
    session = SessionLocal()
    yield session
    session.rollback()
    session.close()
    engine.dispose()

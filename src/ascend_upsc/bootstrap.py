# src/ascend_upsc/bootstrap.py
"""
应用启动时准备存储后端：根据配置选择内嵌 SQLite 或 PostgreSQL，
确保表结构存在，并返回应用数据访问层应使用的数据库 URL。
"""
import logging
import sys

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from ascend_upsc.core.config import Settings, database_url, resolve_sqlite_path
from ascend_upsc.core.logging import setup_logging
from ascend_upsc.db.init_db import DatabaseInitError, initialize_database
from ascend_upsc.db.models import Base
from ascend_upsc.db.session import engine_from_settings

logger = logging.getLogger(__name__)


def _prepare_sqlite(settings: Settings) -> str:
    db_path = resolve_sqlite_path(settings)
    logger.info("%s mode: using SQLite database at %s", settings.STORAGE_MODE.capitalize(), db_path)
    initialize_database(settings)
    return database_url(settings)


def _prepare_postgres(settings: Settings) -> str:
    logger.info("Using PostgreSQL database")
    engine = engine_from_settings(settings)
    try:
        # 只补建缺失的表，不写入种子数据
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except SQLAlchemyError as e:
        raise DatabaseInitError(f"Failed to prepare PostgreSQL schema: {e}") from e
    finally:
        engine.dispose()
    return database_url(settings)


def prepare_storage(settings: Settings) -> str:
    if settings.DB_TYPE == "sqlite":
        return _prepare_sqlite(settings)
    return _prepare_postgres(settings)


def main() -> int:
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.LOG_DIR, settings.LOG_LEVEL)
    try:
        prepare_storage(settings)
    except DatabaseInitError as e:
        logger.error("Error initializing database: %s", e)
        return 1
    logger.info("Storage ready (%s)", settings.DB_TYPE)
    return 0


if __name__ == "__main__":
    sys.exit(main())

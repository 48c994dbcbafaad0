# src/ascend_upsc/db/session.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ascend_upsc.core.config import Settings, database_url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite 默认不执行外键约束，每个新连接都要单独打开
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def make_engine(url: str, echo: bool = False) -> Engine:
    """创建数据库引擎；SQLite 连接会自动开启外键约束"""
    engine = create_engine(url, echo=echo)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def engine_from_settings(settings: Settings) -> Engine:
    return make_engine(database_url(settings), echo=settings.SQL_ECHO)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

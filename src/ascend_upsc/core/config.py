# src/ascend_upsc/core/config.py
import os
import sys
from pathlib import Path
from typing import Literal, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings

APP_DIR_NAME = "ascend-upsc"


class Settings(BaseSettings):
    # sqlite: 内嵌数据库文件; postgres: 网络数据库服务
    DB_TYPE: Literal["sqlite", "postgres"] = "sqlite"
    DATABASE_URL: Optional[str] = None

    # portable: 数据库放在安装目录; user: 放在用户配置目录
    STORAGE_MODE: Literal["portable", "user"] = "portable"
    INSTALL_ROOT: Path = Path(".")
    DB_FILENAME: str = "ascend-upsc.db"
    SQLITE_DB_PATH: Optional[Path] = None
    USER_DATA_DIR: Optional[Path] = None

    LOG_DIR: Path = Path("logs")
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"

    @model_validator(mode="after")
    def _check_backend(self):
        if self.DB_TYPE == "postgres" and not self.DATABASE_URL:
            raise ValueError("DATABASE_URL is required when DB_TYPE is 'postgres'")
        return self


def user_data_dir(settings: Settings) -> Path:
    """Per-user application data directory for the current platform."""
    if settings.USER_DATA_DIR is not None:
        return settings.USER_DATA_DIR
    if os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"]) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path.home() / f".{APP_DIR_NAME}"


def resolve_sqlite_path(settings: Settings) -> Path:
    """
    返回内嵌数据库文件的位置。
    显式的 SQLITE_DB_PATH 优先；否则由 STORAGE_MODE 决定。
    """
    if settings.SQLITE_DB_PATH is not None:
        return settings.SQLITE_DB_PATH
    if settings.STORAGE_MODE == "portable":
        return settings.INSTALL_ROOT / settings.DB_FILENAME
    return user_data_dir(settings) / "db" / settings.DB_FILENAME


def database_url(settings: Settings) -> str:
    if settings.DB_TYPE == "postgres":
        return settings.DATABASE_URL
    return f"sqlite:///{resolve_sqlite_path(settings)}"

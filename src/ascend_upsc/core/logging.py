# src/ascend_upsc/core/logging.py
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

LOG_FILE_NAME = "app.log"


def setup_logging(log_dir: Union[str, Path] = "logs", level: Union[str, int] = logging.INFO):
    """配置全局日志记录器"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 防止重复添加handler
    if root_logger.hasHandlers():
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=5*1024*1024, backupCount=2, encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.info("日志系统已成功初始化。")

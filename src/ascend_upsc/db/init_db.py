# src/ascend_upsc/db/init_db.py
"""
首次运行前的数据库初始化：建表并写入参考数据和示例数据。

数据库文件是否存在是唯一的“已初始化”标志：文件存在时什么都不做；
初始化失败时会删除写了一半的文件，保证下次运行仍会完整初始化。
"""
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ascend_upsc.core.config import Settings, resolve_sqlite_path
from ascend_upsc.core.logging import setup_logging
from ascend_upsc.crud.crud_catalog import create_subject, create_topic, create_subtopic
from ascend_upsc.crud.crud_question import (
    create_test, create_question, get_or_create_tag, create_flashcard, get_questions_for_test
)
from ascend_upsc.crud.crud_settings import set_app_setting
from ascend_upsc.db import seed_data
from ascend_upsc.db.models import Base
from ascend_upsc.db.session import make_engine, make_session_factory

logger = logging.getLogger(__name__)


class DatabaseInitError(RuntimeError):
    """数据库初始化失败（建表、写入数据或文件系统错误）"""


def seed_database(db: Session) -> None:
    """
    按外键依赖顺序写入种子数据：学科 -> 主题 -> 子主题 -> 试卷 -> 题目 -> 标签/卡片 -> 设置。
    """
    subject_ids = {}
    for name in seed_data.SUBJECTS:
        subject_ids[name] = create_subject(db, name).id

    topic_ids = {}
    for subject, topics in seed_data.TOPICS.items():
        for name in topics:
            topic_ids[(subject, name)] = create_topic(db, name, subject_ids[subject]).id

    for subject, topics in seed_data.SUBTOPICS.items():
        for topic, subtopics in topics.items():
            for name in subtopics:
                create_subtopic(db, name, topic_ids[(subject, topic)])
    logger.info(
        "Inserted %d subjects and %d topics", len(subject_ids), len(topic_ids)
    )

    test = create_test(db, **seed_data.SAMPLE_TEST)

    for q in seed_data.SAMPLE_QUESTIONS:
        question = create_question(
            db,
            test_id=test.id,
            question_text=q["question_text"],
            options=q["options"],
            correct_option=q["correct_option"],
            explanation=q["explanation"],
            subject_id=subject_ids[q["subject"]],
            topic_id=topic_ids[(q["subject"], q["topic"])],
        )
        for tag_name in seed_data.tags_for_question(q):
            _, created = get_or_create_tag(db, tag_name, question.id)
            if not created:
                logger.debug("Tag %r already exists, skipped for question %d", tag_name, question.id)
        create_flashcard(db, question.id)
    logger.info("Inserted sample test %r with %d questions", test.title, len(get_questions_for_test(db, test.id)))

    for key, value in seed_data.DEFAULT_APP_SETTINGS:
        set_app_setting(db, key, value)


def _remove_partial_file(db_path: Path) -> None:
    try:
        db_path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error("Could not remove partially initialized database %s: %s", db_path, e)


def initialize_database(settings: Settings) -> bool:
    """
    在配置指定的位置创建并填充 SQLite 数据库。
    返回 True 表示新建了数据库，False 表示数据库已存在、未做任何改动。
    失败时抛出 DatabaseInitError。
    """
    db_path = resolve_sqlite_path(settings)

    if db_path.exists():
        logger.info("Database already exists at: %s", db_path)
        logger.info("Skipping initialization")
        return False

    logger.info("Creating new database at: %s", db_path)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DatabaseInitError(f"Cannot create database directory {db_path.parent}: {e}") from e

    engine = make_engine(f"sqlite:///{db_path}", echo=settings.SQL_ECHO)
    completed = False
    try:
        try:
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as e:
            raise DatabaseInitError(f"Failed to create database tables: {e}") from e
        logger.info("Database tables created")

        SessionLocal = make_session_factory(engine)
        try:
            with SessionLocal() as db, db.begin():
                seed_database(db)
        except SQLAlchemyError as e:
            raise DatabaseInitError(f"Failed to insert initial data: {e}") from e
        completed = True
    finally:
        engine.dispose()
        if not completed:
            _remove_partial_file(db_path)

    size_mb = db_path.stat().st_size / 1024 / 1024
    logger.info("Database created at: %s (%.2f MB)", db_path, size_mb)
    return True


def main() -> int:
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.LOG_DIR, settings.LOG_LEVEL)
    try:
        initialize_database(settings)
    except DatabaseInitError as e:
        logger.error("Database initialization failed: %s", e)
        return 1
    logger.info("Database initialization completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())

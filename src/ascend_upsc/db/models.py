# src/ascend_upsc/db/models.py
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Text,
    Boolean,
    ForeignKey,
    CheckConstraint,
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

from ascend_upsc.core.utils import utcnow

Base = declarative_base()


class Subject(Base):
    __tablename__ = "subjects"
    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_subjects_name_not_empty"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    topics = relationship("Topic", back_populates="subject", cascade="all, delete-orphan", passive_deletes=True)


class Topic(Base):
    __tablename__ = "topics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    subject = relationship("Subject", back_populates="topics")
    subtopics = relationship("Subtopic", back_populates="topic", cascade="all, delete-orphan", passive_deletes=True)


class Subtopic(Base):
    __tablename__ = "subtopics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    topic = relationship("Topic", back_populates="subtopics")


class Test(Base):
    __tablename__ = "tests"
    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_tests_title_not_empty"),
    )
    # pytest 会尝试收集名字以 Test 开头的类
    __test__ = False

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    filename = Column(String, nullable=True)  # 题目导入时的源文件名
    created_at = Column(DateTime, default=utcnow, server_default=func.now())
    modified_at = Column(DateTime, default=utcnow, server_default=func.now(), onupdate=utcnow)

    questions = relationship("Question", back_populates="test", cascade="all, delete-orphan", passive_deletes=True)
    attempts = relationship("Attempt", back_populates="test", cascade="all, delete-orphan", passive_deletes=True)


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = (
        CheckConstraint(
            "correct_option IN ('A', 'B', 'C', 'D')", name="ck_questions_correct_option"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    test_id = Column(Integer, ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    option_a = Column(Text, nullable=True)
    option_b = Column(Text, nullable=True)
    option_c = Column(Text, nullable=True)
    option_d = Column(Text, nullable=True)
    correct_option = Column(String(1), nullable=False)
    explanation = Column(Text, nullable=True)
    # 分类引用是可选的，被引用的行删除后置空，题目本身保留
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="SET NULL"), nullable=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="SET NULL"), nullable=True)
    subtopic_id = Column(Integer, ForeignKey("subtopics.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    test = relationship("Test", back_populates="questions")
    tags = relationship("Tag", back_populates="question", cascade="all, delete-orphan", passive_deletes=True)
    flashcard = relationship(
        "Flashcard", back_populates="question", uselist=False, cascade="all, delete-orphan", passive_deletes=True
    )
    user_answers = relationship("UserAnswer", back_populates="question", cascade="all, delete-orphan", passive_deletes=True)


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    question = relationship("Question", back_populates="tags")


class Attempt(Base):
    __tablename__ = "attempts"
    __table_args__ = (
        CheckConstraint("total_questions >= 0", name="ck_attempts_total_non_negative"),
        CheckConstraint("attempted_questions >= 0", name="ck_attempts_attempted_non_negative"),
        CheckConstraint("correct_answers >= 0", name="ck_attempts_correct_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    test_id = Column(Integer, ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=True)
    total_questions = Column(Integer, nullable=False)
    attempted_questions = Column(Integer, default=0, server_default="0")
    correct_answers = Column(Integer, default=0, server_default="0")
    status = Column(String, default="in_progress", server_default="in_progress")  # e.g., in_progress, completed
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    test = relationship("Test", back_populates="attempts")
    answers = relationship("UserAnswer", back_populates="attempt", cascade="all, delete-orphan", passive_deletes=True)


class UserAnswer(Base):
    __tablename__ = "user_answers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    attempt_id = Column(Integer, ForeignKey("attempts.id", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False)
    selected_option = Column(String(1), nullable=True)
    is_correct = Column(Boolean, nullable=True)
    time_taken = Column(Integer, nullable=True)  # 秒
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    attempt = relationship("Attempt", back_populates="answers")
    question = relationship("Question", back_populates="user_answers")


class Flashcard(Base):
    __tablename__ = "flashcards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # 每道题最多一张卡片
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, unique=True)
    status = Column(String, default="new", server_default="new")
    review_count = Column(Integer, default=0, server_default="0")
    last_reviewed = Column(DateTime, nullable=True)
    next_review = Column(DateTime, nullable=True)
    difficulty = Column(String, default="medium", server_default="medium")
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    question = relationship("Question", back_populates="flashcard")


class AppSetting(Base):
    __tablename__ = "app_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String, unique=True, nullable=False)
    value = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())
    modified_at = Column(DateTime, default=utcnow, server_default=func.now(), onupdate=utcnow)

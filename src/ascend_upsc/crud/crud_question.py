# src/ascend_upsc/crud/crud_question.py
from typing import Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from ascend_upsc.db.models import Test, Question, Tag, Flashcard


def create_test(db: Session, title: str, description: Optional[str] = None, filename: Optional[str] = None) -> Test:
    test = Test(title=title, description=description, filename=filename)
    db.add(test)
    db.flush()
    return test


def create_question(
    db: Session,
    test_id: int,
    question_text: str,
    options: Sequence[str],
    correct_option: str,
    explanation: Optional[str] = None,
    subject_id: Optional[int] = None,
    topic_id: Optional[int] = None,
    subtopic_id: Optional[int] = None,
) -> Question:
    """
    写入一道单项选择题。options 依次对应 A/B/C/D 四个选项。
    """
    if len(options) != 4:
        raise ValueError(f"a question needs exactly 4 options, got {len(options)}")
    option_a, option_b, option_c, option_d = options
    question = Question(
        test_id=test_id,
        question_text=question_text,
        option_a=option_a,
        option_b=option_b,
        option_c=option_c,
        option_d=option_d,
        correct_option=correct_option,
        explanation=explanation,
        subject_id=subject_id,
        topic_id=topic_id,
        subtopic_id=subtopic_id,
    )
    db.add(question)
    db.flush()
    return question


def get_or_create_tag(db: Session, name: str, question_id: int) -> Tuple[Tag, bool]:
    """
    标签名在全库唯一。已存在同名标签时直接返回它，不会改挂到新题目上。
    返回 (tag, 是否新建)。
    """
    tag = db.query(Tag).filter(Tag.name == name).first()
    if tag:
        return tag, False
    tag = Tag(name=name, question_id=question_id)
    db.add(tag)
    db.flush()
    return tag, True


def create_flashcard(db: Session, question_id: int, difficulty: str = "medium") -> Flashcard:
    flashcard = Flashcard(question_id=question_id, difficulty=difficulty)
    db.add(flashcard)
    db.flush()
    return flashcard


def get_questions_for_test(db: Session, test_id: int):
    return db.query(Question).filter(Question.test_id == test_id).order_by(Question.id).all()


def delete_test(db: Session, test_id: int) -> bool:
    """删除试卷；题目、标签、卡片和作答记录由外键级联删除"""
    deleted = db.query(Test).filter(Test.id == test_id).delete(synchronize_session=False)
    db.flush()
    return deleted > 0


def delete_question(db: Session, question_id: int) -> bool:
    deleted = db.query(Question).filter(Question.id == question_id).delete(synchronize_session=False)
    db.flush()
    return deleted > 0

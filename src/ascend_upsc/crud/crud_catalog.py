# src/ascend_upsc/crud/crud_catalog.py
from sqlalchemy.orm import Session

from ascend_upsc.db.models import Subject, Topic, Subtopic


def create_subject(db: Session, name: str) -> Subject:
    subject = Subject(name=name)
    db.add(subject)
    db.flush()  # 让后续的 topic 能拿到 subject.id
    return subject


def create_topic(db: Session, name: str, subject_id: int) -> Topic:
    topic = Topic(name=name, subject_id=subject_id)
    db.add(topic)
    db.flush()
    return topic


def create_subtopic(db: Session, name: str, topic_id: int) -> Subtopic:
    subtopic = Subtopic(name=name, topic_id=topic_id)
    db.add(subtopic)
    db.flush()
    return subtopic


def delete_subject(db: Session, subject_id: int) -> bool:
    """
    删除学科及其全部主题、子主题。
    引用它的题目不会被删除，只是 subject_id/topic_id/subtopic_id 被置空。
    """
    deleted = db.query(Subject).filter(Subject.id == subject_id).delete(synchronize_session=False)
    db.flush()
    return deleted > 0


def count_rows(db: Session, model) -> int:
    return db.query(model).count()

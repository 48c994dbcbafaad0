"""Tests for declared constraints and referential actions on the seeded schema."""

import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from ascend_upsc.crud.crud_catalog import count_rows, create_subject, delete_subject
from ascend_upsc.crud.crud_question import (
    create_flashcard,
    create_question,
    delete_question,
    delete_test,
    get_or_create_tag,
    get_questions_for_test,
)
from ascend_upsc.crud.crud_settings import get_app_setting, set_app_setting
from ascend_upsc.db.models import (
    AppSetting,
    Attempt,
    Flashcard,
    Question,
    Subject,
    Subtopic,
    Tag,
    Test,
    Topic,
    UserAnswer,
)

OPTIONS = ["one", "two", "three", "four"]


def _sample_test(db) -> Test:
    return db.query(Test).filter(Test.title == "Economics BASICS Sample Test").one()


def test_deleting_test_removes_questions_tags_and_flashcards(db) -> None:
    test = _sample_test(db)
    assert delete_test(db, test.id) is True
    db.commit()
    assert count_rows(db, Test) == 0
    assert count_rows(db, Question) == 0
    assert count_rows(db, Tag) == 0
    assert count_rows(db, Flashcard) == 0


def test_deleting_question_removes_its_tags_and_flashcard(db) -> None:
    first = db.query(Question).order_by(Question.id).first()
    tag_count = db.query(Tag).filter(Tag.question_id == first.id).count()
    assert tag_count == 5
    total_tags = count_rows(db, Tag)

    assert delete_question(db, first.id) is True
    db.commit()
    assert db.query(Tag).filter(Tag.question_id == first.id).count() == 0
    assert db.query(Flashcard).filter(Flashcard.question_id == first.id).count() == 0
    assert count_rows(db, Tag) == total_tags - tag_count
    assert count_rows(db, Flashcard) == 4


def test_deleting_subject_removes_topics_and_detaches_questions(db) -> None:
    economics = db.query(Subject).filter(Subject.name == "Economics").one()
    topic_ids = [t.id for t in db.query(Topic).filter(Topic.subject_id == economics.id)]
    assert len(topic_ids) == 4

    assert delete_subject(db, economics.id) is True
    db.commit()
    db.expire_all()

    assert count_rows(db, Subject) == 6
    assert db.query(Topic).filter(Topic.id.in_(topic_ids)).count() == 0
    assert db.query(Subtopic).filter(Subtopic.topic_id.in_(topic_ids)).count() == 0
    # 只有 History 的子主题保留
    assert count_rows(db, Subtopic) == 16
    questions = db.query(Question).all()
    assert len(questions) == 5
    assert all(q.subject_id is None and q.topic_id is None for q in questions)


def test_deleting_missing_rows_reports_false(db) -> None:
    assert delete_test(db, 9999) is False
    assert delete_question(db, 9999) is False
    assert delete_subject(db, 9999) is False


def test_question_with_unknown_test_is_rejected(db) -> None:
    with pytest.raises(IntegrityError):
        create_question(db, test_id=9999, question_text="Orphan?", options=OPTIONS, correct_option="A")
    db.rollback()
    assert count_rows(db, Question) == 5


def test_correct_option_must_be_a_letter_a_to_d(db) -> None:
    test = _sample_test(db)
    with pytest.raises(IntegrityError):
        create_question(db, test_id=test.id, question_text="Bad?", options=OPTIONS, correct_option="E")
    db.rollback()


def test_question_requires_four_options(db) -> None:
    test = _sample_test(db)
    with pytest.raises(ValueError):
        create_question(db, test_id=test.id, question_text="Short?", options=OPTIONS[:3], correct_option="A")


def test_new_question_is_listed_under_its_test(db) -> None:
    test = _sample_test(db)
    question = create_question(db, test_id=test.id, question_text="New?", options=OPTIONS, correct_option="D")
    db.commit()
    assert get_questions_for_test(db, test.id)[-1].id == question.id
    assert question.option_d == "four"


def test_only_one_flashcard_per_question(db) -> None:
    question = db.query(Question).first()
    with pytest.raises(IntegrityError):
        create_flashcard(db, question.id)
    db.rollback()


def test_tag_names_are_unique(db) -> None:
    question = db.query(Question).order_by(Question.id.desc()).first()
    db.add(Tag(name="UPSC", question_id=question.id))
    with pytest.raises(IntegrityError):
        db.flush()
    db.rollback()


def test_get_or_create_tag_returns_existing_tag(db) -> None:
    last = db.query(Question).order_by(Question.id.desc()).first()
    existing = db.query(Tag).filter(Tag.name == "Prelims").one()

    tag, created = get_or_create_tag(db, "Prelims", last.id)
    assert created is False
    assert tag.id == existing.id
    assert tag.question_id != last.id

    tag, created = get_or_create_tag(db, "Mains", last.id)
    assert created is True
    assert tag.question_id == last.id


def test_app_setting_keys_are_unique(db) -> None:
    db.add(AppSetting(key="theme", value="dark"))
    with pytest.raises(IntegrityError):
        db.flush()
    db.rollback()


def test_set_app_setting_updates_in_place(db) -> None:
    set_app_setting(db, "theme", "dark")
    set_app_setting(db, "language", "en")
    db.commit()
    assert get_app_setting(db, "theme") == "dark"
    assert get_app_setting(db, "language") == "en"
    assert get_app_setting(db, "missing") is None
    assert count_rows(db, AppSetting) == 4


def test_subject_name_must_not_be_empty(db) -> None:
    with pytest.raises(IntegrityError):
        create_subject(db, "")
    db.rollback()


def test_attempts_and_answers_follow_their_test(db) -> None:
    test = _sample_test(db)
    question = db.query(Question).first()
    attempt = Attempt(test_id=test.id, start_time=datetime.datetime(2024, 1, 1, 10, 0), total_questions=5)
    db.add(attempt)
    db.flush()
    db.add(UserAnswer(attempt_id=attempt.id, question_id=question.id, selected_option="C", is_correct=True, time_taken=12))
    db.commit()
    assert attempt.status == "in_progress"
    assert attempt.attempted_questions == 0

    delete_test(db, test.id)
    db.commit()
    assert count_rows(db, Attempt) == 0
    assert count_rows(db, UserAnswer) == 0


def test_attempt_counts_cannot_be_negative(db) -> None:
    test = _sample_test(db)
    db.add(Attempt(test_id=test.id, start_time=datetime.datetime(2024, 1, 1), total_questions=5, correct_answers=-1))
    with pytest.raises(IntegrityError):
        db.flush()
    db.rollback()

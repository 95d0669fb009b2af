"""
Quiz scoring and recording tests
"""
import pytest

from courseware.exceptions import InvalidArgumentError, NotFoundError
from courseware.models import QuizResult
from courseware.services.achievement_service import achievement_service
from courseware.services.quiz_service import calculate_score, quiz_service


@pytest.mark.parametrize("total,correct,expected", [
    (10, 7, 70),
    (3, 1, 33),
    (3, 2, 66),
    (100, 29, 29),
    (4, 4, 100),
    (5, 0, 0),
])
def test_score_is_truncated(total, correct, expected):
    assert calculate_score(total, correct) == expected


@pytest.mark.parametrize("total,correct", [
    (0, 0),
    (-1, 0),
    (10, 11),
    (10, -1),
])
def test_invalid_counts_rejected(total, correct):
    with pytest.raises(InvalidArgumentError):
        calculate_score(total, correct)


def test_submit_stores_result(seeded_db, make_user):
    user = make_user()

    result = quiz_service.submit_quiz_result(seeded_db, user.id, "01-intro", 10, 7, '{"q1": "a"}')

    assert result.id is not None
    assert result.score == 70
    assert result.total_questions == 10
    assert result.correct_answers == 7
    assert result.answers == '{"q1": "a"}'
    assert result.completed_at is not None


def test_zero_questions_fails_without_insert(seeded_db, make_user):
    user = make_user()

    with pytest.raises(InvalidArgumentError):
        quiz_service.submit_quiz_result(seeded_db, user.id, "01-intro", 0, 0)

    assert seeded_db.query(QuizResult).count() == 0


def test_results_are_append_only(seeded_db, make_user):
    user = make_user()

    quiz_service.submit_quiz_result(seeded_db, user.id, "01-intro", 10, 5)
    quiz_service.submit_quiz_result(seeded_db, user.id, "01-intro", 10, 9)

    scores = [r.score for r in quiz_service.list_user_quiz_results(seeded_db, user.id)]
    assert scores == [50, 90]


def test_list_chapter_quiz_results(seeded_db, make_user):
    user = make_user()
    quiz_service.submit_quiz_result(seeded_db, user.id, "01-intro", 10, 5)
    quiz_service.submit_quiz_result(seeded_db, user.id, "02-setup", 10, 6)

    results = quiz_service.list_chapter_quiz_results(seeded_db, user.id, "02-setup")

    assert [r.score for r in results] == [60]


def test_quiz_master_awarded_once(seeded_db, make_user):
    user = make_user()

    for _ in range(3):
        quiz_service.submit_quiz_result(seeded_db, user.id, "01-intro", 10, 8)
    for _ in range(5):
        quiz_service.submit_quiz_result(seeded_db, user.id, "01-intro", 10, 10)

    assert achievement_service.evaluate(seeded_db, user.id) == []
    assert achievement_service.evaluate(seeded_db, user.id) == []

    names = [ub.badge.name for ub in achievement_service.list_user_badges(seeded_db, user.id)]
    assert names.count("Quiz Master") == 1


def test_unknown_user_raises(seeded_db):
    with pytest.raises(NotFoundError):
        quiz_service.submit_quiz_result(seeded_db, 404, "01-intro", 10, 10)

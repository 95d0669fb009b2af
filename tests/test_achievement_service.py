"""
Achievement engine tests

Coverage:
- Rule thresholds
- At-most-once awards, including a simulated concurrent race
- Unseeded badge catalog
- Badge seeding
"""
import pytest
from sqlalchemy.orm import sessionmaker

from courseware.exceptions import NotFoundError
from courseware.models import Badge, Progress, QuizResult, UserBadge
from courseware.repositories import badges as badge_repository
from courseware.services.achievement_service import DEFAULT_BADGES, achievement_service


def complete_chapters(db, user_id, count, sections_per_chapter=1):
    for i in range(count):
        for s in range(sections_per_chapter):
            db.add(Progress(
                user_id=user_id,
                chapter_id=f"{i:02d}-chapter",
                section_id=f"s{s}",
                completed=True
            ))
    db.commit()


def add_quiz_results(db, user_id, scores):
    for score in scores:
        db.add(QuizResult(
            user_id=user_id,
            chapter_id="01-intro",
            total_questions=10,
            correct_answers=score // 10,
            score=score
        ))
    db.commit()


def badge_names(db, user_id):
    return sorted(ub.badge.name for ub in achievement_service.list_user_badges(db, user_id))


# =============================================================================
# Rules
# =============================================================================

def test_no_history_no_badges(seeded_db, make_user):
    user = make_user()
    assert achievement_service.evaluate(seeded_db, user.id) == []


@pytest.mark.parametrize("chapters,expected", [
    (1, ["First Chapter"]),
    (4, ["First Chapter"]),
    (5, ["First Chapter", "Five Chapters"]),
    (10, ["First Chapter", "Five Chapters", "Ten Chapters"]),
])
def test_chapter_thresholds(seeded_db, make_user, chapters, expected):
    user = make_user()
    complete_chapters(seeded_db, user.id, chapters)

    issued = achievement_service.evaluate(seeded_db, user.id)

    assert sorted(issued) == expected
    assert badge_names(seeded_db, user.id) == expected


def test_sections_of_one_chapter_count_once(seeded_db, make_user):
    user = make_user()
    complete_chapters(seeded_db, user.id, 1, sections_per_chapter=6)

    assert achievement_service.evaluate(seeded_db, user.id) == ["First Chapter"]


def test_quiz_master_needs_five_perfect_scores(seeded_db, make_user):
    user = make_user()
    add_quiz_results(seeded_db, user.id, [100, 100, 100, 100, 90, 99])

    assert achievement_service.evaluate(seeded_db, user.id) == []

    add_quiz_results(seeded_db, user.id, [100])

    assert achievement_service.evaluate(seeded_db, user.id) == ["Quiz Master"]


def test_rules_evaluated_independently(seeded_db, make_user):
    user = make_user()
    complete_chapters(seeded_db, user.id, 1)
    add_quiz_results(seeded_db, user.id, [100] * 5)

    assert sorted(achievement_service.evaluate(seeded_db, user.id)) == ["First Chapter", "Quiz Master"]


# =============================================================================
# At most once
# =============================================================================

def test_repeated_evaluation_awards_once(seeded_db, make_user):
    user = make_user()
    add_quiz_results(seeded_db, user.id, [100] * 5)

    assert achievement_service.evaluate(seeded_db, user.id) == ["Quiz Master"]
    assert achievement_service.evaluate(seeded_db, user.id) == []

    assert seeded_db.query(UserBadge).filter(UserBadge.user_id == user.id).count() == 1


def test_concurrent_award_absorbed_by_unique_constraint(seeded_db, make_user, monkeypatch):
    """A stale existence check must not create a duplicate or raise."""
    user = make_user()
    complete_chapters(seeded_db, user.id, 1)
    assert achievement_service.evaluate(seeded_db, user.id) == ["First Chapter"]

    # Simulate a racing evaluator that read "no badge" before the insert landed
    monkeypatch.setattr(badge_repository, "find_user_badge", lambda db, user_id, badge_id: None)

    assert achievement_service.evaluate(seeded_db, user.id) == []
    assert seeded_db.query(UserBadge).filter(UserBadge.user_id == user.id).count() == 1


def test_second_session_with_stale_check_awards_nothing(engine, seeded_db, make_user, monkeypatch):
    """Two evaluators on separate sessions: the loser gets no badge and no error."""
    user = make_user()
    complete_chapters(seeded_db, user.id, 1)

    other = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        assert achievement_service.trigger(seeded_db, user.id) == ["First Chapter"]

        # The second evaluator read "no badge" before the first insert landed
        monkeypatch.setattr(badge_repository, "find_user_badge", lambda db, user_id, badge_id: None)

        assert achievement_service.trigger(other, user.id) == []
    finally:
        other.close()

    assert seeded_db.query(UserBadge).filter(UserBadge.user_id == user.id).count() == 1


def test_awards_are_per_user(seeded_db, make_user):
    ada = make_user("Ada")
    bob = make_user("Bob")
    complete_chapters(seeded_db, ada.id, 1)

    achievement_service.evaluate(seeded_db, ada.id)
    achievement_service.evaluate(seeded_db, bob.id)

    assert badge_names(seeded_db, ada.id) == ["First Chapter"]
    assert badge_names(seeded_db, bob.id) == []


# =============================================================================
# Catalog
# =============================================================================

def test_unseeded_catalog_skips_silently(db_session, make_user):
    user = make_user()
    complete_chapters(db_session, user.id, 10)

    assert achievement_service.evaluate(db_session, user.id) == []
    assert db_session.query(UserBadge).count() == 0


def test_unknown_user_raises(seeded_db):
    with pytest.raises(NotFoundError):
        achievement_service.evaluate(seeded_db, 12345)


def test_trigger_swallows_failures(seeded_db):
    assert achievement_service.trigger(seeded_db, 12345) == []


def test_seed_badges_only_when_empty(db_session):
    assert achievement_service.seed_badges(db_session) == len(DEFAULT_BADGES)
    assert achievement_service.seed_badges(db_session) == 0

    names = [b.name for b in achievement_service.list_badges(db_session)]
    assert names == [b["name"] for b in DEFAULT_BADGES]
    assert db_session.query(Badge).count() == 6

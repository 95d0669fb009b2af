"""
Leaderboard tests
"""
from courseware.models import Progress
from courseware.services.achievement_service import achievement_service
from courseware.services.leaderboard_service import leaderboard_service
from courseware.services.quiz_service import quiz_service


def test_empty_leaderboard(seeded_db):
    assert leaderboard_service.top_entries(seeded_db) == []


def test_entries_sorted_and_capped(seeded_db, make_user):
    for i in range(12):
        user = make_user(f"User{i:02d}")
        quiz_service.submit_quiz_result(seeded_db, user.id, "01-intro", 10, i % 11)

    entries = leaderboard_service.top_entries(seeded_db)

    assert len(entries) == 10
    totals = [e["total_score"] for e in entries]
    assert totals == sorted(totals, reverse=True)
    assert totals[0] == 100


def test_entry_aggregates(seeded_db, make_user):
    ada = make_user("Ada")
    bob = make_user("Bob")

    for section in ("s1", "s2"):
        seeded_db.add(Progress(user_id=ada.id, chapter_id="01-intro", section_id=section, completed=True))
    seeded_db.add(Progress(user_id=ada.id, chapter_id="02-setup", section_id="s1", completed=True))
    seeded_db.add(Progress(user_id=ada.id, chapter_id="03-web", section_id="s1", completed=False))
    seeded_db.commit()
    achievement_service.evaluate(seeded_db, ada.id)

    quiz_service.submit_quiz_result(seeded_db, ada.id, "01-intro", 10, 7)
    quiz_service.submit_quiz_result(seeded_db, ada.id, "01-intro", 3, 1)
    quiz_service.submit_quiz_result(seeded_db, bob.id, "01-intro", 10, 10)

    entries = leaderboard_service.top_entries(seeded_db)

    assert entries == [
        {"name": "Ada", "badge_count": 1, "completed_chapters": 2, "total_score": 103},
        {"name": "Bob", "badge_count": 0, "completed_chapters": 0, "total_score": 100},
    ]


def test_custom_limit(seeded_db, make_user):
    for i in range(3):
        make_user(f"User{i}")

    assert len(leaderboard_service.top_entries(seeded_db, limit=2)) == 2
    assert leaderboard_service.top_entries(seeded_db, limit=0) == []

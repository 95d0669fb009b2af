"""
User provisioning and preferences tests
"""
import pytest

from courseware.exceptions import NotFoundError
from courseware.models import BuildTool, IDE, OperatingSystem, UserPreferences
from courseware.services.user_service import user_service


def test_register_user_returns_existing_row(db_session):
    first = user_service.register_user(db_session, "ada@test.com", "Ada")
    second = user_service.register_user(db_session, "ada@test.com", "Someone Else")

    assert second.id == first.id
    assert second.name == "Ada"


def test_preferences_are_none_until_saved(db_session, make_user):
    user = make_user()

    assert user_service.get_user_preferences(db_session, user.id) is None


def test_update_preferences_upserts_single_row(db_session, make_user):
    user = make_user()

    user_service.update_user_preferences(
        db_session, user.id, OperatingSystem.MAC, BuildTool.MAVEN, "17", IDE.INTELLIJ_IDEA
    )
    updated = user_service.update_user_preferences(
        db_session, user.id, OperatingSystem.LINUX, BuildTool.GRADLE, "21", IDE.VS_CODE
    )

    assert db_session.query(UserPreferences).count() == 1
    assert updated.operating_system == OperatingSystem.LINUX
    assert updated.build_tool == BuildTool.GRADLE
    assert updated.java_version == "21"
    assert updated.ide == IDE.VS_CODE

    stored = user_service.get_user_preferences(db_session, user.id)
    assert stored.id == updated.id
    assert stored.java_version == "21"


def test_preferences_are_per_user(db_session, make_user):
    ada = make_user("Ada")
    bob = make_user("Bob")

    user_service.update_user_preferences(
        db_session, ada.id, OperatingSystem.WINDOWS_WSL2, BuildTool.MAVEN, "17", IDE.ECLIPSE
    )

    assert user_service.get_user_preferences(db_session, bob.id) is None


def test_preferences_for_unknown_user_raise(db_session):
    with pytest.raises(NotFoundError):
        user_service.get_user_preferences(db_session, 999)

    with pytest.raises(NotFoundError):
        user_service.update_user_preferences(
            db_session, 999, OperatingSystem.MAC, BuildTool.MAVEN, "17", IDE.NETBEANS
        )
    assert db_session.query(UserPreferences).count() == 0

"""Unit tests for role policies."""

import pytest

from dossier.domain.access_policy import (
    ROLE_ASSIGNMENT_RULES,
    can_assign_role,
    can_create_user,
    can_manage_user,
    can_read_folder,
    can_send_notification,
    with_collaborator,
)
from dossier.domain.enums import NotificationType, Role


class TestCanCreateUser:
    @pytest.mark.parametrize(
        ("creator", "requested", "allowed"),
        [
            ([Role.SUPERUSER], [Role.SUPERUSER], True),
            ([Role.MODERATOR], [Role.SUPERUSER], False),
            ([Role.MODERATOR], [Role.MODERATOR], False),
            ([Role.SUPERUSER], [Role.MODERATOR], True),
            ([Role.MODERATOR], [Role.COORDINATOR], True),
            ([Role.COORDINATOR], [Role.COORDINATOR], False),
            ([Role.COORDINATOR], [Role.COLLABORATOR], True),
            ([Role.COLLABORATOR], [Role.COLLABORATOR], False),
            ([Role.COORDINATOR], [], True),
            ([Role.COLLABORATOR], [], False),
        ],
    )
    def test_policy_table(
        self, creator: list[Role], requested: list[Role], allowed: bool
    ) -> None:
        assert can_create_user(creator, requested) is allowed

    def test_every_requested_role_must_be_allowed(self) -> None:
        assert can_create_user([Role.MODERATOR], [Role.COLLABORATOR, Role.MODERATOR]) is False


def test_revisor_notification_needs_reviewer() -> None:
    assert can_send_notification([Role.COLLABORATOR], NotificationType.REVISOR) is False
    assert can_send_notification([Role.COORDINATOR], NotificationType.REVISOR) is True
    assert can_send_notification([Role.COLLABORATOR], NotificationType.COLLABORATOR) is True


def test_collaborator_reads_only_own_folder() -> None:
    assert can_read_folder("u1", [Role.COLLABORATOR], "u1") is True
    assert can_read_folder("u1", [Role.COLLABORATOR], "u2") is False
    assert can_read_folder("u1", [Role.MODERATOR], "u2") is True


def test_with_collaborator_appends_once() -> None:
    assert with_collaborator([Role.MODERATOR, Role.MODERATOR]) == [
        Role.MODERATOR,
        Role.COLLABORATOR,
    ]
    assert with_collaborator([Role.COLLABORATOR]) == [Role.COLLABORATOR]


class TestCanAssignRole:
    @pytest.mark.parametrize(
        ("actor", "target", "new_role", "allowed"),
        [
            ([Role.SUPERUSER], [Role.COLLABORATOR], Role.MODERATOR, True),
            ([Role.SUPERUSER], [Role.COORDINATOR, Role.COLLABORATOR], Role.MODERATOR, True),
            ([Role.MODERATOR], [Role.COLLABORATOR], Role.MODERATOR, False),
            ([Role.SUPERUSER], [Role.SUPERUSER], Role.MODERATOR, False),
            ([Role.SUPERUSER], [Role.COLLABORATOR], Role.COORDINATOR, True),
            ([Role.MODERATOR], [Role.COLLABORATOR], Role.COORDINATOR, True),
            ([Role.COORDINATOR], [Role.COLLABORATOR], Role.COORDINATOR, False),
            ([Role.SUPERUSER], [Role.COLLABORATOR], Role.SUPERUSER, False),
            ([Role.SUPERUSER], [Role.COORDINATOR], Role.COLLABORATOR, False),
        ],
    )
    def test_policy_table(
        self, actor: list[Role], target: list[Role], new_role: Role, allowed: bool
    ) -> None:
        assert can_assign_role(actor, target, new_role) is allowed

    def test_only_moderator_and_coordinator_are_assignable(self) -> None:
        assert set(ROLE_ASSIGNMENT_RULES) == {Role.MODERATOR, Role.COORDINATOR}


def test_moderator_cannot_manage_moderators() -> None:
    assert can_manage_user([Role.MODERATOR], [Role.MODERATOR, Role.COLLABORATOR]) is False
    assert can_manage_user([Role.MODERATOR], [Role.COORDINATOR, Role.COLLABORATOR]) is True
    assert can_manage_user([Role.SUPERUSER], [Role.MODERATOR, Role.COLLABORATOR]) is True

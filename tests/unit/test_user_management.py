"""Unit tests for UserManagementService (account edits and role grants)."""

from datetime import date

import pytest

from dossier.application.dtos.user import UserUpdate
from dossier.application.use_cases.users import UserManagementService
from dossier.domain.enums import Role
from dossier.domain.exceptions import (
    AuthorizationException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ValidationException,
)
from fakes import InMemoryUserRepository, make_user

SUPERUSER = make_user(user_id="root", roles=[Role.SUPERUSER, Role.COLLABORATOR], number="1")
MODERATOR = make_user(user_id="mod", roles=[Role.MODERATOR, Role.COLLABORATOR], number="2")


@pytest.fixture
def users(user_repo: InMemoryUserRepository) -> InMemoryUserRepository:
    for user in (
        SUPERUSER,
        MODERATOR,
        make_user(user_id="u1", number="555", email="ana@example.com"),
        make_user(user_id="u2", number="666", email="luis@example.com"),
    ):
        user_repo.items[user.id] = user
    return user_repo


class TestUpdateUser:
    async def test_partial_update_keeps_other_fields(
        self, users: InMemoryUserRepository
    ) -> None:
        updated = await UserManagementService(users).update_user(
            MODERATOR, "u1", UserUpdate(second_name="Maria", birthdate=date(1990, 5, 1))
        )
        assert updated.second_name == "Maria"
        assert updated.birthdate == date(1990, 5, 1)
        assert updated.first_name == "Ana"
        assert updated.roles == [Role.COLLABORATOR]
        assert users.items["u1"] is updated

    async def test_deactivated_user_leaves_active_list(
        self, users: InMemoryUserRepository
    ) -> None:
        await UserManagementService(users).update_user(
            MODERATOR, "u1", UserUpdate(is_active=False)
        )
        assert "u1" not in {u.id for u in await users.list_active()}

    async def test_email_is_normalized(self, users: InMemoryUserRepository) -> None:
        updated = await UserManagementService(users).update_user(
            SUPERUSER, "u1", UserUpdate(email=" Ana.Gomez@Example.com ")
        )
        assert updated.email == "ana.gomez@example.com"

    async def test_email_taken_by_another_user(self, users: InMemoryUserRepository) -> None:
        with pytest.raises(ResourceAlreadyExistsException):
            await UserManagementService(users).update_user(
                SUPERUSER, "u1", UserUpdate(email="LUIS@example.com")
            )
        assert users.items["u1"].email == "ana@example.com"

    async def test_keeping_own_email_is_allowed(self, users: InMemoryUserRepository) -> None:
        updated = await UserManagementService(users).update_user(
            SUPERUSER, "u1", UserUpdate(email="ana@example.com", surname="Ruiz")
        )
        assert updated.surname == "Ruiz"

    async def test_cannot_deactivate_self(self, users: InMemoryUserRepository) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await UserManagementService(users).update_user(
                SUPERUSER, "root", UserUpdate(is_active=False)
            )
        assert exc_info.value.details["field"] == "is_active"
        assert users.items["root"].is_active is True

    async def test_moderator_cannot_edit_superuser(
        self, users: InMemoryUserRepository
    ) -> None:
        with pytest.raises(AuthorizationException):
            await UserManagementService(users).update_user(
                MODERATOR, "root", UserUpdate(first_name="Eve")
            )

    async def test_unknown_user(self, users: InMemoryUserRepository) -> None:
        with pytest.raises(ResourceNotFoundException):
            await UserManagementService(users).update_user(
                SUPERUSER, "missing", UserUpdate(first_name="Eve")
            )


class TestChangeRole:
    async def test_superuser_promotes_to_moderator(
        self, users: InMemoryUserRepository
    ) -> None:
        updated = await UserManagementService(users).change_role(
            SUPERUSER, "555", Role.MODERATOR
        )
        assert set(updated.roles) == {Role.COLLABORATOR, Role.MODERATOR}

    async def test_moderator_promotes_to_coordinator(
        self, users: InMemoryUserRepository
    ) -> None:
        updated = await UserManagementService(users).change_role(
            MODERATOR, "666", Role.COORDINATOR
        )
        assert set(updated.roles) == {Role.COLLABORATOR, Role.COORDINATOR}
        assert users.items["u2"].roles == updated.roles

    async def test_granting_held_role_does_not_duplicate(
        self, users: InMemoryUserRepository
    ) -> None:
        service = UserManagementService(users)
        await service.change_role(MODERATOR, "666", Role.COORDINATOR)
        updated = await service.change_role(MODERATOR, "666", Role.COORDINATOR)
        assert updated.roles.count(Role.COORDINATOR) == 1

    async def test_moderator_cannot_grant_moderator(
        self, users: InMemoryUserRepository
    ) -> None:
        with pytest.raises(AuthorizationException):
            await UserManagementService(users).change_role(MODERATOR, "555", Role.MODERATOR)
        assert users.items["u1"].roles == [Role.COLLABORATOR]

    @pytest.mark.parametrize("role", [Role.SUPERUSER, Role.COLLABORATOR])
    async def test_role_not_assignable(
        self, users: InMemoryUserRepository, role: Role
    ) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await UserManagementService(users).change_role(SUPERUSER, "555", role)
        assert exc_info.value.details["field"] == "role"

    async def test_unknown_document_number(self, users: InMemoryUserRepository) -> None:
        with pytest.raises(ResourceNotFoundException):
            await UserManagementService(users).change_role(SUPERUSER, "000", Role.COORDINATOR)

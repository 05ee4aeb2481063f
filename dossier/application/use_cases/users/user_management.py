"""User management: edit accounts and grant roles."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from dossier.domain.access_policy import (
    can_assign_role,
    can_manage_user,
    is_assignable_role,
    with_collaborator,
)
from dossier.domain.exceptions import (
    AuthorizationException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from dossier.application.dtos.user import UserUpdate
    from dossier.application.interfaces.repositories import IUserRepository
    from dossier.domain.entities import UserEntity
    from dossier.domain.enums import Role

logger = logging.getLogger(__name__)


class UserManagementService:
    """Changes to existing accounts, checked against the role policies."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self.user_repo = user_repo

    async def update_user(
        self, actor: UserEntity, user_id: str, changes: UserUpdate
    ) -> UserEntity:
        """Apply a partial update to a user's account.

        Setting is_active to False deactivates the account: the user can no
        longer authenticate and is left out of the expiration sweep.

        Raises:
            ResourceNotFoundException: No user with user_id.
            AuthorizationException: Actor may not manage a user with the target's roles.
            ResourceAlreadyExistsException: New email belongs to another user.
            ValidationException: Actor tried to deactivate their own account.
        """
        target = await self.user_repo.get_by_id(user_id)
        if target is None:
            raise ResourceNotFoundException("user", user_id)
        if not can_manage_user(actor.roles, target.roles):
            raise AuthorizationException(
                message="Insufficient permissions to modify this user"
            )
        if changes.is_active is False and target.id == actor.id:
            raise ValidationException(
                "You cannot deactivate your own account", field="is_active"
            )

        updates = {
            f.name: getattr(changes, f.name)
            for f in dataclasses.fields(changes)
            if getattr(changes, f.name) is not None
        }
        if "email" in updates:
            email = updates["email"].strip().lower()
            existing = await self.user_repo.get_by_email(email)
            if existing is not None and existing.id != target.id:
                raise ResourceAlreadyExistsException("user", email)
            updates["email"] = email

        updated = await self.user_repo.update(dataclasses.replace(target, **updates))
        logger.info(
            "User %s updated by %s (fields: %s)",
            updated.id,
            actor.id,
            ", ".join(sorted(updates)) or "none",
        )
        return updated

    async def change_role(
        self, actor: UserEntity, id_document_number: str, new_role: Role
    ) -> UserEntity:
        """Grant new_role to the user with the given identity document number.

        Existing roles are kept and COLLABORATOR is always present afterwards.

        Raises:
            ValidationException: new_role cannot be granted through a role change.
            ResourceNotFoundException: No user with that document number.
            AuthorizationException: Actor may not grant new_role to this user.
        """
        if not is_assignable_role(new_role):
            raise ValidationException(
                f"Role '{new_role.value}' cannot be assigned", field="role"
            )
        target = await self.user_repo.get_by_document_number(id_document_number)
        if target is None:
            raise ResourceNotFoundException("user", id_document_number)
        if not can_assign_role(actor.roles, target.roles, new_role):
            raise AuthorizationException(
                message="You do not have permission to assign this role"
            )
        target.roles = with_collaborator([*target.roles, new_role])
        updated = await self.user_repo.update(target)
        logger.info("Role %s granted to user %s by %s", new_role.value, updated.id, actor.id)
        return updated

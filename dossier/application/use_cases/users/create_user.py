"""User onboarding: create the account, scaffold the folder, email credentials."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dossier.domain.access_policy import can_create_user, with_collaborator
from dossier.domain.entities import IdDocument, UserEntity, scaffold_folder
from dossier.domain.exceptions import (
    AuthorizationException,
    ResourceAlreadyExistsException,
)
from dossier.shared.utils.datetime import utc_now
from dossier.shared.utils.generators import generate_cuid, generate_strong_password

if TYPE_CHECKING:
    from dossier.application.dtos.user import UserCreate
    from dossier.application.interfaces.repositories import (
        IFolderRepository,
        IUserRepository,
    )
    from dossier.application.interfaces.services import (
        INotificationService,
        IPasswordHasher,
    )
    from dossier.application.services.assignment_resolver import AssignmentResolver

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Creates a user and their folder in one transaction.

    Steps: role check, uniqueness of email and identity document, requisite
    resolution, folder scaffolding, then the credentials email. A failed
    email raises ServiceUnavailableException so the caller's transaction
    rolls back and no half-onboarded user remains.
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        folder_repo: IFolderRepository,
        resolver: AssignmentResolver,
        password_hasher: IPasswordHasher,
        notifier: INotificationService,
    ) -> None:
        self.user_repo = user_repo
        self.folder_repo = folder_repo
        self.resolver = resolver
        self.password_hasher = password_hasher
        self.notifier = notifier

    async def execute(self, creator: UserEntity, data: UserCreate) -> UserEntity:
        if not can_create_user(creator.roles, data.roles):
            raise AuthorizationException(
                message="Insufficient permissions to create a user with the requested roles"
            )
        if await self.user_repo.get_by_email(data.email) is not None:
            raise ResourceAlreadyExistsException("user", data.email)
        existing = await self.user_repo.get_by_id_document(
            data.id_document_type, data.id_document_number
        )
        if existing is not None:
            raise ResourceAlreadyExistsException(
                "user", f"{data.id_document_type} {data.id_document_number}"
            )

        requisites = await self.resolver.resolve_requisites(
            profile_name=data.profile_name,
            hiring_name=data.hiring_type,
            service_names=data.service_names,
            group_name=data.group_name,
        )

        password = generate_strong_password()
        user = UserEntity(
            id=generate_cuid(),
            first_name=data.first_name,
            second_name=data.second_name,
            surname=data.surname,
            second_surname=data.second_surname,
            email=data.email,
            id_document=IdDocument(
                type=data.id_document_type, number=data.id_document_number
            ),
            roles=with_collaborator(data.roles),
            birthdate=data.birthdate,
            sex=data.sex,
            group_name=data.group_name,
            profile_name=data.profile_name,
            hiring_type=data.hiring_type,
            service_names=list(data.service_names),
            is_active=True,
            created_at=utc_now(),
        )
        created = await self.user_repo.create(user, self.password_hasher.hash(password))

        folder = scaffold_folder(
            requisites,
            user_id=created.id,
            name=f"{data.id_document_type}-{data.id_document_number}",
        )
        await self.folder_repo.create(folder)

        await self.notifier.send_credentials(created.email, created.full_name, password)
        logger.info(
            "Created user %s with %d required document(s)", created.id, len(folder.documents)
        )
        return created

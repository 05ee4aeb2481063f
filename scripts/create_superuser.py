"""Create the first SUPERUSER account and print an access token.

Usage:
    python -m scripts.create_superuser <email> <first_name> <surname> <id_type> <id_number> [password]
If password is omitted, a random one is printed. The superuser gets no
folder; onboarding everyone else goes through POST /api/v1/users.
"""

import asyncio
import sys

import dossier.infrastructure.persistence.database as database
from dossier.core.config import get_settings
from dossier.domain.entities import IdDocument, UserEntity
from dossier.domain.enums import Role
from dossier.infrastructure.persistence.repositories import UserRepository
from dossier.infrastructure.security import BcryptPasswordHasher, create_access_token
from dossier.shared.utils.datetime import utc_now
from dossier.shared.utils.generators import generate_cuid, generate_strong_password

USAGE = (
    "Usage: python -m scripts.create_superuser "
    "<email> <first_name> <surname> <id_type> <id_number> [password]"
)


async def main() -> int:
    if len(sys.argv) < 6:
        print(USAGE, file=sys.stderr)
        return 1
    email, first_name, surname, id_type, id_number = sys.argv[1:6]
    password = sys.argv[6] if len(sys.argv) > 6 else generate_strong_password()

    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        return 1
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                user_repo = UserRepository(session)
                if await user_repo.get_by_email(email) is not None:
                    print(f"User already exists: {email}", file=sys.stderr)
                    return 1
                user = await user_repo.create(
                    UserEntity(
                        id=generate_cuid(),
                        first_name=first_name,
                        surname=surname,
                        email=email,
                        id_document=IdDocument(type=id_type, number=id_number),
                        roles=[Role.SUPERUSER, Role.COLLABORATOR],
                        created_at=utc_now(),
                    ),
                    BcryptPasswordHasher().hash(password),
                )
    finally:
        await database.dispose_engine()

    print(f"Created superuser: {user.id} ({user.email})")
    print(f"Password: {password}")
    print(f"Access token: {create_access_token(user.id, [r.value for r in user.roles])}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

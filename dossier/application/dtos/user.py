"""DTOs for user onboarding and queries."""

from dataclasses import dataclass, field
from datetime import date

from dossier.domain.enums import Role


@dataclass(frozen=True)
class UserCreate:
    """Input for onboarding a user."""

    first_name: str
    surname: str
    email: str
    id_document_type: str
    id_document_number: str
    group_name: str
    profile_name: str
    hiring_type: str
    service_names: list[str]
    roles: list[Role] = field(default_factory=list)
    second_name: str | None = None
    second_surname: str | None = None
    birthdate: date | None = None
    sex: str | None = None


@dataclass(frozen=True)
class UserFilters:
    """Optional case-insensitive filters for the user listing."""

    name: str | None = None
    email: str | None = None
    id_document_number: str | None = None
    role: Role | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class UserUpdate:
    """Partial update for a user account; None means unchanged.

    Roles change through the role assignment operation, not here.
    """

    first_name: str | None = None
    second_name: str | None = None
    surname: str | None = None
    second_surname: str | None = None
    email: str | None = None
    birthdate: date | None = None
    sex: str | None = None
    is_active: bool | None = None

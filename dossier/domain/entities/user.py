"""User domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime

from dossier.domain.enums import Role


@dataclass(frozen=True)
class IdDocument:
    """Identity document (type such as CC, CE or PA, plus number)."""

    type: str
    number: str


@dataclass
class UserEntity:
    """Domain entity for an employee account.

    Assignment names (group, profile, hiring, services) record what the
    folder was scaffolded from.
    """

    id: str
    first_name: str
    surname: str
    email: str
    id_document: IdDocument
    roles: list[Role]
    second_name: str | None = None
    second_surname: str | None = None
    birthdate: date | None = None
    sex: str | None = None
    group_name: str | None = None
    profile_name: str | None = None
    hiring_type: str | None = None
    service_names: list[str] = field(default_factory=list)
    is_active: bool = True
    created_at: datetime | None = None

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.second_name, self.surname, self.second_surname]
        return " ".join(p for p in parts if p)

    def has_role(self, role: Role) -> bool:
        """Return whether the user holds role."""
        return role in self.roles

    def has_any_role(self, roles: frozenset[Role] | set[Role]) -> bool:
        """Return whether the user holds at least one of roles."""
        return any(r in roles for r in self.roles)

    def is_reviewer(self) -> bool:
        return self.has_any_role(Role.reviewers())

"""Assignment catalog entities: group, profile, hiring, service.

Profiles, hirings and services each own a set of requisites; the union
of the three for a user is what the folder scaffolder turns into documents.
"""

from dataclasses import dataclass, field

from dossier.domain.entities.requisite import RequisiteEntity
from dossier.domain.enums import ServiceCategory


@dataclass
class GroupEntity:
    """Organizational group that services belong to."""

    id: str
    name: str
    is_active: bool = True


@dataclass
class ProfileEntity:
    """Job profile (e.g. nurse, analyst) with its requisites."""

    id: str
    name: str
    requisites: list[RequisiteEntity] = field(default_factory=list)
    is_active: bool = True


@dataclass
class HiringEntity:
    """Hiring (contract) type with its requisites."""

    id: str
    type: str
    requisites: list[RequisiteEntity] = field(default_factory=list)
    is_active: bool = True


@dataclass(frozen=True)
class Location:
    """Tower and floor where a service operates."""

    tower: str
    floor: str


@dataclass
class ServiceEntity:
    """Service a user works in, scoped to a group and a set of profiles."""

    id: str
    name: str
    category: ServiceCategory
    group: GroupEntity
    cost_center: str
    qualification_distinctive_number: str
    code: int | None = None
    profile_names: list[str] = field(default_factory=list)
    requisites: list[RequisiteEntity] = field(default_factory=list)
    locations: list[Location] = field(default_factory=list)
    is_active: bool = True

    def belongs_to_group(self, group_name: str) -> bool:
        """Return whether this service belongs to the named group."""
        return self.group.name == group_name

    def allows_profile(self, profile_name: str) -> bool:
        """Return whether users with the named profile may take this service."""
        return profile_name in self.profile_names

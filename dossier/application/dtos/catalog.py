"""DTOs for catalog use cases: requisites, groups, profiles, hirings, services."""

from dataclasses import dataclass, field

from dossier.domain.enums import ServiceCategory, ValidityUnit


@dataclass(frozen=True)
class RequisiteCreate:
    """Input for creating a requisite."""

    name: str
    description: str | None = None
    format: str | None = None
    is_validity_required: bool = False
    validity_value: int | None = None
    validity_unit: ValidityUnit | None = None
    is_active: bool = True


@dataclass(frozen=True)
class RequisiteUpdate:
    """Partial update for a requisite; None means unchanged."""

    description: str | None = None
    format: str | None = None
    is_validity_required: bool | None = None
    validity_value: int | None = None
    validity_unit: ValidityUnit | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class RequisiteImportResult:
    """Outcome of a bulk requisite import."""

    created: int
    skipped_existing: list[str] = field(default_factory=list)
    """Names already present in the catalog (left untouched)."""


@dataclass(frozen=True)
class ProfileCreate:
    name: str
    requisite_names: list[str]
    is_active: bool = True


@dataclass(frozen=True)
class HiringCreate:
    type: str
    requisite_names: list[str]
    is_active: bool = True


@dataclass(frozen=True)
class LocationData:
    tower: str
    floor: str


@dataclass(frozen=True)
class ServiceCreate:
    """Input for creating a service."""

    name: str
    category: ServiceCategory
    cost_center: str
    qualification_distinctive_number: str
    group_name: str
    profile_names: list[str]
    requisite_names: list[str]
    locations: list[LocationData] = field(default_factory=list)
    code: int | None = None
    is_active: bool = True


@dataclass(frozen=True)
class GroupUpdate:
    """Partial update for a group; None means unchanged."""

    name: str | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial update for a profile. requisite_names replaces the whole set."""

    name: str | None = None
    requisite_names: list[str] | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class HiringUpdate:
    type: str | None = None
    requisite_names: list[str] | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class ServiceUpdate:
    """Partial update for a service.

    Name lists and locations replace the stored ones when given.
    """

    name: str | None = None
    category: ServiceCategory | None = None
    cost_center: str | None = None
    qualification_distinctive_number: str | None = None
    group_name: str | None = None
    profile_names: list[str] | None = None
    requisite_names: list[str] | None = None
    locations: list[LocationData] | None = None
    code: int | None = None
    is_active: bool | None = None

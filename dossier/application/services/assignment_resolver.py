"""Assignment resolver: which requisites apply to a profile/hiring/services combination."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dossier.domain.exceptions import ResourceNotFoundException, ValidationException

if TYPE_CHECKING:
    from dossier.application.interfaces.repositories import (
        IGroupRepository,
        IHiringRepository,
        IProfileRepository,
        IServiceRepository,
    )
    from dossier.domain.entities import RequisiteEntity, ServiceEntity


def merge_requisites(*groups: list[RequisiteEntity]) -> list[RequisiteEntity]:
    """Union of requisite lists, deduplicated by id, first occurrence order kept."""
    seen: set[str] = set()
    merged: list[RequisiteEntity] = []
    for group in groups:
        for requisite in group:
            if requisite.id in seen:
                continue
            seen.add(requisite.id)
            merged.append(requisite)
    return merged


class AssignmentResolver:
    """Resolves the requisites a new user must provide.

    Looks up the profile, hiring and services by name, checks that every
    service belongs to the requested group and admits the profile, and
    returns the deduplicated union of their requisites. Read-only.
    """

    def __init__(
        self,
        group_repo: IGroupRepository,
        profile_repo: IProfileRepository,
        hiring_repo: IHiringRepository,
        service_repo: IServiceRepository,
    ) -> None:
        self.group_repo = group_repo
        self.profile_repo = profile_repo
        self.hiring_repo = hiring_repo
        self.service_repo = service_repo

    async def _load_services(self, service_names: list[str]) -> list[ServiceEntity]:
        if not service_names:
            raise ValidationException(
                "At least one service is required", field="service_names"
            )
        if len(set(service_names)) != len(service_names):
            raise ValidationException(
                "Duplicate services are not allowed", field="service_names"
            )
        services = await self.service_repo.get_by_names(service_names)
        found = {s.name for s in services}
        missing = [name for name in service_names if name not in found]
        if missing:
            raise ResourceNotFoundException("service", ", ".join(missing))
        return services

    async def resolve_requisites(
        self,
        profile_name: str,
        hiring_name: str,
        service_names: list[str],
        group_name: str,
    ) -> list[RequisiteEntity]:
        """Return the deduplicated requisites for the assignment.

        Raises:
            ValidationException: Empty or duplicate service names, a service
                outside the group, or a profile not shared by all services.
            ResourceNotFoundException: Group, profile, hiring or a service
                does not exist.
        """
        services = await self._load_services(service_names)

        group = await self.group_repo.get_by_name(group_name)
        if group is None:
            raise ResourceNotFoundException("group", group_name)

        outside = [s.name for s in services if not s.belongs_to_group(group_name)]
        if outside:
            raise ValidationException(
                f"Services [{', '.join(outside)}] do not belong to group '{group_name}'",
                field="service_names",
            )

        if not all(s.allows_profile(profile_name) for s in services):
            raise ValidationException(
                f"Profile '{profile_name}' is not common to all selected services",
                field="profile_name",
            )

        profile = await self.profile_repo.get_by_name(profile_name)
        if profile is None:
            raise ResourceNotFoundException("profile", profile_name)
        hiring = await self.hiring_repo.get_by_type(hiring_name)
        if hiring is None:
            raise ResourceNotFoundException("hiring", hiring_name)

        return merge_requisites(
            profile.requisites,
            hiring.requisites,
            *(s.requisites for s in services),
        )

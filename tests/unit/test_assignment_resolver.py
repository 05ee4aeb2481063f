"""Unit tests for AssignmentResolver (in-memory catalog repositories)."""

import pytest

from dossier.application.services import AssignmentResolver
from dossier.domain.entities import GroupEntity, HiringEntity, ProfileEntity
from dossier.domain.exceptions import ResourceNotFoundException, ValidationException
from fakes import (
    InMemoryGroupRepository,
    InMemoryHiringRepository,
    InMemoryProfileRepository,
    InMemoryServiceRepository,
    make_requisite,
    make_service,
)

CONTRACT = make_requisite("Contract")
ID_COPY = make_requisite("ID copy")
VACCINES = make_requisite("Vaccination card")
DEGREE = make_requisite("Degree")

CLINICAL = GroupEntity(id="g1", name="Clinical")
ADMIN = GroupEntity(id="g2", name="Administrative")


@pytest.fixture
def resolver() -> AssignmentResolver:
    profiles = [
        ProfileEntity(id="p1", name="Nurse", requisites=[DEGREE, ID_COPY]),
        ProfileEntity(id="p2", name="Analyst", requisites=[DEGREE]),
    ]
    hirings = [HiringEntity(id="h1", type="Permanent", requisites=[CONTRACT, ID_COPY])]
    services = [
        make_service("ICU", CLINICAL, ["Nurse"], [VACCINES]),
        make_service("Emergency", CLINICAL, ["Nurse", "Analyst"], [VACCINES, CONTRACT]),
        make_service("Payroll", ADMIN, ["Analyst"], []),
    ]
    return AssignmentResolver(
        group_repo=InMemoryGroupRepository([CLINICAL, ADMIN]),
        profile_repo=InMemoryProfileRepository(profiles),
        hiring_repo=InMemoryHiringRepository(hirings),
        service_repo=InMemoryServiceRepository(services),
    )


async def test_union_is_deduplicated_in_first_seen_order(resolver: AssignmentResolver) -> None:
    requisites = await resolver.resolve_requisites(
        profile_name="Nurse",
        hiring_name="Permanent",
        service_names=["ICU", "Emergency"],
        group_name="Clinical",
    )
    assert [r.name for r in requisites] == ["Degree", "ID copy", "Contract", "Vaccination card"]


async def test_empty_services_rejected(resolver: AssignmentResolver) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await resolver.resolve_requisites("Nurse", "Permanent", [], "Clinical")
    assert exc_info.value.details["field"] == "service_names"


async def test_duplicate_services_rejected(resolver: AssignmentResolver) -> None:
    with pytest.raises(ValidationException, match="Duplicate"):
        await resolver.resolve_requisites("Nurse", "Permanent", ["ICU", "ICU"], "Clinical")


async def test_unknown_service_not_found(resolver: AssignmentResolver) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await resolver.resolve_requisites("Nurse", "Permanent", ["ICU", "Radiology"], "Clinical")
    assert exc_info.value.details["resource_id"] == "Radiology"


async def test_unknown_group_not_found(resolver: AssignmentResolver) -> None:
    with pytest.raises(ResourceNotFoundException):
        await resolver.resolve_requisites("Nurse", "Permanent", ["ICU"], "Logistics")


async def test_service_outside_group_rejected(resolver: AssignmentResolver) -> None:
    with pytest.raises(ValidationException, match="Payroll"):
        await resolver.resolve_requisites("Analyst", "Permanent", ["Emergency", "Payroll"], "Clinical")


async def test_profile_not_common_to_all_services(resolver: AssignmentResolver) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await resolver.resolve_requisites("Analyst", "Permanent", ["ICU", "Emergency"], "Clinical")
    assert exc_info.value.details["field"] == "profile_name"


async def test_unknown_hiring_not_found(resolver: AssignmentResolver) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await resolver.resolve_requisites("Nurse", "Temporary", ["ICU"], "Clinical")
    assert exc_info.value.details["resource_type"] == "hiring"

"""Unit tests for the requisite and assignment catalog services."""

import pytest

from dossier.application.dtos.catalog import (
    GroupUpdate,
    HiringCreate,
    HiringUpdate,
    LocationData,
    ProfileCreate,
    ProfileUpdate,
    RequisiteCreate,
    RequisiteUpdate,
    ServiceCreate,
    ServiceUpdate,
)
from dossier.application.use_cases.catalog import (
    AssignmentCatalogService,
    RequisiteCatalogService,
)
from dossier.domain.entities import GroupEntity, ProfileEntity
from dossier.domain.enums import ServiceCategory, ValidityUnit
from dossier.domain.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ValidationException,
)
from fakes import (
    InMemoryGroupRepository,
    InMemoryHiringRepository,
    InMemoryProfileRepository,
    InMemoryRequisiteRepository,
    InMemoryServiceRepository,
    make_requisite,
)


class TestRequisiteCatalogService:
    @pytest.fixture
    def repo(self) -> InMemoryRequisiteRepository:
        return InMemoryRequisiteRepository([make_requisite("Contract", id="r1")])

    async def test_create(self, repo: InMemoryRequisiteRepository) -> None:
        service = RequisiteCatalogService(repo)
        created = await service.create_requisite(
            RequisiteCreate(
                name="Vaccination card",
                is_validity_required=True,
                validity_value=1,
                validity_unit=ValidityUnit.YEAR,
            )
        )
        assert (await repo.get_by_name("Vaccination card")) is created
        assert created.validity_days() == 365.25

    async def test_duplicate_name_rejected(self, repo: InMemoryRequisiteRepository) -> None:
        with pytest.raises(ResourceAlreadyExistsException):
            await RequisiteCatalogService(repo).create_requisite(RequisiteCreate(name="Contract"))

    async def test_duplicate_check_ignores_surrounding_whitespace(
        self, repo: InMemoryRequisiteRepository
    ) -> None:
        with pytest.raises(ResourceAlreadyExistsException):
            await RequisiteCatalogService(repo).create_requisite(
                RequisiteCreate(name="  Contract ")
            )
        assert len(repo.items) == 1

    async def test_created_name_is_stripped(self, repo: InMemoryRequisiteRepository) -> None:
        created = await RequisiteCatalogService(repo).create_requisite(
            RequisiteCreate(name=" Degree\t")
        )
        assert created.name == "Degree"
        assert await repo.get_by_name("Degree") is created

    async def test_validity_without_unit_rejected(self, repo: InMemoryRequisiteRepository) -> None:
        with pytest.raises(ValidationException):
            await RequisiteCatalogService(repo).create_requisite(
                RequisiteCreate(name="Permit", is_validity_required=True, validity_value=3)
            )

    async def test_update_clears_validity_when_no_longer_required(self) -> None:
        repo = InMemoryRequisiteRepository([make_requisite("Card", 2, ValidityUnit.MONTH, id="r2")])
        updated = await RequisiteCatalogService(repo).update_requisite(
            "r2", RequisiteUpdate(is_validity_required=False, description="Any card")
        )
        assert updated.is_validity_required is False
        assert updated.validity_value is None
        assert updated.validity_unit is None
        assert updated.description == "Any card"

    async def test_update_unknown_not_found(self, repo: InMemoryRequisiteRepository) -> None:
        with pytest.raises(ResourceNotFoundException):
            await RequisiteCatalogService(repo).update_requisite("missing", RequisiteUpdate())

    @pytest.mark.parametrize(("page", "size"), [(0, 10), (1, 0), (1, 51)])
    async def test_listing_bounds(
        self, repo: InMemoryRequisiteRepository, page: int, size: int
    ) -> None:
        with pytest.raises(ValidationException):
            await RequisiteCatalogService(repo).list_requisites(page, size)

    async def test_listing_page(self, repo: InMemoryRequisiteRepository) -> None:
        result = await RequisiteCatalogService(repo).list_requisites(1, 50)
        assert result.count == 1
        assert result.items[0].name == "Contract"


class TestAssignmentCatalogService:
    @pytest.fixture
    def catalog(self) -> AssignmentCatalogService:
        return AssignmentCatalogService(
            requisite_repo=InMemoryRequisiteRepository(
                [make_requisite("Contract"), make_requisite("Degree")]
            ),
            group_repo=InMemoryGroupRepository([GroupEntity(id="g1", name="Clinical")]),
            profile_repo=InMemoryProfileRepository([ProfileEntity(id="p1", name="Nurse")]),
            hiring_repo=InMemoryHiringRepository(),
            service_repo=InMemoryServiceRepository(),
        )

    def _service(self, **overrides) -> ServiceCreate:
        values = {
            "name": "ICU",
            "category": ServiceCategory.ADMINISTRATIVE,
            "cost_center": "CC-10",
            "qualification_distinctive_number": "QD-10",
            "group_name": "Clinical",
            "profile_names": ["Nurse"],
            "requisite_names": ["Contract"],
            "locations": [LocationData(tower="A", floor="3")],
        }
        values.update(overrides)
        return ServiceCreate(**values)

    async def test_create_profile_with_unknown_requisite(
        self, catalog: AssignmentCatalogService
    ) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await catalog.create_profile(ProfileCreate(name="Analyst", requisite_names=["Visa"]))
        assert exc_info.value.details["resource_id"] == "Visa"

    async def test_create_profile_duplicate_requisites(
        self, catalog: AssignmentCatalogService
    ) -> None:
        with pytest.raises(ValidationException):
            await catalog.create_profile(
                ProfileCreate(name="Analyst", requisite_names=["Degree", "Degree"])
            )

    async def test_create_group_duplicate(self, catalog: AssignmentCatalogService) -> None:
        with pytest.raises(ResourceAlreadyExistsException):
            await catalog.create_group("Clinical")

    async def test_create_service(self, catalog: AssignmentCatalogService) -> None:
        service = await catalog.create_service(self._service())
        assert service.group.name == "Clinical"
        assert service.profile_names == ["Nurse"]
        assert [r.name for r in service.requisites] == ["Contract"]
        assert await catalog.list_services_by_group("Clinical") == [service]

    async def test_care_service_requires_code(self, catalog: AssignmentCatalogService) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await catalog.create_service(self._service(category=ServiceCategory.CARE))
        assert exc_info.value.details["field"] == "code"

    async def test_service_unknown_group(self, catalog: AssignmentCatalogService) -> None:
        with pytest.raises(ResourceNotFoundException):
            await catalog.create_service(self._service(group_name="Logistics"))

    async def test_services_by_unknown_group(self, catalog: AssignmentCatalogService) -> None:
        with pytest.raises(ResourceNotFoundException):
            await catalog.list_services_by_group("Logistics")

    async def test_rename_group(self, catalog: AssignmentCatalogService) -> None:
        updated = await catalog.update_group("g1", GroupUpdate(name=" Surgical "))
        assert updated.name == "Surgical"
        assert [g.name for g in await catalog.list_groups()] == ["Surgical"]

    async def test_rename_group_to_taken_name(self, catalog: AssignmentCatalogService) -> None:
        await catalog.create_group("Logistics")
        with pytest.raises(ResourceAlreadyExistsException):
            await catalog.update_group("g1", GroupUpdate(name="Logistics"))

    async def test_deactivate_group_keeps_name(self, catalog: AssignmentCatalogService) -> None:
        updated = await catalog.update_group("g1", GroupUpdate(is_active=False))
        assert updated.name == "Clinical"
        assert updated.is_active is False

    async def test_update_unknown_group(self, catalog: AssignmentCatalogService) -> None:
        with pytest.raises(ResourceNotFoundException):
            await catalog.update_group("missing", GroupUpdate(name="X"))

    async def test_update_profile_replaces_requisites(
        self, catalog: AssignmentCatalogService
    ) -> None:
        updated = await catalog.update_profile(
            "p1", ProfileUpdate(requisite_names=["Contract", "Degree"])
        )
        assert sorted(r.name for r in updated.requisites) == ["Contract", "Degree"]
        assert updated.name == "Nurse"

    async def test_update_profile_unknown_requisite_leaves_profile(
        self, catalog: AssignmentCatalogService
    ) -> None:
        with pytest.raises(ResourceNotFoundException):
            await catalog.update_profile(
                "p1", ProfileUpdate(name="Head nurse", requisite_names=["Visa"])
            )
        assert [p.name for p in await catalog.list_profiles()] == ["Nurse"]

    async def test_update_hiring(self, catalog: AssignmentCatalogService) -> None:
        hiring = await catalog.create_hiring(
            HiringCreate(type="Fixed term", requisite_names=["Contract"])
        )
        updated = await catalog.update_hiring(
            hiring.id, HiringUpdate(type="Indefinite", is_active=False)
        )
        assert updated.type == "Indefinite"
        assert updated.is_active is False
        assert [r.name for r in updated.requisites] == ["Contract"]

    async def test_update_hiring_to_taken_type(self, catalog: AssignmentCatalogService) -> None:
        await catalog.create_hiring(HiringCreate(type="Fixed term", requisite_names=["Contract"]))
        other = await catalog.create_hiring(
            HiringCreate(type="Indefinite", requisite_names=["Contract"])
        )
        with pytest.raises(ResourceAlreadyExistsException):
            await catalog.update_hiring(other.id, HiringUpdate(type="Fixed term"))

    async def test_update_service(self, catalog: AssignmentCatalogService) -> None:
        service = await catalog.create_service(self._service())
        await catalog.create_group("Surgical")
        updated = await catalog.update_service(
            service.id,
            ServiceUpdate(
                group_name="Surgical",
                requisite_names=["Degree"],
                locations=[LocationData(tower="B", floor="1")],
                cost_center="CC-20",
            ),
        )
        assert updated.group.name == "Surgical"
        assert [r.name for r in updated.requisites] == ["Degree"]
        assert [(loc.tower, loc.floor) for loc in updated.locations] == [("B", "1")]
        assert updated.cost_center == "CC-20"
        assert updated.profile_names == ["Nurse"]

    async def test_switching_service_to_care_requires_code(
        self, catalog: AssignmentCatalogService
    ) -> None:
        service = await catalog.create_service(self._service())
        with pytest.raises(ValidationException) as exc_info:
            await catalog.update_service(
                service.id, ServiceUpdate(category=ServiceCategory.CARE)
            )
        assert exc_info.value.details["field"] == "code"

        updated = await catalog.update_service(
            service.id, ServiceUpdate(category=ServiceCategory.CARE, code=7)
        )
        assert updated.category == ServiceCategory.CARE
        assert updated.code == 7

    async def test_update_service_unknown_profile(
        self, catalog: AssignmentCatalogService
    ) -> None:
        service = await catalog.create_service(self._service())
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await catalog.update_service(service.id, ServiceUpdate(profile_names=["Surgeon"]))
        assert exc_info.value.details["resource_type"] == "profile"

    async def test_update_unknown_service(self, catalog: AssignmentCatalogService) -> None:
        with pytest.raises(ResourceNotFoundException):
            await catalog.update_service("missing", ServiceUpdate(code=1))

"""Requisite and assignment catalog endpoints over in-memory repositories."""

from io import BytesIO

import pytest
from httpx import AsyncClient
from openpyxl import Workbook

from dossier.api.v1.dependencies import (
    get_assignment_catalog_service,
    get_assignment_catalog_service_for_write,
    get_requisite_catalog_service,
    get_requisite_catalog_service_for_write,
)
from dossier.application.use_cases.catalog import (
    AssignmentCatalogService,
    RequisiteCatalogService,
)
from dossier.domain.enums import Role
from fakes import (
    InMemoryGroupRepository,
    InMemoryHiringRepository,
    InMemoryProfileRepository,
    InMemoryRequisiteRepository,
    InMemoryServiceRepository,
)


@pytest.fixture
def requisite_repo() -> InMemoryRequisiteRepository:
    return InMemoryRequisiteRepository()


@pytest.fixture
def catalog_overrides(test_app, requisite_repo: InMemoryRequisiteRepository):
    requisites = RequisiteCatalogService(requisite_repo)
    assignments = AssignmentCatalogService(
        requisite_repo=requisite_repo,
        group_repo=InMemoryGroupRepository(),
        profile_repo=InMemoryProfileRepository(),
        hiring_repo=InMemoryHiringRepository(),
        service_repo=InMemoryServiceRepository(),
    )
    test_app.dependency_overrides[get_requisite_catalog_service] = lambda: requisites
    test_app.dependency_overrides[get_requisite_catalog_service_for_write] = lambda: requisites
    test_app.dependency_overrides[get_assignment_catalog_service] = lambda: assignments
    test_app.dependency_overrides[get_assignment_catalog_service_for_write] = lambda: assignments


CARD = {
    "name": "Vaccination card",
    "is_validity_required": True,
    "validity_value": 1,
    "validity_unit": "Year",
}


async def test_create_and_list_requisites(
    client: AsyncClient, auth_as, catalog_overrides
) -> None:
    _, admin = auth_as(Role.MODERATOR)
    response = await client.post("/api/v1/requisites", json=CARD, headers=admin)
    assert response.status_code == 201
    created = response.json()
    assert created["validity_unit"] == "Year"

    _, collaborator = auth_as(Role.COLLABORATOR, number="200")
    response = await client.get(
        "/api/v1/requisites", params={"name": "vacc"}, headers=collaborator
    )
    assert response.status_code == 200
    assert response.json()["count"] == 1

    response = await client.get(f"/api/v1/requisites/{created['id']}", headers=collaborator)
    assert response.json()["name"] == "Vaccination card"


async def test_duplicate_requisite_returns_409(
    client: AsyncClient, auth_as, catalog_overrides
) -> None:
    _, admin = auth_as(Role.SUPERUSER)
    await client.post("/api/v1/requisites", json=CARD, headers=admin)
    response = await client.post("/api/v1/requisites", json=CARD, headers=admin)
    assert response.status_code == 409
    assert response.json()["error"] == "RESOURCE_ALREADY_EXISTS"


async def test_validity_without_unit_returns_400(
    client: AsyncClient, auth_as, catalog_overrides
) -> None:
    _, admin = auth_as(Role.SUPERUSER)
    response = await client.post(
        "/api/v1/requisites",
        json={"name": "Card", "is_validity_required": True},
        headers=admin,
    )
    assert response.status_code == 400


async def test_coordinator_cannot_create_requisites(
    client: AsyncClient, auth_as, catalog_overrides
) -> None:
    _, headers = auth_as(Role.COORDINATOR)
    response = await client.post("/api/v1/requisites", json=CARD, headers=headers)
    assert response.status_code == 403


@pytest.mark.parametrize("params", [{"page": 0}, {"size": 51}, {"size": 0}])
async def test_invalid_paging_returns_400(
    client: AsyncClient, auth_as, catalog_overrides, params
) -> None:
    _, headers = auth_as(Role.COLLABORATOR)
    response = await client.get("/api/v1/requisites", params=params, headers=headers)
    assert response.status_code == 400


async def test_update_requisite(client: AsyncClient, auth_as, catalog_overrides) -> None:
    _, admin = auth_as(Role.SUPERUSER)
    created = (await client.post("/api/v1/requisites", json=CARD, headers=admin)).json()
    response = await client.patch(
        f"/api/v1/requisites/{created['id']}",
        json={"description": "Annual vaccination record", "validity_value": 2},
        headers=admin,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "Annual vaccination record"
    assert data["validity_value"] == 2


async def test_import_workbook(
    client: AsyncClient, auth_as, catalog_overrides, requisite_repo
) -> None:
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(("name", "description", "validity", "value", "unit", "active"))
    sheet.append(("Contract", "Signed contract", "no", None, None, "yes"))
    sheet.append(("Degree", None, "no", None, None, "yes"))
    buffer = BytesIO()
    workbook.save(buffer)

    _, admin = auth_as(Role.SUPERUSER)
    response = await client.post(
        "/api/v1/requisites/import",
        files={"file": ("requisites.xlsx", buffer.getvalue(), "application/octet-stream")},
        headers=admin,
    )
    assert response.status_code == 201
    assert response.json() == {"created": 2, "skipped_existing": []}
    assert {r.name for r in requisite_repo.items.values()} == {"Contract", "Degree"}


async def test_assignment_catalog_flow(
    client: AsyncClient, auth_as, catalog_overrides
) -> None:
    _, admin = auth_as(Role.SUPERUSER)
    await client.post(
        "/api/v1/requisites", json={"name": "Contract"}, headers=admin
    )
    assert (
        await client.post("/api/v1/groups", json={"name": "Clinical"}, headers=admin)
    ).status_code == 201
    assert (
        await client.post(
            "/api/v1/profiles",
            json={"name": "Nurse", "requisite_names": ["Contract"]},
            headers=admin,
        )
    ).status_code == 201
    response = await client.post(
        "/api/v1/services",
        json={
            "name": "Payroll",
            "category": "Administrativo",
            "group_name": "Clinical",
            "cost_center": "CC-9",
            "qualification_distinctive_number": "QD-9",
            "profile_names": ["Nurse"],
            "requisite_names": ["Contract"],
        },
        headers=admin,
    )
    assert response.status_code == 201
    assert response.json()["group"]["name"] == "Clinical"

    response = await client.get("/api/v1/services/group/Clinical", headers=admin)
    assert [s["name"] for s in response.json()] == ["Payroll"]


async def test_catalog_updates(client: AsyncClient, auth_as, catalog_overrides) -> None:
    _, admin = auth_as(Role.MODERATOR)
    for name in ("Contract", "Degree"):
        await client.post("/api/v1/requisites", json={"name": name}, headers=admin)
    group = (
        await client.post("/api/v1/groups", json={"name": "Clinical"}, headers=admin)
    ).json()
    profile = (
        await client.post(
            "/api/v1/profiles",
            json={"name": "Nurse", "requisite_names": ["Contract"]},
            headers=admin,
        )
    ).json()
    hiring = (
        await client.post(
            "/api/v1/hirings",
            json={"type": "Fixed term", "requisite_names": ["Contract"]},
            headers=admin,
        )
    ).json()
    service = (
        await client.post(
            "/api/v1/services",
            json={
                "name": "Payroll",
                "category": "Administrativo",
                "group_name": "Clinical",
                "cost_center": "CC-9",
                "qualification_distinctive_number": "QD-9",
                "profile_names": ["Nurse"],
                "requisite_names": ["Contract"],
            },
            headers=admin,
        )
    ).json()

    response = await client.patch(
        f"/api/v1/groups/{group['id']}", json={"is_active": False}, headers=admin
    )
    assert response.status_code == 200
    assert response.json() == {**group, "is_active": False}

    response = await client.patch(
        f"/api/v1/profiles/{profile['id']}",
        json={"requisite_names": ["Degree"]},
        headers=admin,
    )
    assert [r["name"] for r in response.json()["requisites"]] == ["Degree"]

    response = await client.patch(
        f"/api/v1/hirings/{hiring['id']}", json={"type": "Indefinite"}, headers=admin
    )
    assert response.json()["type"] == "Indefinite"

    response = await client.patch(
        f"/api/v1/services/{service['id']}",
        json={"locations": [{"tower": "B", "floor": "2"}], "cost_center": "CC-1"},
        headers=admin,
    )
    assert response.status_code == 200
    assert response.json()["locations"] == [{"tower": "B", "floor": "2"}]
    assert response.json()["cost_center"] == "CC-1"

    response = await client.patch(
        f"/api/v1/services/{service['id']}", json={"category": "Asistencial"}, headers=admin
    )
    assert response.status_code == 400


async def test_catalog_update_errors(client: AsyncClient, auth_as, catalog_overrides) -> None:
    _, admin = auth_as(Role.SUPERUSER)
    await client.post("/api/v1/groups", json={"name": "Clinical"}, headers=admin)
    other = (
        await client.post("/api/v1/groups", json={"name": "Logistics"}, headers=admin)
    ).json()

    response = await client.patch(
        f"/api/v1/groups/{other['id']}", json={"name": "Clinical"}, headers=admin
    )
    assert response.status_code == 409

    response = await client.patch(
        "/api/v1/profiles/missing", json={"name": "Nurse"}, headers=admin
    )
    assert response.status_code == 404

    _, coordinator = auth_as(Role.COORDINATOR, number="300")
    response = await client.patch(
        f"/api/v1/groups/{other['id']}", json={"name": "Other"}, headers=coordinator
    )
    assert response.status_code == 403

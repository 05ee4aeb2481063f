"""Authentication and role guard tests (no database: users come from the in-memory repo)."""

from httpx import AsyncClient

from dossier.domain.enums import Role
from dossier.infrastructure.security import create_access_token


async def test_missing_token_returns_401(client: AsyncClient, auth_as) -> None:
    response = await client.get("/api/v1/users/me")
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"
    assert response.headers["www-authenticate"] == "Bearer"


async def test_invalid_token_returns_401(client: AsyncClient, auth_as) -> None:
    response = await client.get(
        "/api/v1/users/me", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_token_for_unknown_user_returns_401(client: AsyncClient, auth_as) -> None:
    token = create_access_token("ghost", [Role.SUPERUSER.value])
    response = await client.get(
        "/api/v1/users/me", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401


async def test_inactive_user_returns_401(client: AsyncClient, auth_as) -> None:
    _, headers = auth_as(Role.SUPERUSER, is_active=False)
    response = await client.get("/api/v1/users/me", headers=headers)
    assert response.status_code == 401


async def test_me_returns_current_user(client: AsyncClient, auth_as) -> None:
    user, headers = auth_as(Role.COORDINATOR, Role.COLLABORATOR)
    response = await client.get("/api/v1/users/me", headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == user.id
    assert data["full_name"] == "Ana Gomez"
    assert data["roles"] == ["COORDINATOR", "COLLABORATOR"]
    assert "password" not in str(data).lower()


async def test_collaborator_cannot_list_users(client: AsyncClient, auth_as) -> None:
    _, headers = auth_as(Role.COLLABORATOR)
    response = await client.get("/api/v1/users", headers=headers)
    assert response.status_code == 403
    assert response.json()["error"] == "PERMISSION_DENIED"


async def test_roles_are_read_from_the_database(
    client: AsyncClient, auth_as, user_repo
) -> None:
    """A token minted with elevated claims does not grant roles the stored user lacks."""
    user, _ = auth_as(Role.COLLABORATOR)
    token = create_access_token(user.id, [Role.SUPERUSER.value])
    response = await client.get(
        "/api/v1/users", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 403


async def test_reviewer_lists_users(
    client: AsyncClient, test_app, auth_as, user_repo
) -> None:
    from dossier.api.v1.dependencies import get_user_query_service
    from dossier.application.use_cases.users import UserQueryService

    test_app.dependency_overrides[get_user_query_service] = lambda: UserQueryService(user_repo)
    _, headers = auth_as(Role.MODERATOR)
    auth_as(Role.COLLABORATOR, number="200")

    response = await client.get(
        "/api/v1/users", params={"role": "COLLABORATOR"}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["count"] == 1

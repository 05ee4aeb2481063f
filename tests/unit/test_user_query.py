"""Unit tests for the user listing query (compiled SQL, no database)."""

from sqlalchemy.dialects import postgresql

from dossier.application.dtos.user import UserFilters
from dossier.domain.enums import Role
from dossier.infrastructure.persistence.repositories.user_repo import build_user_query


def _compile(filters: UserFilters):
    return build_user_query(filters).compile(dialect=postgresql.dialect())


def test_like_wildcards_in_filters_are_escaped() -> None:
    compiled = _compile(UserFilters(name="50%_off", email="a_b@x.com"))

    assert "ESCAPE '/'" in str(compiled)
    values = set(compiled.params.values())
    assert "50/%/_off" in values
    assert "a/_b@x.com" in values


def test_role_filter_matches_quoted_value() -> None:
    compiled = _compile(UserFilters(role=Role.COORDINATOR))
    assert '"COORDINATOR"' in compiled.params.values()


def test_no_filters_selects_everything() -> None:
    assert "WHERE" not in str(_compile(UserFilters()))

"""Domain enumerations for Dossier.

Enums represent fixed sets of domain values (document states, roles,
validity units). Values are the strings stored in the database and sent
over the API.
"""

from enum import Enum


class State(str, Enum):
    """Review state of a document or folder."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid state values as strings."""
        return [state.value for state in cls]


class StatusAttachment(str, Enum):
    """Review status of a single uploaded attachment."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @classmethod
    def from_state(cls, state: State) -> "StatusAttachment":
        """Map a document state onto the matching attachment status."""
        return cls(state.value)


class ValidityUnit(str, Enum):
    """Unit of a requisite's validity period."""

    DAY = "Day"
    MONTH = "Month"
    YEAR = "Year"


class Role(str, Enum):
    """User roles, from most to least privileged."""

    SUPERUSER = "SUPERUSER"
    MODERATOR = "MODERATOR"
    COORDINATOR = "COORDINATOR"
    COLLABORATOR = "COLLABORATOR"

    @classmethod
    def reviewers(cls) -> frozenset["Role"]:
        """Roles allowed to review other users' documents."""
        return frozenset({cls.SUPERUSER, cls.MODERATOR, cls.COORDINATOR})


class ServiceCategory(str, Enum):
    """Service category. Care services carry a mandatory service code."""

    CARE = "Asistencial"
    ADMINISTRATIVE = "Administrativo"


class NotificationType(str, Enum):
    """Kinds of review notification emails."""

    COLLABORATOR = "collaborator"  # documents uploaded, ready for review
    REVISOR = "revisor"  # review finished, some documents need changes

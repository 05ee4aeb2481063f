"""Role policies: who may create, manage and promote users, and send notifications.

Kept as data so the policy can be read and tested on its own.
"""

from collections.abc import Iterable
from typing import NamedTuple

from dossier.domain.enums import NotificationType, Role

# Requested role -> roles allowed to create a user holding it.
CREATOR_ROLES: dict[Role, frozenset[Role]] = {
    Role.SUPERUSER: frozenset({Role.SUPERUSER}),
    Role.MODERATOR: frozenset({Role.SUPERUSER}),
    Role.COORDINATOR: frozenset({Role.SUPERUSER, Role.MODERATOR}),
    Role.COLLABORATOR: frozenset({Role.SUPERUSER, Role.MODERATOR, Role.COORDINATOR}),
}


class RoleAssignmentRule(NamedTuple):
    """Who may grant a role, and which users may receive it."""

    assigners: frozenset[Role]
    eligible_holders: frozenset[Role]


# Role granted by a role change -> rule. Roles missing here cannot be granted this way.
ROLE_ASSIGNMENT_RULES: dict[Role, RoleAssignmentRule] = {
    Role.MODERATOR: RoleAssignmentRule(
        assigners=frozenset({Role.SUPERUSER}),
        eligible_holders=frozenset({Role.COORDINATOR, Role.COLLABORATOR}),
    ),
    Role.COORDINATOR: RoleAssignmentRule(
        assigners=frozenset({Role.SUPERUSER, Role.MODERATOR}),
        eligible_holders=frozenset({Role.COLLABORATOR}),
    ),
}

# Notification type -> roles allowed to send it (None: any authenticated user).
NOTIFICATION_SENDER_ROLES: dict[NotificationType, frozenset[Role] | None] = {
    NotificationType.COLLABORATOR: None,
    NotificationType.REVISOR: Role.reviewers(),
}


def can_create_user(creator_roles: Iterable[Role], requested_roles: Iterable[Role]) -> bool:
    """Return whether a creator holding creator_roles may create requested_roles.

    Every requested role must be creatable by at least one of the creator's
    roles. An empty request is treated as a plain collaborator.
    """
    held = set(creator_roles)
    requested = set(requested_roles) or {Role.COLLABORATOR}
    return all(held & CREATOR_ROLES[role] for role in requested)


def can_manage_user(actor_roles: Iterable[Role], target_roles: Iterable[Role]) -> bool:
    """Return whether the actor may edit or deactivate a user holding target_roles.

    Same rule as creation: the actor must be allowed to create every role
    the target holds.
    """
    return can_create_user(actor_roles, target_roles)


def is_assignable_role(role: Role) -> bool:
    return role in ROLE_ASSIGNMENT_RULES


def can_assign_role(
    actor_roles: Iterable[Role], target_roles: Iterable[Role], new_role: Role
) -> bool:
    """Return whether the actor may grant new_role to a user holding target_roles."""
    rule = ROLE_ASSIGNMENT_RULES.get(new_role)
    if rule is None:
        return False
    return bool(set(actor_roles) & rule.assigners) and bool(
        set(target_roles) & rule.eligible_holders
    )


def can_send_notification(sender_roles: Iterable[Role], notification: NotificationType) -> bool:
    """Return whether sender_roles allow sending the given notification type."""
    allowed = NOTIFICATION_SENDER_ROLES[notification]
    if allowed is None:
        return True
    return any(role in allowed for role in sender_roles)


def can_read_folder(reader_id: str, reader_roles: Iterable[Role], owner_id: str) -> bool:
    """Reviewers may read any folder; everyone else only their own."""
    if reader_id == owner_id:
        return True
    return any(role in Role.reviewers() for role in reader_roles)


def with_collaborator(roles: Iterable[Role]) -> list[Role]:
    """Return roles with COLLABORATOR appended when missing (order preserved, no duplicates)."""
    result: list[Role] = []
    for role in roles:
        if role not in result:
            result.append(role)
    if Role.COLLABORATOR not in result:
        result.append(Role.COLLABORATOR)
    return result

"""Access policy value object (RBAC evaluator).

The policy is an immutable table of permission rules compiled once, at load
time, into a map keyed by (resource, action) -> frozenset of roles. Checks
are O(1) lookups with no side effects.

Default-deny:
    - A role outside the closed UserRole set has no permissions.
    - A (resource, action) pair with no configured rule denies every role,
      SUPER_ADMIN included. There is no implicit super-user bypass.

Usage:
    from src.domain.value_objects import AccessPolicy, PermissionRule

    policy = AccessPolicy(
        [PermissionRule(resource="leads", action="read",
                        allowed_roles=frozenset({UserRole.CLIENT}))]
    )
    policy.can("client", "leads", "read")    # True
    policy.can("client", "users", "write")   # False (no rule)
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from src.domain.enums.user_role import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class PermissionRule:
    """One (resource, action, allowed roles) rule.

    Attributes:
        resource: Resource identifier (e.g., "leads").
        action: Action identifier (read, write, delete).
        allowed_roles: Roles granted this resource/action pair.
    """

    resource: str
    action: str
    allowed_roles: frozenset[UserRole]


def _identifier(value: Any) -> str | None:
    """Normalize a resource/action argument to its string key."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value
    return None


class AccessPolicy:
    """Static RBAC table answering can(role, resource, action).

    Instances are immutable after construction and safe to share across
    requests, tasks and threads.

    Attributes:
        rules: The rules the policy was built from, in load order.
    """

    __slots__ = ("_rules", "_table")

    def __init__(self, rules: Iterable[PermissionRule]) -> None:
        """Compile rules into the lookup table.

        Several rules for the same pair are merged (union of roles).

        Args:
            rules: Permission rules to load.
        """
        loaded = tuple(rules)
        table: dict[tuple[str, str], set[UserRole]] = {}
        for rule in loaded:
            table.setdefault((rule.resource, rule.action), set()).update(
                rule.allowed_roles
            )
        self._rules = loaded
        self._table: MappingProxyType[tuple[str, str], frozenset[UserRole]] = (
            MappingProxyType({key: frozenset(roles) for key, roles in table.items()})
        )

    @property
    def rules(self) -> tuple[PermissionRule, ...]:
        """Rules in load order."""
        return self._rules

    def can(self, role: Any, resource: Any, action: Any) -> bool:
        """Check whether a role may perform an action on a resource.

        Never raises. Unknown roles, unknown pairs and malformed arguments
        all evaluate to False.

        Args:
            role: UserRole, role string, or None.
            resource: Resource enum member or identifier string.
            action: Action enum member or identifier string.

        Returns:
            bool: True iff a configured rule grants the pair to the role.
        """
        parsed_role = UserRole.parse(role)
        if parsed_role is None:
            return False
        resource_key = _identifier(resource)
        action_key = _identifier(action)
        if resource_key is None or action_key is None:
            return False
        allowed = self._table.get((resource_key, action_key))
        return allowed is not None and parsed_role in allowed

    def allowed_roles(self, resource: Any, action: Any) -> frozenset[UserRole]:
        """Roles granted a resource/action pair (empty when unconfigured)."""
        resource_key = _identifier(resource)
        action_key = _identifier(action)
        if resource_key is None or action_key is None:
            return frozenset()
        return self._table.get((resource_key, action_key), frozenset())

    def permissions_for(self, role: Any) -> list[tuple[str, str]]:
        """List the (resource, action) pairs granted to a role.

        Args:
            role: UserRole, role string, or None.

        Returns:
            list[tuple[str, str]]: Sorted pairs; empty for unknown roles.
        """
        parsed_role = UserRole.parse(role)
        if parsed_role is None:
            return []
        return sorted(key for key, roles in self._table.items() if parsed_role in roles)

"""Role-filtered dashboard navigation."""

from collections.abc import Iterable
from typing import Any

from src.config.navigation import NAVIGATION, NavigationItem
from src.domain.value_objects import AccessPolicy


def visible_navigation(
    policy: AccessPolicy,
    role: Any,
    items: Iterable[NavigationItem] = NAVIGATION,
) -> list[NavigationItem]:
    """Menu entries the role may open, in menu order.

    Unknown or missing roles see nothing.
    """
    return [item for item in items if policy.can(role, item.resource, item.action)]

"""Dashboard navigation configuration.

Each menu entry is shown only when the access policy grants the caller the
entry's (resource, action) pair. Which roles see what is therefore decided
by the policy file, not by this table.

Usage:
    ```python
    from src.config.navigation import NAVIGATION

    visible = [item for item in NAVIGATION if policy.can(role, item.resource, item.action)]
    ```
"""

from dataclasses import dataclass

from src.domain.enums import Action, Resource


@dataclass(frozen=True, slots=True, kw_only=True)
class NavigationItem:
    """One sidebar entry.

    Attributes:
        name: Display label.
        path: Route path in the dashboard.
        resource: Resource gating the entry.
        action: Action required (always READ for menu entries today).
    """

    name: str
    path: str
    resource: Resource
    action: Action = Action.READ


NAVIGATION: tuple[NavigationItem, ...] = (
    NavigationItem(name="Dashboard", path="/", resource=Resource.DASHBOARD),
    NavigationItem(name="Leads", path="/leads", resource=Resource.LEADS),
    NavigationItem(name="SEO Meta Tags", path="/seo", resource=Resource.SEO),
    NavigationItem(name="Blogs", path="/blogs", resource=Resource.BLOGS),
    NavigationItem(name="Sites", path="/sites", resource=Resource.SITES),
    NavigationItem(name="IP Security", path="/ip-security", resource=Resource.IP_SECURITY),
    NavigationItem(
        name="Subscription", path="/subscription", resource=Resource.SUBSCRIPTION
    ),
    NavigationItem(name="User Management", path="/users", resource=Resource.USERS),
    NavigationItem(name="Permissions", path="/permissions", resource=Resource.PERMISSIONS),
    NavigationItem(
        name="Activity Logs", path="/activity", resource=Resource.ACTIVITY_LOGS
    ),
)

"""Application configuration package.

Static, code-level configuration that does not vary per environment
(environment-driven settings live in src.core.config).

Modules:
    collections: Paginated collections and their search/filter rules
    navigation: Dashboard menu entries and the permission gating each one
"""

from src.config.collections import COLLECTIONS
from src.config.navigation import NAVIGATION, NavigationItem

__all__ = [
    "COLLECTIONS",
    "NAVIGATION",
    "NavigationItem",
]

"""Query-string filter coercion shared by the record stores.

Filters arrive from the URL as text; both stores read them the same way so
a filter that matches in SQL matches in memory too.
"""

from uuid import UUID

TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


def parse_bool(text: str) -> bool | None:
    """"true"/"1"/"yes"/"on" -> True, the opposites -> False, else None."""
    lowered = text.strip().lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False
    return None


def parse_uuid(text: str) -> UUID | None:
    try:
        return UUID(text.strip())
    except ValueError:
        return None

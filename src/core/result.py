"""Success/Failure outcome returned by handlers and adapters.

Expected failures (bad page parameters, an unreachable store, a denied
mutation) travel as Failure values; exceptions are left for bugs.

    match await handler.handle(PaginateCollection(collection="leads", page=2)):
        case Success(value=page):
            render(page.records, page.total_pages)
        case Failure(error=error):
            show_message(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    error: E


type Result[T, E] = Success[T] | Failure[E]

"""SQLAlchemy tables, engine/session handling and the store adapters
under repositories/."""

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "BaseMutableModel",
    "Database",
]

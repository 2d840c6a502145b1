"""Profile database model.

One row per dashboard user. Credentials live with the external identity
provider; this table holds only the role and account attributes.
"""

from datetime import date

from sqlalchemy import Boolean, Date, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class ProfileModel(BaseMutableModel):
    """Profile model.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        username: Unique login name
        email: Contact email (nullable)
        phone: Contact phone (nullable)
        role: UserRole value (indexed for admin fan-out)
        is_client_paid: Paid subscription flag (clients only)
        subscription_plan: Plan name
        subscription_start: Subscription start date
        subscription_end: Subscription end date
    """

    __tablename__ = "profiles"

    username: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    role: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True, default="client"
    )
    is_client_paid: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    subscription_plan: Mapped[str | None] = mapped_column(String(50), nullable=True)
    subscription_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    subscription_end: Mapped[date | None] = mapped_column(Date, nullable=True)

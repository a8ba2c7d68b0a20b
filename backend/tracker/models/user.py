from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base, TimestampMixin, ULIDMixin

ROLES = ("admin", "user")


class User(Base, ULIDMixin, TimestampMixin):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

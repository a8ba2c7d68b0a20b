from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base, ULIDMixin

# The begin entry of a run is written with the "finish" type and later
# rewritten in place with the summary message.
REPORT_TYPE_FINISH = "finish"
REPORT_TYPE_ERROR = "error"


class ImportReport(Base, ULIDMixin):
    """Append-only log of CSV import events."""

    __tablename__ = "import_report"

    type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    file_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    seen: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=text("now()"), nullable=False
    )

"""
Translation Queue Model

Units of pending translation work. Rows are created in "pending" by content
authoring flows and moved to "completed" or "failed" by the queue worker.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal_translations.models.base import Base, TimestampMixin, generate_uuid


class QueueStatus:
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

    ALL = (PENDING, COMPLETED, FAILED)


class TranslationQueueItem(Base, TimestampMixin):
    __tablename__ = "translation_queue"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    content_key: Mapped[str] = mapped_column(String(255), index=True)
    original_text: Mapped[str] = mapped_column(Text)
    target_language: Mapped[str] = mapped_column(String(10))
    page_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    status: Mapped[str] = mapped_column(
        String(20), default=QueueStatus.PENDING, server_default=QueueStatus.PENDING, index=True
    )
    error_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    processed_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)

    def __repr__(self) -> str:
        return f"<TranslationQueueItem {self.id} {self.content_key}->{self.target_language} {self.status}>"

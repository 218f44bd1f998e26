"""
Translation Model

Cached translations of UI strings, keyed by content key, language pair and
the exact source wording.
"""

from typing import Optional

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from portal_translations.models.base import Base, TimestampMixin, generate_uuid


class Translation(Base, TimestampMixin):
    __tablename__ = "translations"
    __table_args__ = (
        # A changed original_text is a new entry that needs its own translation
        UniqueConstraint(
            "content_key",
            "target_language",
            "source_language",
            "original_text",
            name="uq_translations_content_key_language_text",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    content_key: Mapped[str] = mapped_column(String(255), index=True)

    original_text: Mapped[str] = mapped_column(Text)
    translated_text: Mapped[str] = mapped_column(Text)

    source_language: Mapped[str] = mapped_column(
        String(10), default="en", server_default="en", index=True
    )
    target_language: Mapped[str] = mapped_column(String(10), index=True)

    page_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Translation {self.content_key} {self.source_language}->{self.target_language}>"

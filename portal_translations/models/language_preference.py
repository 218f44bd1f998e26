"""
Language Preference Model

UI language chosen by an anonymous browser session.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from portal_translations.models.base import Base, TimestampMixin, generate_uuid


class LanguagePreference(Base, TimestampMixin):
    __tablename__ = "user_language_preferences"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    session_id: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    preferred_language: Mapped[str] = mapped_column(String(10), default="en", server_default="en")

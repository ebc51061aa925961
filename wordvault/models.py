"""Database models."""

from typing import Any

from sqlalchemy import JSON, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from wordvault.database import Base


class Word(Base):
    """Vocabulary entry with its spaced-repetition scheduling fields.

    Scheduling columns are nullable: rows written by older versions of the app
    may lack them and are repaired when loaded.
    """

    __tablename__ = "words"
    # AUTOINCREMENT keeps ids strictly increasing and never reused after deletes
    __table_args__ = {"sqlite_autoincrement": True}  # noqa: RUF012

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    word: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    meaning: Mapped[str] = mapped_column(Text, nullable=False)
    example: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[float | None] = mapped_column(Float, nullable=True, index=True)
    review_count: Mapped[float | None] = mapped_column(Float, nullable=True)
    interval: Mapped[float | None] = mapped_column(Float, nullable=True)
    next_review_at: Mapped[float | None] = mapped_column(Float, nullable=True)
    last_reviewed_at: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        """String representation of Word."""
        return f"<Word(id={self.id}, word='{self.word[:50]}')>"


class AppMeta(Base):
    """Key/value table for application settings that must survive restarts."""

    __tablename__ = "app_meta"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        """String representation of AppMeta."""
        return f"<AppMeta(key='{self.key}')>"

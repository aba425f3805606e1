"""Language options for the heroes client.

The client emits its message feed in one language. Keeping the choice in the
domain layer lets the CLI, the settings and the client share a single source
of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported languages for the message feed."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for the doctor table."""

        return "Spanish" if self is Language.SPANISH else "English"

"""Severity levels assigned by the analysis pipeline."""

from enum import IntEnum


class Severity(IntEnum):
    """Ordinal classification of how problematic a job is."""

    NONE = 0
    LOW = 1
    MODERATE = 2
    SEVERE = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def label_for(cls, value: int) -> str:
        """Return the display label for a stored severity value."""
        try:
            return cls(value).label
        except ValueError:
            return str(value)

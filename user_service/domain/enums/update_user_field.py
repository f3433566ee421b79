"""Updatable user attributes (field mask entries).

An update request names the attributes it wants written. Only the named
attributes are touched in storage; everything else keeps its value.
UNSPECIFIED is the zero value of the wire enum and is never a valid
update target.
"""

from enum import Enum


class UpdateUserField(Enum):
    """Field mask entry for user updates."""

    UNSPECIFIED = 0
    FIRST_NAME = 1
    LAST_NAME = 2
    NICKNAME = 3
    PASSWORD = 4
    EMAIL = 5
    COUNTRY = 6

    @property
    def attribute(self) -> str | None:
        """User attribute written for this field, None for UNSPECIFIED."""
        if self is UpdateUserField.UNSPECIFIED:
            return None
        return self.name.lower()

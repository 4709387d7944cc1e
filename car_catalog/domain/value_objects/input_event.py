"""Input event value objects."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

ESCAPE_KEY = "Escape"


class InputEventKind(str, Enum):
    """Kind of global input event."""

    KEY_DOWN = "key_down"
    POINTER_DOWN = "pointer_down"


@dataclass(frozen=True)
class InputEvent:
    """Global input event delivered to registered listeners."""

    kind: InputEventKind
    key: Optional[str] = None
    target: Optional[str] = None  # slash-separated region path, e.g. "sort-dropdown/option/2"

    @classmethod
    def key_down(cls, key: str) -> "InputEvent":
        """Create a key-down event."""
        return cls(kind=InputEventKind.KEY_DOWN, key=key)

    @classmethod
    def pointer_down(cls, target: Optional[str]) -> "InputEvent":
        """Create a pointer-down event on the given target region."""
        return cls(kind=InputEventKind.POINTER_DOWN, target=target)

    @property
    def is_escape(self) -> bool:
        """Check if this is an escape key press."""
        return self.kind is InputEventKind.KEY_DOWN and self.key == ESCAPE_KEY

    def is_inside(self, region: str) -> bool:
        """
        Check whether the pointer target lies inside a region.

        Args:
            region: Region path (the region itself or any descendant counts)

        Returns:
            True if the target is the region or nested under it
        """
        if self.target is None:
            return False
        return self.target == region or self.target.startswith(f"{region}/")

"""
Accidentals - pitch modifiers applied to a letter.
"""

from __future__ import annotations

from enum import IntEnum

# Display symbols (module level to avoid IntEnum member issues)
_SYMBOLS: dict[int, str] = {
    -2: "bb",
    -1: "b",
    0: "",
    1: "#",
    2: "##",
}


class Accidental(IntEnum):
    """
    Accidentals, valued by the semitones they add to a natural letter.

    Accidental.FLAT == -1, Accidental.DOUBLE_SHARP == 2.
    """

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def semitones(self) -> int:
        """Semitone delta applied to the letter."""
        return self.value

    @property
    def symbol(self) -> str:
        """Display symbol: '', '#', '##', 'b' or 'bb'."""
        return _SYMBOLS[self.value]

    @classmethod
    def from_name(cls, name: str) -> Accidental:
        """
        Look up an accidental by member name ('sharp', 'double_flat', ...).

        Case-insensitive; spaces and hyphens are treated as underscores.
        """
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown accidental: {name}") from None

"""
Letter names - the seven natural notes.
"""

from __future__ import annotations

from enum import Enum


class Letter(str, Enum):
    """
    The seven natural note names.

    A letter carries no chromatic position of its own; the offset from C is
    looked up when a note is converted to a pitch class.
    """

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    def __str__(self) -> str:
        return self.value


# Semitones above C for each natural letter
LETTER_OFFSETS: dict[Letter, int] = {
    Letter.C: 0,
    Letter.D: 2,
    Letter.E: 4,
    Letter.F: 5,
    Letter.G: 7,
    Letter.A: 9,
    Letter.B: 11,
}

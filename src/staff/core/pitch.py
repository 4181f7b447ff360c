"""
Pitch primitives - Pitch and Interval.

These are the foundational types for all pitch-related operations.
Pitch represents the 12 chromatic pitch classes (octave-independent).
Interval represents the signed distance between pitches in semitones.
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from .letter import LETTER_OFFSETS

if TYPE_CHECKING:
    from .note import Note

SEMITONES_PER_OCTAVE = 12


class Pitch(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both Pitch.C.
    Enharmonic spellings share one member (Pitch.D_FLAT is Pitch.C_SHARP).

    Every construction path normalizes into 0-11 with true modulo, so
    Pitch(-1) is Pitch.B and Pitch(13) is Pitch.C_SHARP.
    """

    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    # Flat aliases
    D_FLAT = 1
    E_FLAT = 3
    G_FLAT = 6
    A_FLAT = 8
    B_FLAT = 10

    @classmethod
    def _missing_(cls, value: object) -> Pitch | None:
        if isinstance(value, int):
            return cls(value % SEMITONES_PER_OCTAVE)
        return None

    @classmethod
    def from_note(cls, note: Note) -> Pitch:
        """Pitch class of a spelled note: letter offset plus accidental delta."""
        return cls(LETTER_OFFSETS[note.letter] + note.accidental.semitones)

    @classmethod
    def from_midi(cls, midi_note: int) -> Pitch:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note)

    def transpose(self, semitones: int) -> Pitch:
        """Transpose by a number of semitones (positive or negative)."""
        return Pitch(self.value + semitones)

    def interval_to(self, other: Pitch) -> Interval:
        """Get the interval from this pitch class up to another (0-11)."""
        return other - self

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * SEMITONES_PER_OCTAVE

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name ('C#' or 'Db')."""
        from .note import Note

        note = Note.from_flat(self) if prefer_flats else Note.from_sharp(self)
        return str(note)

    def __add__(self, other: object) -> Pitch:
        """
        Pitch + Interval (or semitone count) -> Pitch, wrapping mod 12.

        Any int other than a Pitch counts as semitones, including bool and
        other IntEnums such as Accidental.
        """
        if isinstance(other, Interval):
            return Pitch(self.value + other.semitones)
        if isinstance(other, int) and not isinstance(other, Pitch):
            return Pitch(self.value + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Interval | Pitch:  # type: ignore[override]
        """
        Pitch - Pitch -> Interval in 0-11 (ascending from other to self).

        Pitch - Interval (or semitone count) -> Pitch, wrapping mod 12.
        As with +, any non-Pitch int counts as semitones.
        """
        if isinstance(other, Pitch):
            return Interval((self.value - other.value) % SEMITONES_PER_OCTAVE)
        if isinstance(other, Interval):
            return Pitch(self.value - other.semitones)
        if isinstance(other, int):
            return Pitch(self.value - other)
        return NotImplemented

    def __str__(self) -> str:
        return self.spell()


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Signed and unbounded - intervals may be negative or span several octaves.
    Interval arithmetic is plain integer arithmetic; mod-12 wrapping only
    happens when an interval is applied to a Pitch.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", int(semitones))

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval(SEMITONES_PER_OCTAVE - (self._semitones % SEMITONES_PER_OCTAVE))

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __mul__(self, n: int) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if not isinstance(n, int) or isinstance(n, Pitch):
            return NotImplemented
        return Interval(self._semitones * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __int__(self) -> int:
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        name = _INTERVAL_CONSTANTS.get(self._semitones)
        if name is not None:
            return f"Interval.{name}"
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Human-readable interval name."""
        if self._semitones < 0:
            return f"-{-self}"
        mod = self._semitones % SEMITONES_PER_OCTAVE
        octaves = self._semitones // SEMITONES_PER_OCTAVE
        base = _SHORT_NAMES[mod]
        if octaves == 0:
            return base
        elif octaves == 1 and mod == 0:
            return "P8"
        return f"{base}+{octaves}oct"


_SHORT_NAMES: tuple[str, ...] = (
    "P1", "m2", "M2", "m3", "M3", "P4", "TT", "P5", "m6", "M6", "m7", "M7",
)  # fmt: skip

_INTERVAL_CONSTANTS: dict[int, str] = {
    0: "UNISON",
    1: "MINOR_SECOND",
    2: "MAJOR_SECOND",
    3: "MINOR_THIRD",
    4: "MAJOR_THIRD",
    5: "PERFECT_FOURTH",
    6: "TRITONE",
    7: "PERFECT_FIFTH",
    8: "MINOR_SIXTH",
    9: "MAJOR_SIXTH",
    10: "MINOR_SEVENTH",
    11: "MAJOR_SEVENTH",
    12: "OCTAVE",
}

# Initialize class constants after class is defined
for _semitones, _name in _INTERVAL_CONSTANTS.items():
    setattr(Interval, _name, Interval(_semitones))

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE


def transpose(key: Pitch, note: Pitch, to: Pitch) -> Pitch:
    """
    Move a note from one tonic to another, keeping its place in the key.

    The interval from the old tonic up to the note (0-11, never a signed
    shortest distance) is re-applied above the new tonic.

    Args:
        key: The tonic the note currently relates to
        note: The note to move
        to: The new tonic

    Returns:
        The transposed pitch class

    Example:
        transpose(Pitch.C, Pitch.D, Pitch.D)  # Pitch.E - still the 2nd degree
    """
    degree = Pitch(note) - Pitch(key)
    return Pitch(to) + degree

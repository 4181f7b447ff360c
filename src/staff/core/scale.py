"""
Scale primitives - ScaleType and Scale.

Scales are interval patterns from a root. A Scale is a scale type applied to a
root pitch; its degrees can be read back as pitch classes or spelled notes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .note import Note
from .pitch import SEMITONES_PER_OCTAVE, Interval, Pitch, transpose


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its interval pattern.

    The intervals are from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""

    # Common scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    MELODIC_MINOR: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    PHRYGIAN: ClassVar[ScaleType]
    LYDIAN: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]
    LOCRIAN: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        # Validate that intervals sum to an octave (12 semitones)
        total = sum(i.semitones for i in self.intervals)
        if total != SEMITONES_PER_OCTAVE:
            raise ValueError(f"Scale intervals must sum to 12 semitones, got {total}")

    def __len__(self) -> int:
        return len(self.intervals)

    def get_pitches(self, root: Pitch) -> list[Pitch]:
        """
        Get all pitch classes in this scale starting from root.

        The octave is not included.
        """
        pitches = [root]
        current = root
        for interval in self.intervals[:-1]:  # Don't include last (octave return)
            current = current + interval
            pitches.append(current)
        return pitches

    @classmethod
    def by_name(cls, name: str) -> ScaleType:
        """
        Look up a common scale type by name ('major', 'natural_minor', 'dorian'...).

        'minor' is accepted as natural minor.
        """
        key = name.strip().lower().replace(" ", "_").replace("-", "_")
        if key not in _SCALE_TYPES:
            raise ValueError(f"Unknown scale type: {name}")
        return _SCALE_TYPES[key]

    def __str__(self) -> str:
        return self.name or f"ScaleType({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ScaleType.{self.name.upper().replace(' ', '_')}"
        return f"ScaleType({self.intervals!r})"


# Define scale types using interval shorthand
_M2 = Interval.MAJOR_SECOND  # Whole step
_m2 = Interval.MINOR_SECOND  # Half step
_A2 = Interval.MINOR_THIRD  # Augmented second

ScaleType.MAJOR = ScaleType((_M2, _M2, _m2, _M2, _M2, _M2, _m2), "major")
ScaleType.NATURAL_MINOR = ScaleType((_M2, _m2, _M2, _M2, _m2, _M2, _M2), "natural minor")
ScaleType.HARMONIC_MINOR = ScaleType((_M2, _m2, _M2, _M2, _m2, _A2, _m2), "harmonic minor")
ScaleType.MELODIC_MINOR = ScaleType((_M2, _m2, _M2, _M2, _M2, _M2, _m2), "melodic minor")
ScaleType.DORIAN = ScaleType((_M2, _m2, _M2, _M2, _M2, _m2, _M2), "dorian")
ScaleType.PHRYGIAN = ScaleType((_m2, _M2, _M2, _M2, _m2, _M2, _M2), "phrygian")
ScaleType.LYDIAN = ScaleType((_M2, _M2, _M2, _m2, _M2, _M2, _m2), "lydian")
ScaleType.MIXOLYDIAN = ScaleType((_M2, _M2, _m2, _M2, _M2, _m2, _M2), "mixolydian")
ScaleType.LOCRIAN = ScaleType((_m2, _M2, _M2, _m2, _M2, _M2, _M2), "locrian")

_SCALE_TYPES: dict[str, ScaleType] = {
    "major": ScaleType.MAJOR,
    "minor": ScaleType.NATURAL_MINOR,
    "natural_minor": ScaleType.NATURAL_MINOR,
    "harmonic_minor": ScaleType.HARMONIC_MINOR,
    "melodic_minor": ScaleType.MELODIC_MINOR,
    "dorian": ScaleType.DORIAN,
    "phrygian": ScaleType.PHRYGIAN,
    "lydian": ScaleType.LYDIAN,
    "mixolydian": ScaleType.MIXOLYDIAN,
    "locrian": ScaleType.LOCRIAN,
}


@dataclass(frozen=True)
class Scale:
    """
    A scale type rooted on a pitch class.

    Examples:
        Scale(Pitch.C, ScaleType.MAJOR)          = C major
        Scale(Pitch.D, ScaleType.NATURAL_MINOR)  = D minor
    """

    root: Pitch
    scale_type: ScaleType = ScaleType.MAJOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Pitch(self.root))

    def pitches(self) -> list[Pitch]:
        """All pitch classes of the scale, tonic first."""
        return self.scale_type.get_pitches(self.root)

    def degree(self, n: int) -> Pitch:
        """
        Resolve a 1-based scale degree to a pitch class.

        Raises:
            ValueError: If n is outside 1..len(scale)
        """
        if not 1 <= n <= len(self.scale_type):
            raise ValueError(f"Degree must be 1-{len(self.scale_type)}, got {n}")
        return self.pitches()[n - 1]

    def notes(self, prefer_flats: bool = False) -> list[Note]:
        """Spell the scale with the sharp or flat table."""
        spell = Note.from_flat if prefer_flats else Note.from_sharp
        return [spell(p) for p in self.pitches()]

    def contains(self, pitch: Pitch) -> bool:
        return Pitch(pitch) in self.pitches()

    def transpose_to(self, new_root: Pitch) -> Scale:
        """
        Move the scale to a new tonic.

        Each degree keeps its interval above the tonic, so the result is the
        same scale type rooted on new_root.
        """
        return Scale(Pitch(new_root), self.scale_type)

    def transposed_pitches(self, new_root: Pitch) -> list[Pitch]:
        """Degrees of this scale carried over to new_root one by one."""
        return [transpose(self.root, p, new_root) for p in self.pitches()]

    def __str__(self) -> str:
        suffix = "minor" if self.scale_type == ScaleType.NATURAL_MINOR else str(self.scale_type)
        return f"{self.root.spell()} {suffix}"

    def __repr__(self) -> str:
        return f"Scale({self.root!r}, {self.scale_type!r})"

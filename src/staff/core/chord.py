"""
Chord primitives - ChordQuality and Chord.

Chords are stacks of intervals. Chord qualities define the interval pattern;
a Chord applies a quality to a root pitch class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .note import Note
from .pitch import Interval, Pitch


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    Intervals are measured from the root, not stacked.
    For example, a major triad is root + M3 + P5 (0, 4, 7 semitones).

    Immutable and hashable.
    """

    intervals: frozenset[Interval]
    name: str = ""
    symbol: str = ""

    # Common chord qualities (defined after class)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    DIMINISHED_7: ClassVar[ChordQuality]
    HALF_DIMINISHED_7: ClassVar[ChordQuality]
    SUS2: ClassVar[ChordQuality]
    SUS4: ClassVar[ChordQuality]

    def sorted_intervals(self) -> list[Interval]:
        return sorted(self.intervals)

    def get_pitches(self, root: Pitch) -> list[Pitch]:
        """
        Get all pitch classes in this chord.

        Args:
            root: The root pitch class

        Returns:
            List of pitch classes, ordered by interval from the root
        """
        return [root + interval for interval in self.sorted_intervals()]

    def get_midi_notes(self, root_midi: int) -> list[int]:
        """
        Get MIDI note numbers for this chord.

        Args:
            root_midi: MIDI note number for the root

        Returns:
            List of MIDI note numbers, sorted ascending
        """
        return [root_midi + interval.semitones for interval in self.sorted_intervals()]

    @classmethod
    def by_name(cls, name: str) -> ChordQuality:
        """Look up a common quality by name ('major', 'minor_7', 'sus4'...)."""
        key = name.strip().lower().replace(" ", "_").replace("-", "_")
        if key not in _CHORD_QUALITIES:
            raise ValueError(f"Unknown chord quality: {name}")
        return _CHORD_QUALITIES[key]

    def __str__(self) -> str:
        return self.name or f"ChordQuality({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ChordQuality.{self.name.upper().replace(' ', '_').replace('-', '_')}"
        return f"ChordQuality({self.intervals!r})"


def _quality(name: str, symbol: str, *semitones: int) -> ChordQuality:
    return ChordQuality(frozenset(Interval(s) for s in semitones), name, symbol)


# Define chord qualities
ChordQuality.MAJOR = _quality("major", "", 0, 4, 7)
ChordQuality.MINOR = _quality("minor", "m", 0, 3, 7)
ChordQuality.DIMINISHED = _quality("diminished", "dim", 0, 3, 6)
ChordQuality.AUGMENTED = _quality("augmented", "aug", 0, 4, 8)
ChordQuality.MAJOR_7 = _quality("major 7", "maj7", 0, 4, 7, 11)
ChordQuality.MINOR_7 = _quality("minor 7", "m7", 0, 3, 7, 10)
ChordQuality.DOMINANT_7 = _quality("dominant 7", "7", 0, 4, 7, 10)
ChordQuality.DIMINISHED_7 = _quality("diminished 7", "dim7", 0, 3, 6, 9)
ChordQuality.HALF_DIMINISHED_7 = _quality("half-diminished 7", "m7b5", 0, 3, 6, 10)
ChordQuality.SUS2 = _quality("sus2", "sus2", 0, 2, 7)
ChordQuality.SUS4 = _quality("sus4", "sus4", 0, 5, 7)

_CHORD_QUALITIES: dict[str, ChordQuality] = {
    "major": ChordQuality.MAJOR,
    "minor": ChordQuality.MINOR,
    "diminished": ChordQuality.DIMINISHED,
    "augmented": ChordQuality.AUGMENTED,
    "major_7": ChordQuality.MAJOR_7,
    "minor_7": ChordQuality.MINOR_7,
    "dominant_7": ChordQuality.DOMINANT_7,
    "diminished_7": ChordQuality.DIMINISHED_7,
    "half_diminished_7": ChordQuality.HALF_DIMINISHED_7,
    "sus2": ChordQuality.SUS2,
    "sus4": ChordQuality.SUS4,
}


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord with a root pitch and quality.

    Iterating a chord yields its pitch classes, root first.
    """

    root: Pitch
    quality: ChordQuality

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Pitch(self.root))

    @classmethod
    def major(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MAJOR)

    @classmethod
    def minor(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MINOR)

    @classmethod
    def dominant_7(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.DOMINANT_7)

    def pitches(self) -> list[Pitch]:
        """Get all pitch classes in this chord."""
        return self.quality.get_pitches(self.root)

    def notes(self, prefer_flats: bool = False) -> list[Note]:
        """Spell the chord tones with the sharp or flat table."""
        spell = Note.from_flat if prefer_flats else Note.from_sharp
        return [spell(p) for p in self.pitches()]

    def midi_notes(self, octave: int = 4) -> list[int]:
        """
        Get MIDI note numbers for this chord.

        Args:
            octave: Octave for the root (default 4)

        Returns:
            List of MIDI note numbers
        """
        return self.quality.get_midi_notes(self.root.to_midi(octave))

    def transpose(self, interval: Interval | int) -> Chord:
        """Shift the root, keeping the quality."""
        return Chord(self.root + interval, self.quality)

    def __iter__(self):
        return iter(self.pitches())

    def __str__(self) -> str:
        return f"{self.root.spell()}{self.quality.symbol}"

    def spell(self, prefer_flats: bool = False) -> str:
        """Chord symbol with the root in sharp or flat spelling ('Ebm7')."""
        return f"{self.root.spell(prefer_flats)}{self.quality.symbol}"

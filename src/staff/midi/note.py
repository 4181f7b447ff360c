"""
MIDI note numbers - a pitch class pinned to an octave.

C4 = 60, A4 = 69 = 440 Hz (twelve-tone equal temperament).
"""

from __future__ import annotations

from dataclasses import dataclass

from staff.core.letter import LETTER_OFFSETS
from staff.core.note import Note
from staff.core.pitch import SEMITONES_PER_OCTAVE, Interval, Pitch

MIDI_MIN = 0
MIDI_MAX = 127

# Concert pitch reference
A4_MIDI = 69
A4_FREQUENCY = 440.0


@dataclass(frozen=True, order=True)
class MidiNote:
    """
    A MIDI note number (0-127).

    Examples:
        MidiNote.from_pitch(Pitch.C, 4)  = 60
        MidiNote(69).frequency()         = 440.0
    """

    number: int

    def __post_init__(self) -> None:
        """Validate MIDI range."""
        if not MIDI_MIN <= self.number <= MIDI_MAX:
            raise ValueError(f"MIDI note must be 0-127, got {self.number}")

    @classmethod
    def from_pitch(cls, pitch: Pitch, octave: int = 4) -> MidiNote:
        return cls(Pitch(pitch).to_midi(octave))

    @classmethod
    def from_note(cls, note: Note, octave: int = 4) -> MidiNote:
        """
        MIDI number for a spelled note in the given octave.

        The octave belongs to the letter, so B#3 is C4 (60) and Cb4 is B3 (59).
        """
        return cls(
            (octave + 1) * SEMITONES_PER_OCTAVE
            + LETTER_OFFSETS[note.letter]
            + note.accidental.semitones
        )

    @property
    def pitch(self) -> Pitch:
        return Pitch.from_midi(self.number)

    @property
    def octave(self) -> int:
        return self.number // SEMITONES_PER_OCTAVE - 1

    def frequency(self) -> float:
        """Frequency in Hz, tuned to A4 = 440."""
        return A4_FREQUENCY * 2 ** ((self.number - A4_MIDI) / SEMITONES_PER_OCTAVE)

    def __add__(self, other: object) -> MidiNote:
        if isinstance(other, Interval):
            return MidiNote(self.number + other.semitones)
        if isinstance(other, int):
            return MidiNote(self.number + other)
        return NotImplemented

    def __sub__(self, other: object) -> MidiNote | Interval:
        if isinstance(other, MidiNote):
            return Interval(self.number - other.number)
        if isinstance(other, Interval):
            return MidiNote(self.number - other.semitones)
        if isinstance(other, int):
            return MidiNote(self.number - other)
        return NotImplemented

    def __int__(self) -> int:
        return self.number

    def spell(self, prefer_flats: bool = False) -> str:
        """Name with octave, e.g. 'C#4' or 'Db4'."""
        return f"{self.pitch.spell(prefer_flats)}{self.octave}"

    def __str__(self) -> str:
        return self.spell()

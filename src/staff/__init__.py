"""
staff - music-theory primitives.

Pitch classes, spelled notes, intervals and the enharmonic mapping between
them, with scales, chords and MIDI export built on top.
"""

from staff.core import (
    Accidental,
    Chord,
    ChordQuality,
    Interval,
    Letter,
    Note,
    Pitch,
    Scale,
    ScaleType,
    transpose,
)
from staff.midi import MidiNote

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "Chord",
    "ChordQuality",
    "Interval",
    "Letter",
    "MidiNote",
    "Note",
    "Pitch",
    "Scale",
    "ScaleType",
    "transpose",
]

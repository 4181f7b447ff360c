"""
Core music primitives.

These are the invariants everything else composes on:
- Letter: The seven natural note names
- Accidental: Semitone modifiers (bb, b, natural, #, ##)
- Pitch: The 12 chromatic pitch classes (0-11), mod-12 arithmetic
- Interval: Signed distance between pitches in semitones
- Note: Letter + accidental, with enharmonic conversion to and from Pitch
- transpose: Move a note from one tonic to another
- ScaleType / Scale: Interval patterns applied to a root
- ChordQuality / Chord: Interval stacks applied to a root
"""

from staff.core.accidental import Accidental
from staff.core.chord import Chord, ChordQuality
from staff.core.letter import Letter
from staff.core.note import Note
from staff.core.pitch import Interval, Pitch, transpose
from staff.core.scale import Scale, ScaleType

__all__ = [
    # Spelling
    "Letter",
    "Accidental",
    "Note",
    # Pitch
    "Pitch",
    "Interval",
    "transpose",
    # Scale
    "ScaleType",
    "Scale",
    # Chord
    "ChordQuality",
    "Chord",
]

"""
MIDI layer - note numbers, frequencies and file export.
"""

from staff.midi.export import (
    DEFAULT_TEMPO_BPM,
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    chord_to_events,
    chord_to_midi,
    events_to_midi,
    velocity_float_to_int,
)
from staff.midi.note import MidiNote

__all__ = [
    "DEFAULT_TEMPO_BPM",
    "TICKS_PER_BEAT",
    "MidiEvent",
    "MidiNote",
    "beats_to_ticks",
    "chord_to_events",
    "chord_to_midi",
    "events_to_midi",
    "velocity_float_to_int",
]

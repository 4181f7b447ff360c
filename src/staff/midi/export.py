"""
MIDI export - writing notes and chords to MIDI files.

This module handles conversion from MidiEvents to MIDI files using mido.
All operations are deterministic: same input -> same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from staff.core.chord import Chord


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_TEMPO_BPM = 120


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    # Convert to delta times
    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def chord_to_events(
    chord: Chord,
    octave: int = 4,
    beats: float = 4.0,
    spacing_beats: float = 0.0,
    velocity: float = 0.8,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay out a chord as note events.

    Every tone ends together after `beats`; with a non-zero `spacing_beats`
    each tone enters that much after the one below it (a rolled chord).

    Args:
        chord: The chord to voice
        octave: Octave of the root (C4 = 60)
        beats: Total length in beats
        spacing_beats: Delay between successive chord tones
        velocity: 0.0-1.0
        channel: MIDI channel (0-15)
        ticks_per_beat: Resolution

    Returns:
        One MidiEvent per chord tone, lowest first
    """
    total_ticks = beats_to_ticks(beats, ticks_per_beat)
    spacing_ticks = beats_to_ticks(spacing_beats, ticks_per_beat)
    events: list[MidiEvent] = []
    for i, pitch in enumerate(chord.midi_notes(octave)):
        start = min(i * spacing_ticks, total_ticks)
        events.append(
            MidiEvent(
                pitch=pitch,
                start_ticks=start,
                duration_ticks=total_ticks - start,
                velocity=velocity_float_to_int(velocity),
                channel=channel,
            )
        )
    return events


def chord_to_midi(
    chord: Chord,
    octave: int = 4,
    beats: float = 4.0,
    spacing_beats: float = 0.0,
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
) -> MidiFile:
    """
    Render a single chord to a MidiFile.

    Example:
        mid = chord_to_midi(Chord.major(Pitch.C), spacing_beats=0.4)
        mid.save("c_major.mid")
    """
    events = chord_to_events(chord, octave=octave, beats=beats, spacing_beats=spacing_beats)
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def velocity_float_to_int(velocity: float) -> int:
    """Convert velocity from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(velocity * 127)))

"""
MIDI tests - note numbers, frequencies and file export.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from staff.core import Chord, Interval, Letter, Note, Pitch
from staff.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    MidiNote,
    beats_to_ticks,
    chord_to_events,
    chord_to_midi,
    events_to_midi,
    velocity_float_to_int,
)


class TestMidiNote:
    """Tests for MidiNote."""

    def test_from_pitch(self) -> None:
        """C4 is 60."""
        assert MidiNote.from_pitch(Pitch.C, 4).number == 60
        assert MidiNote.from_pitch(Pitch.A, 4).number == 69

    def test_from_note_octave_follows_letter(self) -> None:
        """B#3 is C4 and Cb4 is B3."""
        assert MidiNote.from_note(Note.sharp(Letter.B), 3).number == 60
        assert MidiNote.from_note(Note.flat(Letter.C), 4).number == 59
        assert MidiNote.from_note(Note.sharp(Letter.F), 4).number == 66

    def test_range(self) -> None:
        """MIDI numbers must be 0-127."""
        with pytest.raises(ValueError, match="MIDI note must be 0-127"):
            MidiNote(128)
        with pytest.raises(ValueError, match="MIDI note must be 0-127"):
            MidiNote(-1)

    def test_pitch_and_octave(self) -> None:
        """Split back into pitch class and octave."""
        note = MidiNote(61)
        assert note.pitch is Pitch.C_SHARP
        assert note.octave == 4
        assert MidiNote(0).octave == -1

    def test_frequency(self) -> None:
        """A4 is 440 Hz; octaves double."""
        assert MidiNote(69).frequency() == pytest.approx(440.0)
        assert MidiNote(81).frequency() == pytest.approx(880.0)
        assert MidiNote(60).frequency() == pytest.approx(261.6256, rel=1e-6)

    def test_arithmetic(self) -> None:
        """Intervals move MIDI notes without wrapping."""
        assert MidiNote(60) + Interval.MAJOR_THIRD == MidiNote(64)
        assert MidiNote(60) + Interval.OCTAVE == MidiNote(72)
        assert MidiNote(60) - Interval.MINOR_SECOND == MidiNote(59)
        assert MidiNote(67) - MidiNote(60) == Interval.PERFECT_FIFTH

    def test_spell(self) -> None:
        """Names carry the octave."""
        assert str(MidiNote(61)) == "C#4"
        assert MidiNote(61).spell(prefer_flats=True) == "Db4"


class TestMidiEvent:
    """Test MidiEvent dataclass."""

    def test_event_validation_pitch_range(self) -> None:
        """Pitch must be 0-127."""
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=128, start_ticks=0, duration_ticks=480, velocity=100)

    def test_event_validation_velocity_range(self) -> None:
        """Velocity must be 0-127."""
        with pytest.raises(ValueError, match="Velocity must be 0-127"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=128)

    def test_event_validation_channel_range(self) -> None:
        """Channel must be 0-15."""
        with pytest.raises(ValueError, match="Channel must be 0-15"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100, channel=16)


class TestEventsToMidi:
    """Test the events_to_midi function."""

    def test_empty_events(self) -> None:
        """Can create MIDI file with no events."""
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_delta_times(self, temp_midi_path: Path) -> None:
        """Absolute ticks become deltas; the file reads back."""
        events = [
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100),
            MidiEvent(pitch=64, start_ticks=480, duration_ticks=480, velocity=100),
        ]
        events_to_midi(events).save(str(temp_midi_path))

        loaded = MidiFile(str(temp_midi_path))
        notes = [m for m in loaded.tracks[0] if m.type in ("note_on", "note_off")]
        assert [(m.type, m.note, m.time) for m in notes] == [
            ("note_on", 60, 0),
            ("note_off", 60, 480),
            ("note_on", 64, 0),
            ("note_off", 64, 480),
        ]


class TestChordExport:
    """Tests for chord_to_events / chord_to_midi."""

    def test_block_chord(self) -> None:
        """All tones start together and last the full length."""
        events = chord_to_events(Chord.major(Pitch.C), octave=4, beats=4.0)
        assert [e.pitch for e in events] == [60, 64, 67]
        assert all(e.start_ticks == 0 for e in events)
        assert all(e.duration_ticks == 4 * TICKS_PER_BEAT for e in events)

    def test_rolled_chord(self) -> None:
        """Spacing staggers onsets; every tone releases together."""
        events = chord_to_events(Chord.major(Pitch.C), beats=4.0, spacing_beats=0.5)
        assert [e.start_ticks for e in events] == [0, 240, 480]
        assert [e.start_ticks + e.duration_ticks for e in events] == [1920, 1920, 1920]

    def test_velocity(self) -> None:
        """Velocity is scaled to 0-127."""
        events = chord_to_events(Chord.major(Pitch.C), velocity=0.8)
        assert {e.velocity for e in events} == {101}

    def test_chord_to_midi_file(self, temp_midi_path: Path) -> None:
        """A chord writes a readable file with one note_on per tone."""
        mid = chord_to_midi(Chord.dominant_7(Pitch.G), octave=3, tempo_bpm=90)
        mid.save(str(temp_midi_path))

        loaded = MidiFile(str(temp_midi_path))
        note_ons = [m.note for m in loaded.tracks[0] if m.type == "note_on"]
        assert note_ons == [55, 59, 62, 65]
        tempo = [m.tempo for m in loaded.tracks[0] if m.type == "set_tempo"]
        assert tempo == [int(60_000_000 / 90)]


class TestHelpers:
    """Test tick and velocity helpers."""

    def test_beats_to_ticks(self) -> None:
        """Beats convert at the given resolution."""
        assert beats_to_ticks(1.0) == 480
        assert beats_to_ticks(0.5, ticks_per_beat=96) == 48

    def test_velocity_float_to_int(self) -> None:
        """Velocity is clamped to 0-127."""
        assert velocity_float_to_int(1.0) == 127
        assert velocity_float_to_int(1.5) == 127
        assert velocity_float_to_int(-0.5) == 0

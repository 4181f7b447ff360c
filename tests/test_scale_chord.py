"""
Tests for scales and chords built on the core.
"""

import pytest

from staff.core import Chord, ChordQuality, Interval, Letter, Note, Pitch, Scale, ScaleType


class TestScaleType:
    """Tests for ScaleType class."""

    def test_major_scale_intervals(self) -> None:
        """Major scale has correct intervals."""
        semitones = [i.semitones for i in ScaleType.MAJOR.intervals]
        assert semitones == [2, 2, 1, 2, 2, 2, 1]

    def test_minor_scale_intervals(self) -> None:
        """Natural minor scale has correct intervals."""
        semitones = [i.semitones for i in ScaleType.NATURAL_MINOR.intervals]
        assert semitones == [2, 1, 2, 2, 1, 2, 2]

    def test_must_sum_to_octave(self) -> None:
        """Patterns that do not span an octave are rejected."""
        with pytest.raises(ValueError, match="must sum to 12"):
            ScaleType((Interval.MAJOR_SECOND,) * 5, "broken")

    def test_get_pitches(self) -> None:
        """Get pitches in a scale."""
        assert ScaleType.MAJOR.get_pitches(Pitch.C) == [
            Pitch.C,
            Pitch.D,
            Pitch.E,
            Pitch.F,
            Pitch.G,
            Pitch.A,
            Pitch.B,
        ]

    def test_by_name(self) -> None:
        """Look up scale types by name."""
        assert ScaleType.by_name("major") is ScaleType.MAJOR
        assert ScaleType.by_name("minor") is ScaleType.NATURAL_MINOR
        assert ScaleType.by_name("Harmonic Minor") is ScaleType.HARMONIC_MINOR

    def test_by_name_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown scale type"):
            ScaleType.by_name("bebop")


class TestScale:
    """Tests for Scale class."""

    def test_root_normalized(self) -> None:
        """Integer roots wrap into a pitch class."""
        assert Scale(14).root is Pitch.D
        assert Scale(14, ScaleType.MAJOR).pitches()[0] is Pitch.D
        assert Scale(-3) == Scale(Pitch.A)

    def test_degree(self) -> None:
        """Resolve degree to pitch."""
        c_major = Scale(Pitch.C, ScaleType.MAJOR)
        assert c_major.degree(1) is Pitch.C
        assert c_major.degree(5) is Pitch.G

        d_minor = Scale(Pitch.D, ScaleType.NATURAL_MINOR)
        assert d_minor.degree(3) is Pitch.F

    def test_degree_out_of_range(self) -> None:
        """Degrees outside the scale raise ValueError."""
        with pytest.raises(ValueError):
            Scale(Pitch.C).degree(0)
        with pytest.raises(ValueError):
            Scale(Pitch.C).degree(8)

    def test_notes_with_flats(self) -> None:
        """D minor spelled with flats."""
        notes = Scale(Pitch.D, ScaleType.NATURAL_MINOR).notes(prefer_flats=True)
        assert [str(n) for n in notes] == ["D", "E", "F", "G", "A", "Bb", "C"]

    def test_notes_with_sharps(self) -> None:
        """F# major spelled from the sharp table."""
        notes = Scale(Pitch.F_SHARP, ScaleType.MAJOR).notes()
        assert [str(n) for n in notes] == ["F#", "G#", "A#", "B", "C#", "D#", "F"]

    def test_contains(self) -> None:
        """Membership by pitch class."""
        c_major = Scale(Pitch.C)
        assert c_major.contains(Pitch.E)
        assert not c_major.contains(Pitch.E_FLAT)

    def test_transpose_to(self) -> None:
        """Moving the tonic keeps the scale type."""
        d_major = Scale(Pitch.C).transpose_to(Pitch.D)
        assert d_major == Scale(Pitch.D, ScaleType.MAJOR)
        assert d_major.contains(Pitch.F_SHARP)

    def test_transposed_pitches_match_new_scale(self) -> None:
        """Degree-by-degree transposition gives the scale on the new tonic."""
        for scale_type in (ScaleType.MAJOR, ScaleType.DORIAN, ScaleType.HARMONIC_MINOR):
            scale = Scale(Pitch.A, scale_type)
            for root in Pitch:
                assert scale.transposed_pitches(root) == Scale(root, scale_type).pitches()

    def test_str(self) -> None:
        """Conventional names."""
        assert str(Scale(Pitch.C)) == "C major"
        assert str(Scale(Pitch.D, ScaleType.NATURAL_MINOR)) == "D minor"
        assert str(Scale(Pitch.E, ScaleType.DORIAN)) == "E dorian"


class TestChordQuality:
    """Tests for ChordQuality class."""

    def test_major_triad(self) -> None:
        """Major triad has correct intervals."""
        assert {i.semitones for i in ChordQuality.MAJOR.intervals} == {0, 4, 7}

    def test_dominant_seventh(self) -> None:
        """Dominant 7th has correct intervals."""
        assert {i.semitones for i in ChordQuality.DOMINANT_7.intervals} == {0, 4, 7, 10}

    def test_get_pitches_ordered(self) -> None:
        """Pitches come out in interval order."""
        assert ChordQuality.MAJOR_7.get_pitches(Pitch.C) == [Pitch.C, Pitch.E, Pitch.G, Pitch.B]

    def test_by_name(self) -> None:
        """Look up qualities by name."""
        assert ChordQuality.by_name("dominant 7") is ChordQuality.DOMINANT_7
        assert ChordQuality.by_name("half-diminished 7") is ChordQuality.HALF_DIMINISHED_7

    def test_by_name_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown chord quality"):
            ChordQuality.by_name("mu major")


class TestChord:
    """Tests for Chord class."""

    def test_root_normalized(self) -> None:
        """Integer roots wrap into a pitch class."""
        assert Chord(13, ChordQuality.MINOR).root is Pitch.C_SHARP
        assert str(Chord(13, ChordQuality.MINOR)) == "C#m"
        assert Chord.major(-1) == Chord.major(Pitch.B)

    def test_major(self) -> None:
        """C major is C E G."""
        chord = Chord.major(Pitch.C)
        assert chord.pitches() == [Pitch.C, Pitch.E, Pitch.G]
        assert list(chord) == [Pitch.C, Pitch.E, Pitch.G]

    def test_wraps(self) -> None:
        """B major wraps past C."""
        assert Chord.major(Pitch.B).pitches() == [Pitch.B, Pitch.D_SHARP, Pitch.F_SHARP]

    def test_midi_notes(self) -> None:
        """MIDI notes stack above the root."""
        assert Chord.major(Pitch.C).midi_notes(4) == [60, 64, 67]
        assert Chord.major(Pitch.B).midi_notes(3) == [59, 63, 66]

    def test_notes_spelling(self) -> None:
        """Bb major spelled with flats."""
        notes = Chord.major(Pitch.B_FLAT).notes(prefer_flats=True)
        assert notes == [Note.flat(Letter.B), Note.natural(Letter.D), Note.natural(Letter.F)]
        assert [str(n) for n in notes] == ["Bb", "D", "F"]

    def test_symbols(self) -> None:
        """Chord symbols with sharp or flat roots."""
        chord = Chord(Pitch.D_SHARP, ChordQuality.MINOR_7)
        assert str(chord) == "D#m7"
        assert chord.spell(prefer_flats=True) == "Ebm7"
        assert str(Chord.major(Pitch.C)) == "C"
        assert str(Chord.dominant_7(Pitch.G)) == "G7"

    def test_transpose(self) -> None:
        """Transposing moves the root and keeps the quality."""
        assert Chord.minor(Pitch.A).transpose(Interval.PERFECT_FIFTH) == Chord.minor(Pitch.E)
        assert Chord.major(Pitch.C).transpose(-1) == Chord.major(Pitch.B)

"""
Note primitives - spelled notes and enharmonic conversion.

A Note is a letter plus an accidental (C#, Db, Fb, B##...). Several notes can
name the same Pitch; those are enharmonic equivalents. Conversion back from a
Pitch goes through one of two spelling tables, sharps or flats.
"""

from __future__ import annotations

from dataclasses import dataclass

from .accidental import Accidental
from .letter import Letter
from .pitch import Pitch


@dataclass(frozen=True)
class Note:
    """
    A spelled note: letter + accidental.

    Immutable and hashable. No canonical spelling is enforced - Note.sharp(C)
    and Note.flat(D) are different notes that share Pitch.C_SHARP.

    Examples:
        Note.natural(Letter.A)  -> A
        Note.sharp(Letter.F)    -> F#
        Note.flat(Letter.B)     -> Bb
    """

    letter: Letter
    accidental: Accidental = Accidental.NATURAL

    @classmethod
    def natural(cls, letter: Letter) -> Note:
        return cls(letter, Accidental.NATURAL)

    @classmethod
    def sharp(cls, letter: Letter) -> Note:
        return cls(letter, Accidental.SHARP)

    @classmethod
    def flat(cls, letter: Letter) -> Note:
        return cls(letter, Accidental.FLAT)

    @classmethod
    def double_sharp(cls, letter: Letter) -> Note:
        return cls(letter, Accidental.DOUBLE_SHARP)

    @classmethod
    def double_flat(cls, letter: Letter) -> Note:
        return cls(letter, Accidental.DOUBLE_FLAT)

    @classmethod
    def from_sharp(cls, pitch: Pitch | int) -> Note:
        """
        Spell a pitch class using naturals and sharps.

        Black keys take the letter below: C#, D#, F#, G#, A#.
        """
        return _SHARP_SPELLINGS[Pitch(pitch)]

    @classmethod
    def from_flat(cls, pitch: Pitch | int) -> Note:
        """
        Spell a pitch class using naturals and flats.

        Black keys take the letter above: Db, Eb, Gb, Ab, Bb.
        """
        return _FLAT_SPELLINGS[Pitch(pitch)]

    @property
    def pitch(self) -> Pitch:
        """The pitch class this note sounds."""
        return Pitch.from_note(self)

    def into_sharp(self) -> Note:
        """
        Return the enharmonic note for self in sharp notation.

        Examples:
            Note.flat(Letter.D).into_sharp()   -> C#
            Note.sharp(Letter.B).into_sharp()  -> C
        """
        return Note.from_sharp(Pitch.from_note(self))

    def into_flat(self) -> Note:
        """
        Return the enharmonic note for self in flat notation.

        Examples:
            Note.sharp(Letter.G).into_flat()  -> Ab
            Note.flat(Letter.F).into_flat()   -> E
        """
        return Note.from_flat(Pitch.from_note(self))

    def is_enharmonic(self, other: Note) -> bool:
        """
        True if self and other sound the same pitch class.

        A note is always enharmonic with itself.
        """
        return Pitch.from_note(self) == Pitch.from_note(other)

    def __str__(self) -> str:
        return f"{self.letter.value}{self.accidental.symbol}"

    def __repr__(self) -> str:
        return f"Note({self.letter.name}, {self.accidental.name})"


_SHARP_SPELLINGS: dict[Pitch, Note] = {
    Pitch.C: Note.natural(Letter.C),
    Pitch.C_SHARP: Note.sharp(Letter.C),
    Pitch.D: Note.natural(Letter.D),
    Pitch.D_SHARP: Note.sharp(Letter.D),
    Pitch.E: Note.natural(Letter.E),
    Pitch.F: Note.natural(Letter.F),
    Pitch.F_SHARP: Note.sharp(Letter.F),
    Pitch.G: Note.natural(Letter.G),
    Pitch.G_SHARP: Note.sharp(Letter.G),
    Pitch.A: Note.natural(Letter.A),
    Pitch.A_SHARP: Note.sharp(Letter.A),
    Pitch.B: Note.natural(Letter.B),
}

_FLAT_SPELLINGS: dict[Pitch, Note] = {
    Pitch.C: Note.natural(Letter.C),
    Pitch.D_FLAT: Note.flat(Letter.D),
    Pitch.D: Note.natural(Letter.D),
    Pitch.E_FLAT: Note.flat(Letter.E),
    Pitch.E: Note.natural(Letter.E),
    Pitch.F: Note.natural(Letter.F),
    Pitch.G_FLAT: Note.flat(Letter.G),
    Pitch.G: Note.natural(Letter.G),
    Pitch.A_FLAT: Note.flat(Letter.A),
    Pitch.A: Note.natural(Letter.A),
    Pitch.B_FLAT: Note.flat(Letter.B),
    Pitch.B: Note.natural(Letter.B),
}

# Both tables must cover every pitch class and spell it correctly
for _table in (_SHARP_SPELLINGS, _FLAT_SPELLINGS):
    assert set(_table) == set(Pitch), "spelling table is missing a pitch class"
    assert all(Pitch.from_note(n) is p for p, n in _table.items()), "misspelled pitch class"

"""
Pydantic models for the tool surface.

Tool inputs arrive as plain strings and integers. These models validate them
into core types (Letter, Accidental, Note) before anything reaches the core,
and shape the results that go back out as JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from staff.core import Accidental, Chord, Letter, Note, Pitch, Scale


class NoteSpec(BaseModel):
    """
    A note given by letter and accidental name.

    letter is one of C D E F G A B (case-insensitive); accidental is a name
    such as 'natural', 'sharp', 'double_flat'.
    """

    letter: Letter = Field(..., description="Letter name (C-B)")
    accidental: Accidental = Field(Accidental.NATURAL, description="Accidental name")

    model_config = {"frozen": True}

    @field_validator("letter", mode="before")
    @classmethod
    def normalize_letter(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("accidental", mode="before")
    @classmethod
    def parse_accidental(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Accidental.from_name(v)
        return v

    def to_note(self) -> Note:
        return Note(self.letter, self.accidental)


class NoteInfo(BaseModel):
    """A spelled note as reported back to callers."""

    name: str = Field(..., description="Display name, e.g. 'C#'")
    letter: str = Field(..., description="Letter name")
    accidental: str = Field(..., description="Accidental name")
    pitch: int = Field(..., ge=0, le=11, description="Pitch class (C=0)")

    @classmethod
    def from_note(cls, note: Note) -> NoteInfo:
        return cls(
            name=str(note),
            letter=note.letter.value,
            accidental=note.accidental.name.lower(),
            pitch=int(note.pitch),
        )


class PitchInfo(BaseModel):
    """A pitch class with both canonical spellings."""

    pitch: int = Field(..., ge=0, le=11, description="Pitch class (C=0)")
    sharp: NoteInfo
    flat: NoteInfo

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> PitchInfo:
        return cls(
            pitch=int(pitch),
            sharp=NoteInfo.from_note(Note.from_sharp(pitch)),
            flat=NoteInfo.from_note(Note.from_flat(pitch)),
        )


class ScaleInfo(BaseModel):
    """A rooted scale, spelled."""

    name: str
    root: int = Field(..., ge=0, le=11)
    pitches: list[int]
    notes: list[str]

    @classmethod
    def from_scale(cls, scale: Scale, prefer_flats: bool = False) -> ScaleInfo:
        return cls(
            name=str(scale),
            root=int(scale.root),
            pitches=[int(p) for p in scale.pitches()],
            notes=[str(n) for n in scale.notes(prefer_flats)],
        )


class ChordInfo(BaseModel):
    """A chord, spelled, with MIDI numbers for the given octave."""

    symbol: str
    quality: str
    root: int = Field(..., ge=0, le=11)
    pitches: list[int]
    notes: list[str]
    midi_notes: list[int]

    @classmethod
    def from_chord(cls, chord: Chord, octave: int = 4, prefer_flats: bool = False) -> ChordInfo:
        return cls(
            symbol=chord.spell(prefer_flats),
            quality=chord.quality.name,
            root=int(chord.root),
            pitches=[int(p) for p in chord.pitches()],
            notes=[str(n) for n in chord.notes(prefer_flats)],
            midi_notes=chord.midi_notes(octave),
        )

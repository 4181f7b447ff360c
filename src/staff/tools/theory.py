"""
Theory tools - MCP tools for spelling, enharmonics and transposition.

Tools for converting between pitch classes and spelled notes, and for
building scales and chords on a root.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from staff.constants import ErrorMessages, Notation
from staff.core import Chord, ChordQuality, Note, Pitch, Scale, ScaleType, transpose
from staff.models import ChordInfo, NoteInfo, NoteSpec, PitchInfo, ScaleInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register theory tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_spell_pitch(pitch: int) -> str:
        """
        Spell a pitch class in both sharp and flat notation.

        Args:
            pitch: Pitch class (C=0 ... B=11); other integers wrap mod 12

        Returns:
            JSON string with the sharp and flat spellings

        Example:
            music_spell_pitch(pitch=6)  # F# / Gb
        """
        try:
            info = PitchInfo.from_pitch(Pitch(pitch))
            return json.dumps({"status": "success", "pitch": info.model_dump()})
        except Exception as e:
            logger.exception("Failed to spell pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_spell_pitch"] = music_spell_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def music_respell_note(
        letter: str,
        accidental: str = "natural",
        notation: Notation = "sharp",
    ) -> str:
        """
        Re-spell a note in sharp or flat notation, keeping its pitch.

        Args:
            letter: Letter name (C, D, E, F, G, A, B)
            accidental: 'natural', 'sharp', 'flat', 'double_sharp' or 'double_flat'
            notation: 'sharp' or 'flat'

        Returns:
            JSON string with the original and re-spelled notes

        Example:
            music_respell_note(letter="G", accidental="sharp", notation="flat")  # Ab
        """
        try:
            note = NoteSpec(letter=letter, accidental=accidental).to_note()
            if notation == "sharp":
                respelled = note.into_sharp()
            elif notation == "flat":
                respelled = note.into_flat()
            else:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_NOTATION.format(notation=notation),
                    }
                )

            logger.debug(f"Respelled {note} as {respelled} ({notation})")
            return json.dumps(
                {
                    "status": "success",
                    "note": NoteInfo.from_note(note).model_dump(),
                    "respelled": NoteInfo.from_note(respelled).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to respell note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_respell_note"] = music_respell_note

    @mcp.tool  # type: ignore[arg-type]
    async def music_is_enharmonic(
        letter: str,
        other_letter: str,
        accidental: str = "natural",
        other_accidental: str = "natural",
    ) -> str:
        """
        Check whether two spelled notes sound the same pitch class.

        Args:
            letter: First note's letter
            other_letter: Second note's letter
            accidental: First note's accidental name
            other_accidental: Second note's accidental name

        Returns:
            JSON string with both notes and the result

        Example:
            music_is_enharmonic(letter="C", accidental="sharp",
                                other_letter="D", other_accidental="flat")  # true
        """
        try:
            note = NoteSpec(letter=letter, accidental=accidental).to_note()
            other = NoteSpec(letter=other_letter, accidental=other_accidental).to_note()
            return json.dumps(
                {
                    "status": "success",
                    "note": NoteInfo.from_note(note).model_dump(),
                    "other": NoteInfo.from_note(other).model_dump(),
                    "enharmonic": note.is_enharmonic(other),
                }
            )
        except Exception as e:
            logger.exception("Failed to compare notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_is_enharmonic"] = music_is_enharmonic

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose(key: int, note: int, to: int, prefer_flats: bool = False) -> str:
        """
        Move a note from one key to another, keeping its degree.

        Args:
            key: Current tonic pitch class (C=0)
            note: Pitch class to move
            to: New tonic pitch class
            prefer_flats: Spell the result with flats

        Returns:
            JSON string with the transposed pitch and its spelling

        Example:
            music_transpose(key=0, note=2, to=2)  # D in C -> E in D
        """
        try:
            result = transpose(Pitch(key), Pitch(note), Pitch(to))
            spelled = Note.from_flat(result) if prefer_flats else Note.from_sharp(result)
            return json.dumps(
                {
                    "status": "success",
                    "interval": (Pitch(note) - Pitch(key)).semitones,
                    "result": NoteInfo.from_note(spelled).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose"] = music_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_scale(root: int, scale: str = "major", prefer_flats: bool = False) -> str:
        """
        Build a scale on a root pitch class.

        Args:
            root: Root pitch class (C=0)
            scale: Scale type ('major', 'minor', 'dorian', 'harmonic_minor', ...)
            prefer_flats: Spell with flats instead of sharps

        Returns:
            JSON string with the scale's pitches and spelled notes

        Example:
            music_build_scale(root=2, scale="minor", prefer_flats=True)  # D E F G A Bb C
        """
        try:
            built = Scale(Pitch(root), ScaleType.by_name(scale))
            info = ScaleInfo.from_scale(built, prefer_flats=prefer_flats)
            return json.dumps({"status": "success", "scale": info.model_dump()})
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_build_scale"] = music_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_chord(
        root: int,
        quality: str = "major",
        octave: int = 4,
        prefer_flats: bool = False,
    ) -> str:
        """
        Build a chord on a root pitch class.

        Args:
            root: Root pitch class (C=0)
            quality: Chord quality ('major', 'minor', 'dominant_7', 'sus4', ...)
            octave: Octave of the root for MIDI numbers (C4 = 60)
            prefer_flats: Spell with flats instead of sharps

        Returns:
            JSON string with the chord's symbol, notes and MIDI numbers

        Example:
            music_build_chord(root=3, quality="minor_7", prefer_flats=True)  # Ebm7
        """
        try:
            chord = Chord(Pitch(root), ChordQuality.by_name(quality))
            info = ChordInfo.from_chord(chord, octave=octave, prefer_flats=prefer_flats)
            return json.dumps({"status": "success", "chord": info.model_dump()})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_build_chord"] = music_build_chord

    return tools

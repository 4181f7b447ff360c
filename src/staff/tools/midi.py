"""
MIDI tools - MCP tools for MIDI export.

Tools for writing chords to MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from staff.constants import ErrorMessages, SuccessMessages
from staff.core import Chord, ChordQuality, Pitch
from staff.midi import MidiNote, chord_to_midi
from staff.models import ChordInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

MIN_TEMPO = 40
MAX_TEMPO = 240


def register_midi_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register MIDI export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_chord_midi(
        root: int,
        quality: str = "major",
        octave: int = 4,
        beats: float = 4.0,
        spacing_beats: float = 0.0,
        tempo: int = 120,
        output_name: str | None = None,
    ) -> str:
        """
        Write a chord to a MIDI file.

        Tones sound together, or rolled from the bottom when spacing_beats
        is set, and all release at the end.

        Args:
            root: Root pitch class (C=0)
            quality: Chord quality ('major', 'minor', 'dominant_7', ...)
            octave: Octave of the root (C4 = 60)
            beats: Length of the chord in beats
            spacing_beats: Delay between successive chord tones
            tempo: Tempo in BPM (40-240)
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and chord details

        Example:
            music_export_chord_midi(root=0, quality="major", spacing_beats=0.4)
        """
        try:
            if not MIN_TEMPO <= tempo <= MAX_TEMPO:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_TEMPO.format(tempo=tempo)}
                )

            chord = Chord(Pitch(root), ChordQuality.by_name(quality))
            try:
                frequencies = [MidiNote(n).frequency() for n in chord.midi_notes(octave)]
            except ValueError:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_OCTAVE.format(octave=octave),
                    }
                )

            mid = chord_to_midi(
                chord,
                octave=octave,
                beats=beats,
                spacing_beats=spacing_beats,
                tempo_bpm=tempo,
            )

            filename = f"{output_name or f'{chord.spell()}_{octave}'}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            mid.save(str(output_path))
            logger.info(f"Wrote {chord} to {output_path}")

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chord": ChordInfo.from_chord(chord, octave=octave).model_dump(),
                    "frequencies": [round(f, 3) for f in frequencies],
                    "message": SuccessMessages.CHORD_EXPORTED.format(chord=chord, path=output_path),
                }
            )
        except Exception as e:
            logger.exception("Failed to export chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_chord_midi"] = music_export_chord_midi

    return tools

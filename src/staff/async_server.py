#!/usr/bin/env python3
"""
Async Staff MCP Server using chuk-mcp-server

This server exposes the staff music-theory primitives as MCP tools:
- Spelling pitch classes in sharp and flat notation
- Re-spelling notes and checking enharmonic equivalence
- Transposing notes between keys
- Building scales and chords on a root
- Exporting chords to MIDI files
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from staff.server import resolve_output_dir
from staff.tools import register_midi_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("staff")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = resolve_output_dir(BASE_PATH)

# Register all tools
theory_tools = register_theory_tools(mcp)
midi_tools = register_midi_tools(mcp, OUTPUT_DIR)

# Export tool functions for direct access
music_spell_pitch = theory_tools["music_spell_pitch"]
music_respell_note = theory_tools["music_respell_note"]
music_is_enharmonic = theory_tools["music_is_enharmonic"]
music_transpose = theory_tools["music_transpose"]
music_build_scale = theory_tools["music_build_scale"]
music_build_chord = theory_tools["music_build_chord"]

music_export_chord_midi = midi_tools["music_export_chord_midi"]

logger.info("Staff MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")

"""
MCP tool implementations.

Tools are organized by domain:
- theory - Spelling, enharmonics, transposition, scales and chords
- midi - MIDI export
"""

from staff.tools.midi import register_midi_tools
from staff.tools.theory import register_theory_tools

__all__ = [
    "register_midi_tools",
    "register_theory_tools",
]

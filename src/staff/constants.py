"""
Constants for the tool surface.

No magic strings - use enums and Literal types for constrained values.
"""

from typing import Literal

# Spelling table selector
Notation = Literal["sharp", "flat"]

# Overrides the MIDI output directory when --output-dir is not given
OUTPUT_DIR_ENV = "STAFF_OUTPUT_DIR"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTATION = "Invalid notation: '{notation}'. Expected 'sharp' or 'flat'."
    INVALID_OCTAVE = "Invalid octave: {octave}. Chord does not fit in MIDI range 0-127."
    INVALID_TEMPO = "Invalid tempo: {tempo}. Must be between 40 and 240 BPM."


class SuccessMessages:
    """Standardized success messages."""

    CHORD_EXPORTED = "Exported chord '{chord}' to {path}."

#!/usr/bin/env python3
"""
Example: Write chords to MIDI files.

Builds a few chords from the core types, prints their spellings and
frequencies, and writes rolled versions you can open in any DAW.

Usage:
    python examples/generate_chord_midi.py
    # Creates: examples/output/c_major.mid, examples/output/progression.mid
"""

from dataclasses import replace
from pathlib import Path

from staff import Chord, MidiNote, Pitch, Scale, ScaleType, transpose
from staff.midi import TICKS_PER_BEAT, chord_to_events, chord_to_midi, events_to_midi


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: C major, rolled from the bottom
    chord = Chord.major(Pitch.C)
    print(f"{chord}: {' '.join(str(n) for n in chord.notes())}")
    for number in chord.midi_notes(4):
        note = MidiNote(number)
        print(f"  {note}  {note.frequency():.2f} Hz")

    mid = chord_to_midi(chord, octave=4, beats=4.0, spacing_beats=0.4)
    mid.save(str(output_dir / "c_major.mid"))
    print(f"  Created: {output_dir / 'c_major.mid'}")

    # Example 2: i-VI-III-VII in D minor, carried over to F minor
    print("\nGenerating progression.mid...")
    d_minor = Scale(Pitch.D, ScaleType.NATURAL_MINOR)
    roots = [d_minor.degree(d) for d in (1, 6, 3, 7)]
    qualities = [Chord.minor, Chord.major, Chord.major, Chord.major]
    chords = [make(transpose(d_minor.root, root, Pitch.F)) for make, root in zip(qualities, roots)]
    print("  " + " - ".join(c.spell(prefer_flats=True) for c in chords))

    events = []
    ticks_per_bar = TICKS_PER_BEAT * 4
    for bar, c in enumerate(chords):
        for event in chord_to_events(c, octave=3, beats=4.0, spacing_beats=0.1):
            events.append(replace(event, start_ticks=event.start_ticks + bar * ticks_per_bar))
    events_to_midi(events, tempo_bpm=96).save(str(output_dir / "progression.mid"))
    print(f"  Created: {output_dir / 'progression.mid'}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()

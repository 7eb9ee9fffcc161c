"""Constants for neck geometry, shape generation and display.

This module collects the fixed numbers the shape algorithm and the neck
renderer agree on: fret counts, box widths, MIDI pitch bounds, fret
marker positions and the display palette.
"""

from typing import Dict, List, Tuple

DEFAULT_FRET_COUNT = 21
"""Number of frets on the default neck (fret 0 is the open string)."""

BOX_SPANS: Tuple[int, ...] = (4, 5)
"""Box widths (in frets) scanned for shapes, narrowest first."""

NOTES_PER_STRING = 3
"""Scale positions every string must hold inside a qualifying box."""

MIDI_MIN_NOTE = 0
"""Lowest representable absolute pitch."""
MIDI_MAX_NOTE = 127
"""Highest representable absolute pitch."""

DEFAULT_OCTAVE = 2
"""Octave assigned to the first string of a tuning given without octaves."""

FRET_MARKERS: List[int] = [3, 5, 7, 9, 12, 15, 17, 19]
"""Frets carrying an inlay marker on the neck diagram."""

DOUBLE_MARKERS: List[int] = [12]
"""Frets carrying a double inlay marker."""

FINGER_COLORS: Dict[int, str] = {
    0: "#F93B41",  # open string
    1: "#FAB101",
    2: "#FB6500",
    3: "#745BFB",
    4: "#01A5FA",
}
"""Dot colors keyed by finger number, with 0 for the open string."""

ROOT_COLOR = "#EF4444"
"""Dot color for root notes in the classic and harmonic styles."""
MEMBER_COLOR = "#3B82F6"
"""Dot color for highlighted scale members."""
MUTED_COLOR = "#3F3F46"
"""Dot color for in-shape members without emphasis."""
FAINT_COLOR = "#71717A"
"""Dot color for scale notes outside the selected shape."""

"""String tunings and the two orderings of their strings.

A tuning lists open-string pitches in display order, top to bottom on the
neck diagram (highest pitch first by convention). The shape algorithm also
needs strings in pitch order, lowest first, to pick the lowest root. The
two orders may differ, as in re-entrant ukulele tuning.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Tuple

from fretbox import constants
from fretbox.scale import Spelling, pitch_class, spell, spell_note


@dataclass(frozen=True)
class TunedString:
    """One open string with both of its positions in the tuning."""

    display_index: int
    """Position on the diagram, 0 is the top row."""
    pitch_rank: int
    """Position by ascending pitch, 0 is the lowest string."""
    note: int
    """Absolute pitch of the open string."""

    @property
    def pitch_class(self) -> int:
        return pitch_class(self.note)


@dataclass(frozen=True)
class Tuning:
    """An ordered set of open-string pitches.

    Strings are addressed by display index throughout fretbox; the pitch
    order is derived on demand. Equal pitches rank by display index, the
    later (lower on the diagram) string first.
    """

    name: str
    """Short name of the tuning, e.g. "bass-4"."""
    notes: Tuple[int, ...]
    """Absolute open-string pitches in display order."""

    def __post_init__(self) -> None:
        if not self.notes:
            raise ValueError("Tuning cannot be empty")
        for note in self.notes:
            if note < constants.MIDI_MIN_NOTE or note > constants.MIDI_MAX_NOTE:
                raise ValueError(f"Open string pitch out of range: {note}")

    @property
    def num_strings(self) -> int:
        return len(self.notes)

    def _ranks(self) -> List[int]:
        order = sorted(range(len(self.notes)), key=lambda i: (self.notes[i], -i))
        ranks = [0] * len(self.notes)
        for rank, str_index in enumerate(order):
            ranks[str_index] = rank
        return ranks

    def strings(self) -> List[TunedString]:
        """All strings in display order."""
        ranks = self._ranks()
        return [
            TunedString(display_index=i, pitch_rank=ranks[i], note=note)
            for i, note in enumerate(self.notes)
        ]

    def pitch_order(self) -> List[TunedString]:
        """All strings in ascending pitch order, lowest first."""
        return sorted(self.strings(), key=lambda s: s.pitch_rank)

    def pitch_rank(self, str_index: int) -> int:
        """Get the pitch rank of the string at a display index."""
        return self._ranks()[str_index]

    def open_pitch_class(self, str_index: int) -> int:
        return pitch_class(self.notes[str_index])

    def pitch_class_at(self, str_index: int, fret: int) -> int:
        """Get the pitch class sounded by a string stopped at a fret."""
        return pitch_class(self.notes[str_index] + fret)

    def string_name(self, str_index: int, spelling: Spelling) -> str:
        """Name a string by its open pitch class, e.g. "E"."""
        return spell(self.notes[str_index], spelling)

    def describe(self, spelling: Spelling = Spelling.Sharp) -> str:
        """Spell the tuning with octaves, e.g. "G2 D2 A1 E1"."""
        return " ".join(spell_note(note, spelling) for note in self.notes)

    def nudge(self, str_index: int, steps: int) -> "Tuning":
        """Retune one string by a number of semitones.

        The new pitch is clamped to the representable range rather than
        wrapped.

        Args:
            str_index: Display index of the string to retune.
            steps: Semitones to add (negative to lower).

        Returns:
            A new custom tuning with the adjusted string.
        """
        note = self.notes[str_index] + steps
        note = max(constants.MIDI_MIN_NOTE, min(constants.MIDI_MAX_NOTE, note))
        notes = self.notes[:str_index] + (note,) + self.notes[str_index + 1 :]
        return replace(self, name=CUSTOM_TUNING_NAME, notes=notes)


CUSTOM_TUNING_NAME = "custom"
"""Name given to tunings that do not come from the preset list."""

TUNINGS: List[Tuning] = [
    Tuning("bass-4", (43, 38, 33, 28)),  # G2 D2 A1 E1
    Tuning("bass-5", (43, 38, 33, 28, 23)),  # G2 D2 A1 E1 B0
    Tuning("bass-6", (48, 43, 38, 33, 28, 23)),  # C3 G2 D2 A1 E1 B0
    Tuning("guitar", (64, 59, 55, 50, 45, 40)),  # E4 B3 G3 D3 A2 E2
    Tuning("guitar-drop-d", (64, 59, 55, 50, 45, 38)),  # E4 B3 G3 D3 A2 D2
    Tuning("guitar-7", (64, 59, 55, 50, 45, 40, 35)),  # adds B1
    Tuning("guitar-8", (64, 59, 55, 50, 45, 40, 35, 30)),  # adds F#1
    Tuning("ukulele", (69, 64, 60, 67)),  # A4 E4 C4 G4 (re-entrant)
    Tuning("mandolin", (76, 69, 62, 55)),  # E5 A4 D4 G3
    Tuning("cello", (57, 50, 43, 36)),  # A3 D3 G2 C2
]
"""Preset tunings, highest string first."""

TUNING_LOOKUP: Dict[str, Tuning] = {t.name: t for t in TUNINGS}
"""Dictionary lookup from preset name to Tuning."""

"""Pitch classes, keys, scale definitions and note classification.

This module provides the pitch arithmetic the shape generator is built on:
note names and their spellings, the key catalogue, the scale catalogue and
a classifier that answers membership and scale-degree questions for one
key and scale.
"""

from dataclasses import dataclass
from enum import Enum, unique
from typing import Dict, FrozenSet, List, Optional, Tuple

MAX_NOTES = 12
"""Number of distinct pitch classes in the chromatic scale."""


def pitch_class(note: int) -> int:
    """Reduce an absolute pitch (or any semitone count) to its pitch class.

    Args:
        note: Absolute pitch number, may be negative.

    Returns:
        The pitch class in [0, 11].
    """
    return note % MAX_NOTES


@unique
class NoteName(Enum):
    """Enumeration of the twelve chromatic note names.

    Values correspond to semitone offsets from C within an octave.
    """

    C = 0
    Db = 1
    D = 2
    Eb = 3
    E = 4
    F = 5
    Gb = 6
    G = 7
    Ab = 8
    A = 9
    Bb = 10
    B = 11

    def add_steps(self, steps: int) -> "NoteName":
        """Add semitone steps to this note name.

        Args:
            steps: Number of semitones to add (can be negative).

        Returns:
            The resulting note name after adding the steps.
        """
        return NOTE_LOOKUP[pitch_class(self.value + steps)]


def _build_note_lookup() -> Dict[int, NoteName]:
    d: Dict[int, NoteName] = {}
    for n in NoteName:
        d[n.value] = n
    assert len(d) == MAX_NOTES
    return d


NOTE_LOOKUP = _build_note_lookup()
"""Lookup table from pitch class (0-11) to NoteName."""


@unique
class Spelling(Enum):
    """Accidental preference used when naming notes for display."""

    Sharp = "sharp"
    Flat = "flat"


SHARP_NAMES: List[str] = [
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
]  # fmt: skip
"""Note names indexed by pitch class, sharps for accidentals."""

FLAT_NAMES: List[str] = [
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
]  # fmt: skip
"""Note names indexed by pitch class, flats for accidentals."""


def spell(pc: int, spelling: Spelling) -> str:
    """Name a pitch class according to an accidental preference.

    Args:
        pc: The pitch class (any integer is reduced modulo 12).
        spelling: Whether accidentals are written as sharps or flats.

    Returns:
        The note name, e.g. "C#" or "Db".
    """
    names = FLAT_NAMES if spelling == Spelling.Flat else SHARP_NAMES
    return names[pitch_class(pc)]


def name_and_octave_from_note(note: int) -> Tuple[int, int]:
    """Split an absolute pitch into pitch class and octave.

    Uses scientific pitch notation, where middle C (60) is C4.

    Args:
        note: Absolute pitch number (0-127).

    Returns:
        Tuple of (pitch_class, octave).
    """
    return pitch_class(note), note // MAX_NOTES - 1


def spell_note(note: int, spelling: Spelling) -> str:
    """Name an absolute pitch with its octave, e.g. "E1" or "Bb2"."""
    pc, octave = name_and_octave_from_note(note)
    return f"{spell(pc, spelling)}{octave}"


@dataclass(frozen=True)
class Key:
    """A tonal center plus the spelling used to name its notes.

    The spelling only affects display names; the shape algorithm works
    purely on the root's pitch class.
    """

    root: NoteName
    """The root note of the key."""
    spelling: Spelling
    """Accidental preference for naming notes in this key."""

    @property
    def pitch_class(self) -> int:
        """The root's pitch class."""
        return self.root.value

    @property
    def name(self) -> str:
        """The root spelled with this key's preference, e.g. "Bb"."""
        return spell(self.root.value, self.spelling)

    def spell(self, pc: int) -> str:
        """Name a pitch class with this key's spelling preference."""
        return spell(pc, self.spelling)


KEYS: List[Key] = [
    Key(NoteName.C, Spelling.Sharp),
    Key(NoteName.Db, Spelling.Flat),
    Key(NoteName.D, Spelling.Sharp),
    Key(NoteName.Eb, Spelling.Flat),
    Key(NoteName.E, Spelling.Sharp),
    Key(NoteName.F, Spelling.Flat),
    Key(NoteName.Gb, Spelling.Flat),
    Key(NoteName.G, Spelling.Sharp),
    Key(NoteName.Ab, Spelling.Flat),
    Key(NoteName.A, Spelling.Sharp),
    Key(NoteName.Bb, Spelling.Flat),
    Key(NoteName.B, Spelling.Sharp),
]
"""The twelve keys with their conventional spelling preference."""

KEY_LOOKUP: Dict[str, Key] = {k.name: k for k in KEYS}
"""Dictionary lookup from key name (e.g. "Eb") to Key."""


class ScaleClassifier:
    """Classifies pitch classes relative to a specific scale and root.

    Members are kept in interval order so that scale degrees can be read
    off their position.
    """

    def __init__(self, root: int, members: Tuple[int, ...]) -> None:
        """Initialize the classifier with a root and ordered scale members.

        Args:
            root: The root pitch class of the scale.
            members: Pitch classes of the scale, in interval order.
        """
        self._root = root
        self._members = members
        self._member_set = frozenset(members)

    @property
    def root(self) -> int:
        return self._root

    @property
    def members(self) -> Tuple[int, ...]:
        """Scale pitch classes in interval order, root first."""
        return self._members

    @property
    def member_set(self) -> FrozenSet[int]:
        """Scale pitch classes as a set."""
        return self._member_set

    def is_root(self, pc: int) -> bool:
        """Check if a pitch class is the root of this scale."""
        return self._root == pitch_class(pc)

    def is_member(self, pc: int) -> bool:
        """Check if a pitch class is a member of this scale."""
        return pitch_class(pc) in self._member_set

    def degree(self, pc: int) -> Optional[int]:
        """Get the scale degree of a pitch class.

        Args:
            pc: The pitch class to look up.

        Returns:
            The 1-based position of the pitch class within the scale's
            intervals, or None if it is not a member.
        """
        pc = pitch_class(pc)
        if pc in self._member_set:
            return self._members.index(pc) + 1
        else:
            return None


@dataclass(frozen=True)
class Scale:
    """Represents a musical scale with its name and interval pattern.

    A scale is defined by its name and a sequence of semitone intervals
    from the root note. The intervals always start with 0 (the root) and
    ascend strictly within one octave.
    """

    name: str
    """The human-readable name of this musical scale."""
    intervals: Tuple[int, ...]
    """Semitone intervals from the root, e.g. (0, 2, 4, 5, 7, 9, 11)."""

    def validate(self) -> None:
        """Check the interval pattern.

        Raises:
            ValueError: If the intervals are empty, do not start at 0, are
                not strictly ascending or leave the octave.
        """
        if not self.intervals or self.intervals[0] != 0:
            raise ValueError(f"Scale {self.name} must start at interval 0")
        last_steps = -1
        for steps in self.intervals:
            if steps <= last_steps or steps >= MAX_NOTES:
                raise ValueError(
                    f"Invalid intervals for scale {self.name}: {self.intervals}"
                )
            last_steps = steps

    def pitch_classes(self, root: int) -> Tuple[int, ...]:
        """Pitch classes of this scale over a root, in interval order."""
        return tuple(pitch_class(root + steps) for steps in self.intervals)

    def to_classifier(self, root: int) -> ScaleClassifier:
        """Create a scale classifier for this scale with the given root.

        Args:
            root: The root pitch class for this scale instance.

        Returns:
            A ScaleClassifier for membership and degree queries.

        Raises:
            ValueError: If the scale definition is invalid.
        """
        self.validate()
        return ScaleClassifier(pitch_class(root), self.pitch_classes(root))


SCALES: List[Scale] = [
    Scale("Major", (0, 2, 4, 5, 7, 9, 11)),
    Scale("Natural Minor", (0, 2, 3, 5, 7, 8, 10)),
    Scale("Dorian", (0, 2, 3, 5, 7, 9, 10)),
    Scale("Phrygian", (0, 1, 3, 5, 7, 8, 10)),
    Scale("Lydian", (0, 2, 4, 6, 7, 9, 11)),
    Scale("Mixolydian", (0, 2, 4, 5, 7, 9, 10)),
    Scale("Locrian", (0, 1, 3, 5, 6, 8, 10)),
    Scale("Harmonic Minor", (0, 2, 3, 5, 7, 8, 11)),
    Scale("Melodic Minor", (0, 2, 3, 5, 7, 9, 11)),
    Scale("Whole Tone", (0, 2, 4, 6, 8, 10)),
    Scale("Minor Blues", (0, 3, 5, 6, 7, 10)),
    Scale("Minor Pentatonic", (0, 3, 5, 7, 10)),
    Scale("Major Pentatonic", (0, 2, 4, 7, 9)),
    Scale("Hirojoshi", (0, 2, 3, 7, 8)),
]
"""Scales of five to seven notes, the sizes a three-notes-per-string box can hold."""

SCALE_LOOKUP: Dict[str, Scale] = {s.name: s for s in SCALES}
"""Dictionary lookup from scale name to Scale object."""

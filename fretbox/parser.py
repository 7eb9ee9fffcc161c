"""Parser for tuning and note-name text using Lark.

Tunings are written highest string first as note names or absolute pitch
numbers, separated by whitespace or commas:

    "G2 D2 A1 E1"    four-string bass with explicit octaves
    "G D A E"        the same, octaves resolved downwards from G2
    "43,38,33,28"    the same as absolute pitch numbers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from lark import Lark, Transformer
from lark.exceptions import LarkError

from fretbox import constants
from fretbox.scale import MAX_NOTES, name_and_octave_from_note, pitch_class
from fretbox.tuning import CUSTOM_TUNING_NAME, Tuning

TUNING_GRAMMAR = """
start: pitch (_SEP pitch)*
note: note_name

?pitch: note_name | midi_number
note_name: LETTER ACCIDENTAL? OCTAVE?
midi_number: INT

LETTER: /[A-Ga-g]/
ACCIDENTAL: /[#b]/
OCTAVE: /-?[0-9]/
INT: /[0-9]+/
_SEP: /[\\s,]+/
"""

_LETTER_STEPS = {"c": 0, "d": 2, "e": 4, "f": 5, "g": 7, "a": 9, "b": 11}


@dataclass(frozen=True)
class ParsedPitch:
    """A pitch as written, with the octave possibly left open."""

    semitone: int
    """Semitones above C of the written octave (-1 for Cb, 12 for B#)."""
    octave: Optional[int]
    """Scientific octave number, or None if not written."""

    @property
    def pitch_class(self) -> int:
        return pitch_class(self.semitone)

    def absolute(self, octave: int) -> int:
        """Resolve to an absolute pitch in the given octave (C4 = 60)."""
        return (octave + 1) * MAX_NOTES + self.semitone


class TuningTransformer(Transformer):
    """Transform parse trees into lists of ParsedPitch."""

    def start(self, items):
        return list(items)

    def note(self, items):
        return items[0]

    def note_name(self, items):
        semitone = 0
        octave = None
        for token in items:
            if token.type == "LETTER":
                semitone += _LETTER_STEPS[str(token).lower()]
            elif token.type == "ACCIDENTAL":
                semitone += 1 if str(token) == "#" else -1
            else:
                octave = int(str(token))
        return ParsedPitch(semitone, octave)

    def midi_number(self, items):
        pc, octave = name_and_octave_from_note(int(str(items[0])))
        return ParsedPitch(pc, octave)


_PARSER = Lark(TUNING_GRAMMAR, start=["start", "note"])


def _parse(text: str, start: str):
    try:
        tree = _PARSER.parse(text.strip(), start=start)
    except LarkError as e:
        raise ValueError(f"Cannot parse {text!r}") from e
    return TuningTransformer().transform(tree)


def resolve_octaves(pitches: List[ParsedPitch]) -> List[int]:
    """Turn written pitches into absolute pitches, highest string first.

    A pitch without an octave becomes the nearest pitch strictly below the
    previous string; the first string defaults to DEFAULT_OCTAVE.

    Args:
        pitches: Parsed pitches in display order.

    Returns:
        Absolute pitches in the same order.
    """
    notes: List[int] = []
    for pitch in pitches:
        if pitch.octave is not None:
            note = pitch.absolute(pitch.octave)
        elif not notes:
            note = pitch.absolute(constants.DEFAULT_OCTAVE)
        else:
            prev = notes[-1]
            drop = (prev - pitch.pitch_class) % MAX_NOTES
            note = prev - (drop if drop > 0 else MAX_NOTES)
        notes.append(note)
    return notes


def parse_tuning(text: str, name: str = CUSTOM_TUNING_NAME) -> Tuning:
    """Parse a tuning written highest string first.

    Args:
        text: Note names or absolute pitch numbers separated by whitespace
            or commas.
        name: Name for the resulting tuning.

    Returns:
        The parsed Tuning.

    Raises:
        ValueError: If the text is malformed or a pitch is out of range.
    """
    pitches = _parse(text, "start")
    return Tuning(name, tuple(resolve_octaves(pitches)))


def parse_note_name(text: str) -> int:
    """Parse a single note name such as "Eb" or "f#3" into a pitch class.

    Raises:
        ValueError: If the text is not a note name.
    """
    pitch: ParsedPitch = _parse(text, "note")
    return pitch.pitch_class

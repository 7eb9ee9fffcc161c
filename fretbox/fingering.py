"""Finger assignment for the frets of a qualifying box.

Boxes above the nut use one finger per fret when four frets wide. Five
fret boxes stretch one finger over two frets, index or pinky depending on
where the notes are densest. Boxes at the nut use the double-bass
convention: fingers 1, 2 and 4 only, the open string standing in for the
first finger.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto, unique

from fretbox.base import MatchException
from fretbox.box import Coverage, FretWindow

OPEN_STRING_FINGER = 1
"""Finger credited to a root on the open string when naming a shape."""


@unique
class FingerMode(Enum):
    """Which finger covers the extra fret of a wide box."""

    Index = auto()  # index finger stretches back, or open-position 1-1-2-4
    Pinky = auto()  # pinky stretches forward, or open-position 1-2-4-4
    Null = auto()  # no density choice applies to this box


def choose_mode(window: FretWindow, coverage: Coverage) -> FingerMode:
    """Choose the fingering mode of a box from its note density.

    The open-position rule compares frets {1, 2} with {3, 4} directly;
    the five-fret rule compares the top fret with the top two frets. The
    two comparisons differ and are kept separate.

    Args:
        window: The box being fingered.
        coverage: Scale positions inside the box.

    Returns:
        FingerMode.Null for four-fret boxes, otherwise Index or Pinky.
    """
    if window.start == 0:
        if window.end < 4:
            return FingerMode.Null
        low = coverage.count_on_frets({1, 2})
        high = coverage.count_on_frets({3, 4})
        # Ties go to index
        return FingerMode.Pinky if low < high else FingerMode.Index
    elif window.span == 5:
        c4 = coverage.count_on_frets({window.end})
        c34 = coverage.count_on_frets({window.end - 1, window.end})
        return FingerMode.Pinky if c4 * 2 < c34 else FingerMode.Index
    else:
        return FingerMode.Null


def _open_finger(window: FretWindow, mode: FingerMode, fret: int) -> int:
    if fret == 0:
        return OPEN_STRING_FINGER
    if window.end < 4:
        return {1: 1, 2: 2}.get(fret, 4)
    if mode == FingerMode.Pinky:
        return {1: 1, 2: 2}.get(fret, 4)
    elif mode == FingerMode.Index:
        return {1: 1, 2: 1, 3: 2}.get(fret, 4)
    else:
        raise MatchException(mode)


def _five_fret_finger(window: FretWindow, mode: FingerMode, fret: int) -> int:
    offset = fret - window.start
    if mode == FingerMode.Pinky:
        return min(offset, 3) + 1
    elif mode == FingerMode.Index:
        return max(offset, 1)
    else:
        raise MatchException(mode)


def finger_for_fret(window: FretWindow, mode: FingerMode, fret: int) -> int:
    """Map a fret inside a box to a finger number 1-4.

    Args:
        window: The box being fingered.
        mode: The mode chosen for the box by choose_mode.
        fret: Absolute fret number within the box.

    Returns:
        The finger number; an open-string fret counts as finger 1.

    Raises:
        MatchException: If the mode does not apply to the box.
    """
    if window.start == 0:
        return _open_finger(window, mode, fret)
    elif window.span == 4:
        return fret - window.start + 1
    elif window.span == 5:
        return _five_fret_finger(window, mode, fret)
    else:
        raise MatchException(window)


@dataclass(frozen=True)
class Fingering:
    """The fingering of one box: its window and chosen mode."""

    window: FretWindow
    mode: FingerMode

    def finger(self, fret: int) -> int:
        return finger_for_fret(self.window, self.mode, fret)


def assign_fingering(window: FretWindow, coverage: Coverage) -> Fingering:
    """Choose the fingering for a qualifying box."""
    return Fingering(window=window, mode=choose_mode(window, coverage))

"""Fret windows ("boxes") and the three-notes-per-string scan.

A box is a fixed-width run of frets. The scanner slides boxes of one
width along the neck and keeps those in which every scale pitch class is
sounded somewhere and every string holds exactly three scale positions.
Each surviving box carries its coverage: the sorted scale positions inside
it, whose serialized form identifies the fretted pattern independently of
the box width.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, Generator, List, Tuple

from fretbox import constants
from fretbox.tuning import Tuning

SIGNATURE_DELIMITER = ","
"""Separator between position tokens in a coverage signature."""


@dataclass(frozen=True, order=True)
class StringPos:
    """A position on the neck as a string and fret combination."""

    str_index: int
    """Display index of the string (0 is the top row of the diagram)."""
    fret: int
    """Fret number, 0 is the open string."""

    def token(self) -> str:
        return f"{self.str_index}:{self.fret}"


@dataclass(frozen=True)
class FretWindow:
    """A contiguous fret range [start, end] of fixed width."""

    start: int
    """First fret in the box; 0 means the open string is included."""
    span: int
    """Width of the box in frets."""

    @property
    def end(self) -> int:
        """Last fret in the box (inclusive)."""
        return self.start + self.span - 1

    @property
    def is_open(self) -> bool:
        """Whether the box includes the open string."""
        return self.start == 0

    def frets(self, fret_count: int) -> range:
        """Frets of the box that exist on a neck with fret_count frets."""
        return range(max(self.start, 0), min(self.end, fret_count) + 1)

    def __contains__(self, fret: int) -> bool:
        return self.start <= fret <= self.end


def iter_windows(span: int, fret_count: int) -> Generator[FretWindow, None, None]:
    """Iterate over every box of a width that fits on the neck.

    Starts run from 0 through fret_count - span + 1, so the last box ends
    exactly on the highest fret.

    Yields:
        FretWindow instances from the nut upwards.
    """
    for start in range(0, fret_count - span + 2):
        yield FretWindow(start=start, span=span)


@dataclass(frozen=True)
class Coverage:
    """The scale positions inside a box, in (string, fret) order."""

    positions: Tuple[StringPos, ...]

    @property
    def signature(self) -> str:
        """Canonical text form, e.g. "0:7,0:9,0:10,1:7,...".

        Two boxes with the same signature, whatever their widths, show the
        same fretted pattern.
        """
        return SIGNATURE_DELIMITER.join(pos.token() for pos in self.positions)

    def count_on_frets(self, frets: AbstractSet[int]) -> int:
        """Count positions (across all strings) lying on any of the frets."""
        return sum(1 for pos in self.positions if pos.fret in frets)

    def per_string(self) -> Dict[int, int]:
        """Count positions on each string."""
        counts: Dict[int, int] = {}
        for pos in self.positions:
            counts[pos.str_index] = counts.get(pos.str_index, 0) + 1
        return counts

    def __contains__(self, pos: StringPos) -> bool:
        return pos in self.positions


def collect_coverage(
    window: FretWindow, tuning: Tuning, members: AbstractSet[int], fret_count: int
) -> Coverage:
    """Collect the scale positions of every string inside a box.

    Args:
        window: The box to inspect.
        tuning: The tuning whose strings are scanned.
        members: The scale's pitch classes.
        fret_count: Number of frets on the neck.

    Returns:
        Coverage with positions sorted by display index, then fret.
    """
    positions: List[StringPos] = []
    for str_index in range(tuning.num_strings):
        for fret in window.frets(fret_count):
            if tuning.pitch_class_at(str_index, fret) in members:
                positions.append(StringPos(str_index=str_index, fret=fret))
    return Coverage(tuple(positions))


def covers_scale(
    coverage: Coverage, tuning: Tuning, members: AbstractSet[int]
) -> bool:
    """Check that every scale pitch class sounds somewhere in the box."""
    found = {
        tuning.pitch_class_at(pos.str_index, pos.fret) for pos in coverage.positions
    }
    return found == set(members)


def is_three_per_string(coverage: Coverage, tuning: Tuning) -> bool:
    """Check that every string holds exactly NOTES_PER_STRING positions."""
    counts = coverage.per_string()
    return all(
        counts.get(str_index, 0) == constants.NOTES_PER_STRING
        for str_index in range(tuning.num_strings)
    )


@dataclass(frozen=True)
class BoxCandidate:
    """A box that passed the coverage and three-notes-per-string tests."""

    window: FretWindow
    coverage: Coverage


def scan_boxes(
    members: AbstractSet[int], tuning: Tuning, fret_count: int, span: int
) -> Generator[BoxCandidate, None, None]:
    """Scan the neck for qualifying boxes of one width.

    Args:
        members: The scale's pitch classes.
        tuning: The tuning to scan.
        fret_count: Number of frets on the neck.
        span: Box width in frets.

    Yields:
        BoxCandidate for every qualifying box, lowest start first.
    """
    for window in iter_windows(span, fret_count):
        coverage = collect_coverage(window, tuning, members, fret_count)
        if covers_scale(coverage, tuning, members) and is_three_per_string(
            coverage, tuning
        ):
            yield BoxCandidate(window=window, coverage=coverage)

"""Shapes: qualifying boxes annotated with their root and fingering.

Every box that passes the scan is given a canonical root, the lowest
pitched occurrence of the key's pitch class (lowest string first, then
lowest fret), and is named after the root's string and finger, e.g. "E2".
Boxes without a root occurrence produce no shape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from fretbox import constants
from fretbox.box import Coverage, FretWindow, StringPos, scan_boxes
from fretbox.fingering import FingerMode, Fingering, assign_fingering
from fretbox.scale import Key, Scale
from fretbox.tuning import Tuning


@dataclass(frozen=True)
class ShapeRoot:
    """The canonical root of a shape and the finger that plays it."""

    str_index: int
    """Display index of the root's string."""
    fret: int
    """Fret of the root."""
    finger: int
    """Finger number (1-4) assigned to the root."""

    @property
    def pos(self) -> StringPos:
        return StringPos(str_index=self.str_index, fret=self.fret)


@dataclass(frozen=True)
class Shape:
    """A playable three-notes-per-string pattern in one box."""

    window: FretWindow
    """The box the shape occupies."""
    root: ShapeRoot
    """The canonical root position."""
    mode: FingerMode
    """Fingering mode chosen for the box."""
    coverage: Coverage
    """Scale positions inside the box."""
    name: str
    """Root string name followed by the root finger, e.g. "A2"."""

    @property
    def span(self) -> int:
        return self.window.span

    @property
    def box(self) -> Tuple[int, int]:
        """The fret range as (start, end), both inclusive."""
        return self.window.start, self.window.end

    @property
    def signature(self) -> str:
        return self.coverage.signature

    @property
    def label(self) -> str:
        """Display label, e.g. "E2 (4-fret)"."""
        return f"{self.name} ({self.span}-fret)"

    @property
    def fingering(self) -> Fingering:
        return Fingering(window=self.window, mode=self.mode)

    def finger(self, fret: int) -> int:
        """Get the finger for a fret inside this shape's box."""
        return self.fingering.finger(fret)

    def __contains__(self, pos: StringPos) -> bool:
        return pos in self.coverage


def find_root(
    window: FretWindow, root_pc: int, tuning: Tuning, fret_count: int
) -> Optional[StringPos]:
    """Find the canonical root occurrence inside a box.

    Strings are scanned from lowest to highest pitch, frets from the start
    of the box upwards; the first match wins.

    Args:
        window: The box to search.
        root_pc: The key's root pitch class.
        tuning: The tuning of the strings.
        fret_count: Number of frets on the neck.

    Returns:
        The root position, or None if the box holds no root.
    """
    for tuned in tuning.pitch_order():
        for fret in window.frets(fret_count):
            if tuning.pitch_class_at(tuned.display_index, fret) == root_pc:
                return StringPos(str_index=tuned.display_index, fret=fret)
    return None


def generate_shapes(
    key: Key,
    scale: Scale,
    tuning: Tuning,
    fret_count: int = constants.DEFAULT_FRET_COUNT,
    span: int = 4,
) -> List[Shape]:
    """Generate the shapes of one box width.

    Args:
        key: The key; its root selects the shape roots, its spelling names them.
        scale: The scale whose notes must fill three per string.
        tuning: The tuning of the instrument.
        fret_count: Number of frets on the neck.
        span: Box width in frets.

    Returns:
        Shapes in order of box start.
    """
    classifier = scale.to_classifier(key.pitch_class)
    shapes: List[Shape] = []
    for cand in scan_boxes(classifier.member_set, tuning, fret_count, span):
        root_pos = find_root(cand.window, key.pitch_class, tuning, fret_count)
        if root_pos is None:
            logging.debug("no root in box %s", cand.window)
            continue
        fingering = assign_fingering(cand.window, cand.coverage)
        finger = fingering.finger(root_pos.fret)
        name = tuning.string_name(root_pos.str_index, key.spelling) + str(finger)
        shapes.append(
            Shape(
                window=cand.window,
                root=ShapeRoot(root_pos.str_index, root_pos.fret, finger),
                mode=fingering.mode,
                coverage=cand.coverage,
                name=name,
            )
        )
    return shapes

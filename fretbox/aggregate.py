"""Merging, deduplication, ordering and selection of shapes.

Shapes of every box width are merged into a ShapeTable, which keeps one
shape per coverage signature. The survivors are ordered along the neck
into a ShapeSet, which also tracks the selected shape and carries the
selection over when the shapes are recomputed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from fretbox import constants
from fretbox.box import StringPos
from fretbox.scale import Key, Scale
from fretbox.shapes import Shape, generate_shapes
from fretbox.tuning import Tuning


def preference_key(shape: Shape) -> Tuple[int, int, str]:
    """Rank duplicates: narrower box, then lower start, then name."""
    return shape.span, shape.window.start, shape.name


@dataclass(frozen=True)
class ShapeTable:
    """Retained shapes plus a lookup from coverage signature to position.

    Inserting a shape whose signature is already present keeps whichever
    of the two ranks first by preference_key.
    """

    shapes: Tuple[Shape, ...] = ()
    index: Dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.shapes)

    def get(self, signature: str) -> Optional[Shape]:
        pos = self.index.get(signature)
        return self.shapes[pos] if pos is not None else None

    def insert(self, shape: Shape) -> ShapeTable:
        """Return a table that also accounts for the given shape."""
        pos = self.index.get(shape.signature)
        if pos is None:
            index = dict(self.index)
            index[shape.signature] = len(self.shapes)
            return ShapeTable(self.shapes + (shape,), index)
        elif preference_key(shape) < preference_key(self.shapes[pos]):
            shapes = self.shapes[:pos] + (shape,) + self.shapes[pos + 1 :]
            return ShapeTable(shapes, self.index)
        else:
            return self

    def merge(self, shapes: Iterable[Shape]) -> ShapeTable:
        table = self
        for shape in shapes:
            table = table.insert(shape)
        return table


def sort_shapes(shapes: Iterable[Shape], tuning: Tuning) -> List[Shape]:
    """Order shapes along the neck.

    Sorted by box start, then box width, then the pitch rank of the root's
    string (lowest first), then the root fret.
    """
    ranks = [s.pitch_rank for s in tuning.strings()]
    return sorted(
        shapes,
        key=lambda shape: (
            shape.window.start,
            shape.span,
            ranks[shape.root.str_index],
            shape.root.fret,
        ),
    )


def aggregate_shapes(
    key: Key,
    scale: Scale,
    tuning: Tuning,
    fret_count: int = constants.DEFAULT_FRET_COUNT,
    spans: Tuple[int, ...] = constants.BOX_SPANS,
) -> List[Shape]:
    """Generate, deduplicate and order shapes over every box width.

    Args:
        key: The key of the shapes.
        scale: The scale of the shapes.
        tuning: The tuning of the instrument.
        fret_count: Number of frets on the neck.
        spans: Box widths to scan.

    Returns:
        Shapes with distinct coverage signatures, in neck order.
    """
    table = ShapeTable()
    for span in spans:
        shapes = generate_shapes(key, scale, tuning, fret_count, span)
        logging.debug("span %d: %d shapes", span, len(shapes))
        table = table.merge(shapes)
    return sort_shapes(table.shapes, tuning)


@dataclass(frozen=True)
class ShapeSet:
    """The navigable shapes for one key, scale and tuning.

    The selected index is None exactly when there are no shapes.
    """

    shapes: Tuple[Shape, ...] = ()
    selected: Optional[int] = None

    def __len__(self) -> int:
        return len(self.shapes)

    @property
    def selected_shape(self) -> Optional[Shape]:
        return self.shapes[self.selected] if self.selected is not None else None

    @property
    def label(self) -> str:
        """Label of the selected shape, or "No Shape"."""
        shape = self.selected_shape
        return shape.label if shape is not None else "No Shape"

    def index_of_root(self, pos: StringPos) -> Optional[int]:
        """Find the first shape rooted at a position."""
        for i, shape in enumerate(self.shapes):
            if shape.root.pos == pos:
                return i
        return None

    def select(self, index: int) -> ShapeSet:
        """Select a shape by index, wrapping around the ends."""
        if not self.shapes:
            return self
        return ShapeSet(self.shapes, index % len(self.shapes))

    def next(self) -> ShapeSet:
        return self.select(self.selected + 1) if self.selected is not None else self

    def prev(self) -> ShapeSet:
        return self.select(self.selected - 1) if self.selected is not None else self

    @classmethod
    def of(
        cls, shapes: Iterable[Shape], previous: Optional[ShapeSet] = None
    ) -> ShapeSet:
        """Build a set, carrying over the previous selection by root.

        Args:
            shapes: Shapes in neck order.
            previous: The set being replaced, if any.

        Returns:
            A set selecting the first shape with the previously selected
            root (string, fret), else the first shape, else nothing.
        """
        new_set = cls(tuple(shapes), None)
        if not new_set.shapes:
            return new_set
        selected = 0
        prev_shape = previous.selected_shape if previous is not None else None
        if prev_shape is not None:
            match = new_set.index_of_root(prev_shape.root.pos)
            if match is not None:
                selected = match
        return new_set.select(selected)

    @classmethod
    def compute(
        cls,
        key: Key,
        scale: Scale,
        tuning: Tuning,
        fret_count: int = constants.DEFAULT_FRET_COUNT,
        previous: Optional[ShapeSet] = None,
    ) -> ShapeSet:
        """Compute the shapes for a key, scale and tuning.

        Args:
            key: The key of the shapes.
            scale: The scale of the shapes.
            tuning: The tuning of the instrument.
            fret_count: Number of frets on the neck.
            previous: The set being replaced, whose selection is carried over.

        Returns:
            A new ShapeSet.
        """
        return cls.of(aggregate_shapes(key, scale, tuning, fret_count), previous)

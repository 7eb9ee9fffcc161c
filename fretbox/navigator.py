"""Ownership and navigation of the current ShapeSet.

The navigator holds the shapes for the configured key, scale and tuning,
recomputes them when (and only when) one of those changes, and moves the
selection forwards and backwards through them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from typing_extensions import override

from fretbox.aggregate import ShapeSet
from fretbox.component import ConfigSlice, SliceComponent
from fretbox.config import Config
from fretbox.scale import Key, Scale
from fretbox.shapes import Shape
from fretbox.tuning import Tuning


@dataclass(frozen=True)
class ShapeQuery(ConfigSlice[Config]):
    """The part of the configuration that determines the shapes."""

    key: Key
    scale: Scale
    tuning: Tuning
    fret_count: int

    @classmethod
    def extract(cls, root_config: Config) -> ShapeQuery:
        return cls(
            key=root_config.key,
            scale=root_config.scale,
            tuning=root_config.tuning,
            fret_count=root_config.fret_count,
        )


class ShapeNavigator(SliceComponent[Config, ShapeQuery, ShapeSet]):
    """Keeps the ShapeSet in step with the configuration.

    Display-only configuration changes leave the shapes and the selection
    untouched. A key, scale or tuning change recomputes the shapes in full
    and keeps the selection on the same root position where it can.
    """

    @classmethod
    def extract_slice(cls, root_config: Config) -> ShapeQuery:
        return ShapeQuery.extract(root_config)

    @override
    def compute(self, config: ShapeQuery, previous: Optional[ShapeSet]) -> ShapeSet:
        shape_set = ShapeSet.compute(
            config.key,
            config.scale,
            config.tuning,
            config.fret_count,
            previous=previous,
        )
        logging.info(
            "%s %s on %s: %d shapes, selected %s",
            config.key.name,
            config.scale.name,
            config.tuning.name,
            len(shape_set),
            shape_set.label,
        )
        return shape_set

    @property
    def shape_set(self) -> ShapeSet:
        return self._result

    @property
    def selected_shape(self) -> Optional[Shape]:
        return self._result.selected_shape

    def select(self, index: int) -> Optional[Shape]:
        """Select a shape by index (wrapping) and return it."""
        self._result = self._result.select(index)
        return self.selected_shape

    def next_shape(self) -> Optional[Shape]:
        self._result = self._result.next()
        return self.selected_shape

    def prev_shape(self) -> Optional[Shape]:
        self._result = self._result.prev()
        return self.selected_shape

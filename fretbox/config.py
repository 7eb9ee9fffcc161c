"""Configuration for fretbox.

This module defines the configuration record shared by the navigator and
the neck renderer, the enumerations for the display options, and the
default configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto, unique

from fretbox import constants
from fretbox.scale import KEY_LOOKUP, SCALE_LOOKUP, Key, Scale, ScaleClassifier
from fretbox.tuning import TUNING_LOOKUP, Tuning


@unique
class NoteType(Enum):
    """Represents the type of a note in relation to the current scale.

    Used to categorize notes for visual representation and color mapping.
    """

    Root = auto()  # Root note of the current scale
    Member = auto()  # Note that is a member of the current scale
    Other = auto()  # Note that is not in the current scale


@unique
class StyleVariant(Enum):
    """How in-shape dots are colored."""

    Classic = "classic"  # roots red, other members blue
    Harmonic = "harmonic"  # roots red, 3rd and 5th blue, others muted
    Fingers = "fingers"  # colored by finger number


@unique
class LabelMode(Enum):
    """What text is written inside in-shape dots."""

    Notes = "notes"
    Degrees = "degrees"
    Fingers = "fingers"


@unique
class OpenStringsMode(Enum):
    """When the open-string column shows a circle."""

    ShapeOnly = "shape"  # only open strings that are part of the selected shape
    InScale = "scale"  # every open string in the scale


@dataclass(frozen=True)
class Config:
    """Complete configuration of the neck: what to compute and how to show it.

    Key, scale, tuning and fret count determine the shapes; the remaining
    fields only affect rendering.
    """

    key: Key  # Key of the scale, also picks note spellings
    scale: Scale  # Scale whose shapes are generated
    tuning: Tuning  # Open-string pitches, highest string first
    fret_count: int  # Number of frets on the neck
    style: StyleVariant  # Dot coloring
    label_mode: LabelMode  # Dot labels
    open_strings_mode: OpenStringsMode  # Open-string column circles

    def to_classifier(self) -> ScaleClassifier:
        """Classifier for the configured scale over the configured key."""
        return self.scale.to_classifier(self.key.pitch_class)


def init_config(
    key: str = "C",
    scale: str = "Major",
    tuning: str = "bass-4",
    fret_count: int = constants.DEFAULT_FRET_COUNT,
) -> Config:
    """Initialize a configuration from catalogue names.

    Args:
        key: Key name from KEY_LOOKUP.
        scale: Scale name from SCALE_LOOKUP.
        tuning: Preset name from TUNING_LOOKUP.
        fret_count: Number of frets on the neck.

    Returns:
        A Config with classic styling, note labels and open strings shown
        only when part of the shape.
    """
    return Config(
        key=KEY_LOOKUP[key],
        scale=SCALE_LOOKUP[scale],
        tuning=TUNING_LOOKUP[tuning],
        fret_count=fret_count,
        style=StyleVariant.Classic,
        label_mode=LabelMode.Notes,
        open_strings_mode=OpenStringsMode.ShapeOnly,
    )

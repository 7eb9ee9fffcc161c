"""Neck diagram formatting.

Everything here is a pure function of its arguments: the configuration
supplies the key, scale, tuning and display options, and the selected
shape is passed in explicitly. render_neck decides for every (string,
fret) cell whether a dot is drawn, how it is colored and labelled;
format_neck lays the cells out as text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from fretbox import constants
from fretbox.base import MatchException
from fretbox.box import StringPos
from fretbox.config import (
    Config,
    LabelMode,
    NoteType,
    OpenStringsMode,
    StyleVariant,
)
from fretbox.scale import ScaleClassifier
from fretbox.shapes import Shape
from fretbox.tuning import Tuning


@dataclass(frozen=True)
class ColorScheme:
    """Defines the dot colors of the neck diagram."""

    root_note: str  # In-shape roots
    member_note: str  # Emphasized in-shape members
    muted_note: str  # Other in-shape members
    faint_note: str  # Scale notes outside the shape
    fingers: Dict[int, str]  # Finger number to color, 0 for open strings


def default_scheme() -> ColorScheme:
    """Create the default color scheme."""
    return ColorScheme(
        root_note=constants.ROOT_COLOR,
        member_note=constants.MEMBER_COLOR,
        muted_note=constants.MUTED_COLOR,
        faint_note=constants.FAINT_COLOR,
        fingers=dict(constants.FINGER_COLORS),
    )


@dataclass(frozen=True)
class CellView:
    """What the diagram shows at one string and fret."""

    pos: StringPos
    """The cell's string and fret."""
    pitch_class: int
    """Pitch class sounded at the cell."""
    note_type: NoteType
    """Relation of the pitch class to the scale."""
    dot: bool
    """Whether a dot (or, at fret 0, a circle) is drawn."""
    in_shape: bool
    """Whether the cell is a scale position of the selected shape."""
    label: str
    """Text inside the dot; the string name in the open column."""
    color: Optional[str]
    """Dot color, None when no dot is drawn."""


def classify(classifier: ScaleClassifier, pc: int) -> NoteType:
    if classifier.is_root(pc):
        return NoteType.Root
    elif classifier.is_member(pc):
        return NoteType.Member
    else:
        return NoteType.Other


def open_in_scale(tuning: Tuning, classifier: ScaleClassifier, str_index: int) -> bool:
    """Check whether an open string sounds a scale note."""
    return classifier.is_member(tuning.open_pitch_class(str_index))


def open_in_shape(
    shape: Optional[Shape],
    tuning: Tuning,
    classifier: ScaleClassifier,
    str_index: int,
) -> bool:
    """Check whether an open string is part of the selected shape.

    Only shapes whose box starts at the nut include open strings, and only
    open strings sounding scale notes.
    """
    if shape is None or not shape.window.is_open:
        return False
    return open_in_scale(tuning, classifier, str_index)


def scale_degree(classifier: ScaleClassifier, pc: int) -> Optional[int]:
    """Get the 1-based scale degree of a pitch class, or None."""
    return classifier.degree(pc)


def in_shape_color(
    scheme: ColorScheme,
    style: StyleVariant,
    note_type: NoteType,
    degree: Optional[int],
    finger: int,
) -> str:
    """Pick the color of a dot that belongs to the selected shape.

    Raises:
        MatchException: If the style is not recognized.
    """
    if style == StyleVariant.Classic:
        return scheme.root_note if note_type == NoteType.Root else scheme.member_note
    elif style == StyleVariant.Harmonic:
        if note_type == NoteType.Root:
            return scheme.root_note
        elif degree in (3, 5):
            return scheme.member_note
        else:
            return scheme.muted_note
    elif style == StyleVariant.Fingers:
        return scheme.fingers[finger]
    else:
        raise MatchException(style)


def in_shape_label(
    config: Config, classifier: ScaleClassifier, shape: Shape, fret: int, pc: int
) -> str:
    """Write the label of a dot that belongs to the selected shape.

    Raises:
        MatchException: If the label mode is not recognized.
    """
    mode = config.label_mode
    if mode == LabelMode.Notes:
        return config.key.spell(pc)
    elif mode == LabelMode.Degrees:
        degree = classifier.degree(pc)
        return str(degree) if degree is not None else ""
    elif mode == LabelMode.Fingers:
        return str(shape.finger(fret)) if fret > 0 else ""
    else:
        raise MatchException(mode)


def _open_cell(
    config: Config,
    classifier: ScaleClassifier,
    scheme: ColorScheme,
    shape: Optional[Shape],
    str_index: int,
) -> CellView:
    tuning = config.tuning
    pc = tuning.open_pitch_class(str_index)
    note_type = classify(classifier, pc)
    in_shape = open_in_shape(shape, tuning, classifier, str_index)
    dot = open_in_scale(tuning, classifier, str_index) and (
        config.open_strings_mode == OpenStringsMode.InScale or in_shape
    )
    color: Optional[str] = None
    if dot:
        if config.style == StyleVariant.Fingers:
            color = scheme.fingers[0]
        else:
            color = in_shape_color(
                scheme, config.style, note_type, classifier.degree(pc), 0
            )
    return CellView(
        pos=StringPos(str_index=str_index, fret=0),
        pitch_class=pc,
        note_type=note_type,
        dot=dot,
        in_shape=in_shape,
        label=tuning.string_name(str_index, config.key.spelling),
        color=color,
    )


def render_cell(
    config: Config,
    classifier: ScaleClassifier,
    scheme: ColorScheme,
    shape: Optional[Shape],
    pos: StringPos,
) -> CellView:
    """Decide what the diagram shows at one position.

    Args:
        config: Key, scale, tuning and display options.
        classifier: Classifier for the configured key and scale.
        scheme: Dot colors.
        shape: The selected shape, if any.
        pos: The cell to render.

    Returns:
        The CellView for the position.
    """
    if pos.fret == 0:
        return _open_cell(config, classifier, scheme, shape, pos.str_index)
    pc = config.tuning.pitch_class_at(pos.str_index, pos.fret)
    note_type = classify(classifier, pc)
    dot = note_type != NoteType.Other
    in_shape = dot and shape is not None and pos.fret in shape.window
    label = ""
    color: Optional[str] = None
    if in_shape and shape is not None:
        label = in_shape_label(config, classifier, shape, pos.fret, pc)
        color = in_shape_color(
            scheme,
            config.style,
            note_type,
            classifier.degree(pc),
            shape.finger(pos.fret),
        )
    elif dot:
        color = scheme.faint_note
    return CellView(
        pos=pos,
        pitch_class=pc,
        note_type=note_type,
        dot=dot,
        in_shape=in_shape,
        label=label,
        color=color,
    )


def render_neck(
    config: Config, shape: Optional[Shape], scheme: Optional[ColorScheme] = None
) -> List[List[CellView]]:
    """Render every cell of the neck.

    Args:
        config: Key, scale, tuning and display options.
        shape: The selected shape, if any.
        scheme: Dot colors, default_scheme() if not given.

    Returns:
        One row per string in display order, each with frets 0 through
        config.fret_count.
    """
    classifier = config.to_classifier()
    scheme = scheme if scheme is not None else default_scheme()
    return [
        [
            render_cell(config, classifier, scheme, shape, StringPos(str_index, fret))
            for fret in range(config.fret_count + 1)
        ]
        for str_index in range(config.tuning.num_strings)
    ]


_CELL_WIDTH = 4


def _marker(fret: int) -> str:
    if fret in constants.DOUBLE_MARKERS:
        return "**"
    elif fret in constants.FRET_MARKERS:
        return "*"
    else:
        return ""


def _cell_text(cell: CellView) -> str:
    if cell.pos.fret == 0:
        return f"({cell.label})" if cell.dot else cell.label
    elif cell.in_shape:
        return cell.label + ("!" if cell.note_type == NoteType.Root else "")
    elif cell.dot:
        return "."
    else:
        return ""


def format_neck(config: Config, shape: Optional[Shape]) -> str:
    """Lay out the neck as text, one line per string.

    In-shape dots show their label (roots marked with "!"), other scale
    notes show ".", and the open-string column shows the string name,
    parenthesized when circled.
    """
    rows = render_neck(config, shape)
    title = shape.label if shape is not None else "No Shape"
    frets = range(1, config.fret_count + 1)
    lines = [
        title,
        " " * _CELL_WIDTH + "".join(_marker(f).center(_CELL_WIDTH) for f in frets),
    ]
    for row in rows:
        head = _cell_text(row[0]).rjust(_CELL_WIDTH - 1) + "|"
        body = "".join(_cell_text(c).center(_CELL_WIDTH - 1) + "|" for c in row[1:])
        lines.append(head + body)
    lines.append(" " * _CELL_WIDTH + "".join(str(f).center(_CELL_WIDTH) for f in frets))
    return "\n".join(lines)

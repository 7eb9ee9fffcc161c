from dataclasses import replace

from fretbox.aggregate import (
    ShapeSet,
    ShapeTable,
    aggregate_shapes,
    preference_key,
    sort_shapes,
)
from fretbox.box import StringPos
from fretbox.scale import KEY_LOOKUP, SCALE_LOOKUP
from fretbox.shapes import generate_shapes
from fretbox.tuning import TUNING_LOOKUP

BASS = TUNING_LOOKUP["bass-4"]
C = KEY_LOOKUP["C"]
MAJOR = SCALE_LOOKUP["Major"]


def test_aggregate_c_major_bass() -> None:
    shapes = aggregate_shapes(C, MAJOR, BASS, 21)
    assert [s.window.start for s in shapes] == [0, 1, 3, 5, 7, 8, 10, 12, 13, 15, 17]
    assert [s.span for s in shapes] == [5, 5, 5, 5, 4, 5, 5, 5, 5, 5, 5]
    assert [s.name for s in shapes] == [
        "A2", "A2", "A1", "E3", "E2", "E1", "D1", "A4", "A2", "A1", "E3"
    ]  # fmt: skip
    assert len({s.signature for s in shapes}) == len(shapes)


def test_table_prefers_narrower_box() -> None:
    narrow = generate_shapes(C, MAJOR, BASS, 21, 4)[0]
    wide = [
        s
        for s in generate_shapes(C, MAJOR, BASS, 21, 5)
        if s.signature == narrow.signature
    ]
    assert [s.window.start for s in wide] == [6, 7]
    for shapes in ([narrow, *wide], [*wide, narrow], [wide[1], narrow, wide[0]]):
        table = ShapeTable().merge(shapes)
        assert len(table) == 1
        assert table.get(narrow.signature) == narrow


def test_table_prefers_lower_start() -> None:
    wide = [s for s in generate_shapes(C, MAJOR, BASS, 21, 5) if s.name == "E2"]
    table = ShapeTable().merge(reversed(wide))
    assert len(table) == 1
    assert table.get(wide[0].signature) == wide[0]
    assert preference_key(wide[0]) == (5, 6, "E2")


def test_table_is_persistent() -> None:
    shape = generate_shapes(C, MAJOR, BASS, 21, 4)[0]
    empty = ShapeTable()
    table = empty.insert(shape)
    assert len(empty) == 0
    assert empty.get(shape.signature) is None
    assert len(table) == 1


def test_sort_by_root_string_pitch() -> None:
    shape = generate_shapes(C, MAJOR, BASS, 21, 4)[0]
    other = replace(shape, root=replace(shape.root, str_index=0, fret=10))
    # The E string (rank 0) sorts before the G string (rank 3)
    assert sort_shapes([other, shape], BASS) == [shape, other]


def test_empty_aggregate() -> None:
    assert aggregate_shapes(C, MAJOR, BASS, 3) == []


def test_shape_set_selection() -> None:
    shape_set = ShapeSet.compute(C, MAJOR, BASS, 21)
    assert len(shape_set) == 11
    assert shape_set.selected == 0
    assert shape_set.label == "A2 (5-fret)"
    assert shape_set.prev().selected == 10
    assert shape_set.select(10).next().selected == 0
    assert shape_set.select(-1).selected == 10
    assert shape_set.select(15).selected == 4
    assert shape_set.select(4).label == "E2 (4-fret)"


def test_empty_shape_set() -> None:
    shape_set = ShapeSet.compute(C, MAJOR, BASS, 3)
    assert len(shape_set) == 0
    assert shape_set.selected is None
    assert shape_set.selected_shape is None
    assert shape_set.label == "No Shape"
    assert shape_set.next() == shape_set
    assert shape_set.select(3) == shape_set


def test_selection_follows_root() -> None:
    previous = ShapeSet.compute(C, MAJOR, BASS, 21).select(4)
    assert previous.selected_shape is not None
    assert previous.selected_shape.root.pos == StringPos(3, 8)
    retuned = BASS.nudge(0, 2)
    shape_set = ShapeSet.compute(C, MAJOR, retuned, 21, previous=previous)
    assert shape_set.selected_shape is not None
    assert shape_set.selected_shape.root.pos == StringPos(3, 8)


def test_selection_falls_back_to_first() -> None:
    previous = ShapeSet.compute(C, MAJOR, BASS, 21).select(4)
    shape_set = ShapeSet.compute(KEY_LOOKUP["G"], MAJOR, BASS, 21, previous=previous)
    assert len(shape_set) > 0
    assert shape_set.selected == 0


def test_selection_from_empty() -> None:
    previous = ShapeSet.compute(C, MAJOR, BASS, 3)
    shape_set = ShapeSet.compute(C, MAJOR, BASS, 21, previous=previous)
    assert shape_set.selected == 0


def test_selection_to_empty() -> None:
    previous = ShapeSet.compute(C, MAJOR, BASS, 21).select(4)
    shape_set = ShapeSet.compute(C, MAJOR, BASS, 3, previous=previous)
    assert shape_set.selected is None

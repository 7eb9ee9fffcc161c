from fretbox.box import FretWindow, StringPos
from fretbox.fingering import FingerMode
from fretbox.scale import KEY_LOOKUP, SCALE_LOOKUP
from fretbox.shapes import find_root, generate_shapes
from fretbox.tuning import TUNING_LOOKUP, Tuning

BASS = TUNING_LOOKUP["bass-4"]
C = KEY_LOOKUP["C"]
MAJOR = SCALE_LOOKUP["Major"]


def test_four_fret_shape() -> None:
    shapes = generate_shapes(C, MAJOR, BASS, 21, 4)
    assert len(shapes) == 1
    shape = shapes[0]
    assert shape.box == (7, 10)
    assert shape.span == 4
    assert shape.root.pos == StringPos(3, 8)
    assert shape.root.finger == 2
    assert shape.mode == FingerMode.Null
    assert shape.name == "E2"
    assert shape.label == "E2 (4-fret)"
    assert StringPos(0, 9) in shape
    assert shape.finger(10) == 4


def test_five_fret_shape_names() -> None:
    shapes = generate_shapes(C, MAJOR, BASS, 21, 5)
    names = {shape.window.start: shape.name for shape in shapes}
    assert names == {
        0: "A2",
        1: "A2",
        3: "A1",
        5: "E3",
        6: "E2",
        7: "E2",
        8: "E1",
        10: "D1",
        12: "A4",
        13: "A2",
        15: "A1",
        17: "E3",
    }


def test_root_prefers_lowest_string() -> None:
    assert find_root(FretWindow(3, 5), 0, BASS, 21) == StringPos(2, 3)
    assert find_root(FretWindow(8, 5), 0, BASS, 21) == StringPos(3, 8)
    assert find_root(FretWindow(10, 5), 0, BASS, 21) == StringPos(1, 10)


def test_root_prefers_lowest_fret() -> None:
    # E on the low E string at frets 0 and 12
    assert find_root(FretWindow(0, 13), 4, BASS, 21) == StringPos(3, 0)


def test_root_on_open_string() -> None:
    shapes = generate_shapes(KEY_LOOKUP["E"], SCALE_LOOKUP["Major"], BASS, 21, 5)
    open_shapes = [s for s in shapes if s.window.is_open]
    assert len(open_shapes) == 1
    shape = open_shapes[0]
    assert shape.root.pos == StringPos(3, 0)
    assert shape.root.finger == 1
    assert shape.name == "E1"


def test_root_follows_pitch_not_display_order() -> None:
    # G sounds on the C4 string at fret 7, the E4 string at fret 3 and the
    # open G4 string; C4 is the lowest string even though G4 sits below it
    uke = TUNING_LOOKUP["ukulele"]
    assert find_root(FretWindow(0, 8), 7, uke, 21) == StringPos(2, 7)


def test_no_shapes_on_single_string() -> None:
    assert generate_shapes(C, MAJOR, Tuning("one", (40,)), 21, 5) == []


def test_no_shapes_on_short_neck() -> None:
    assert generate_shapes(C, MAJOR, BASS, 3, 5) == []

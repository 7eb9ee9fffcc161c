import pytest

from fretbox.base import MatchException
from fretbox.box import Coverage, FretWindow, StringPos, collect_coverage
from fretbox.fingering import FingerMode, assign_fingering, choose_mode, finger_for_fret
from fretbox.scale import KEY_LOOKUP, SCALE_LOOKUP
from fretbox.tuning import TUNING_LOOKUP

BASS = TUNING_LOOKUP["bass-4"]
C_MAJOR = SCALE_LOOKUP["Major"].to_classifier(KEY_LOOKUP["C"].pitch_class).member_set


def coverage_of(start: int, span: int) -> Coverage:
    return collect_coverage(FretWindow(start, span), BASS, C_MAJOR, 21)


def coverage_on(*frets: int) -> Coverage:
    return Coverage(tuple(StringPos(0, fret) for fret in frets))


def test_four_fret_one_finger_per_fret() -> None:
    window = FretWindow(7, 4)
    fingering = assign_fingering(window, coverage_of(7, 4))
    assert fingering.mode == FingerMode.Null
    assert [fingering.finger(f) for f in range(7, 11)] == [1, 2, 3, 4]


def test_five_fret_pinky() -> None:
    # Only one note on fret 16 against four on frets 15 and 16
    window = FretWindow(12, 5)
    fingering = assign_fingering(window, coverage_of(12, 5))
    assert fingering.mode == FingerMode.Pinky
    assert [fingering.finger(f) for f in range(12, 17)] == [1, 2, 3, 4, 4]


def test_five_fret_index() -> None:
    window = FretWindow(1, 5)
    fingering = assign_fingering(window, coverage_of(1, 5))
    assert fingering.mode == FingerMode.Index
    assert [fingering.finger(f) for f in range(1, 6)] == [1, 1, 2, 3, 4]


def test_five_fret_empty_top_fret() -> None:
    assert choose_mode(FretWindow(7, 5), coverage_of(7, 5)) == FingerMode.Pinky


def test_open_short_box() -> None:
    window = FretWindow(0, 4)
    assert choose_mode(window, coverage_on(1, 3)) == FingerMode.Null
    fingers = [finger_for_fret(window, FingerMode.Null, f) for f in range(4)]
    assert fingers == [1, 1, 2, 4]


def test_open_box_tie_goes_to_index() -> None:
    window = FretWindow(0, 5)
    assert choose_mode(window, coverage_of(0, 5)) == FingerMode.Index
    fingers = [finger_for_fret(window, FingerMode.Index, f) for f in range(5)]
    assert fingers == [1, 1, 1, 2, 4]


def test_open_box_pinky() -> None:
    window = FretWindow(0, 5)
    assert choose_mode(window, coverage_on(1, 3, 4)) == FingerMode.Pinky
    fingers = [finger_for_fret(window, FingerMode.Pinky, f) for f in range(5)]
    assert fingers == [1, 1, 2, 4, 4]


def test_open_box_index_when_low_dense() -> None:
    window = FretWindow(0, 5)
    assert choose_mode(window, coverage_on(1, 2, 4)) == FingerMode.Index


def test_unmatched_mode() -> None:
    with pytest.raises(MatchException):
        finger_for_fret(FretWindow(3, 5), FingerMode.Null, 4)
    with pytest.raises(MatchException):
        finger_for_fret(FretWindow(0, 5), FingerMode.Null, 2)


def test_unmatched_span() -> None:
    with pytest.raises(MatchException):
        finger_for_fret(FretWindow(3, 6), FingerMode.Index, 4)

import pytest

from fretbox.scale import Spelling
from fretbox.tuning import TUNING_LOOKUP, TUNINGS, Tuning


def test_presets() -> None:
    assert len(TUNING_LOOKUP) == len(TUNINGS)
    assert TUNING_LOOKUP["bass-4"].notes == (43, 38, 33, 28)
    assert TUNING_LOOKUP["guitar"].describe() == "E4 B3 G3 D3 A2 E2"


def test_invalid_tuning() -> None:
    with pytest.raises(ValueError):
        Tuning("empty", ())
    with pytest.raises(ValueError):
        Tuning("high", (128,))
    with pytest.raises(ValueError):
        Tuning("low", (-1, 40))


def test_pitch_order_descending() -> None:
    tuning = TUNING_LOOKUP["bass-4"]
    assert [s.display_index for s in tuning.pitch_order()] == [3, 2, 1, 0]
    assert [tuning.pitch_rank(i) for i in range(4)] == [3, 2, 1, 0]


def test_pitch_order_reentrant() -> None:
    # A4 E4 C4 G4: the bottom row is not the lowest string
    tuning = TUNING_LOOKUP["ukulele"]
    assert [s.display_index for s in tuning.pitch_order()] == [2, 1, 3, 0]
    assert tuning.pitch_rank(3) == 2


def test_pitch_order_unison() -> None:
    tuning = Tuning("unison", (40, 40, 35))
    assert [s.display_index for s in tuning.pitch_order()] == [2, 1, 0]


def test_strings() -> None:
    strings = TUNING_LOOKUP["bass-4"].strings()
    assert strings[3].note == 28
    assert strings[3].pitch_class == 4
    assert strings[3].pitch_rank == 0


def test_pitch_class_at() -> None:
    tuning = TUNING_LOOKUP["bass-4"]
    assert tuning.pitch_class_at(3, 8) == 0
    assert tuning.pitch_class_at(2, 3) == 0
    assert tuning.open_pitch_class(0) == 7


def test_string_name() -> None:
    tuning = Tuning("custom", (46, 39))
    assert tuning.string_name(0, Spelling.Flat) == "Bb"
    assert tuning.string_name(1, Spelling.Sharp) == "D#"


def test_nudge() -> None:
    tuning = TUNING_LOOKUP["bass-4"]
    nudged = tuning.nudge(0, 2)
    assert nudged.notes == (45, 38, 33, 28)
    assert nudged.name == "custom"
    assert tuning.notes == (43, 38, 33, 28)


def test_nudge_clamps() -> None:
    tuning = Tuning("edge", (126, 1))
    assert tuning.nudge(0, 5).notes == (127, 1)
    assert tuning.nudge(1, -5).notes == (126, 0)

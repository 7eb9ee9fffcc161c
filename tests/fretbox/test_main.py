import sys
from typing import List

import pytest

from fretbox.main import main, make_parser


def run(monkeypatch: pytest.MonkeyPatch, args: List[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["fretbox", *args])
    main()


def test_parser_defaults() -> None:
    args = make_parser().parse_args([])
    assert args.key == "C"
    assert args.tuning.name == "bass-4"
    assert args.frets == 21
    assert not args.list


def test_parser_custom_tuning() -> None:
    args = make_parser().parse_args(["--tuning", "E A D G"])
    assert args.tuning.notes == (40, 33, 26, 19)


def test_parser_bad_tuning() -> None:
    with pytest.raises(SystemExit):
        make_parser().parse_args(["--tuning", "X Y"])


def test_list(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    run(monkeypatch, ["--list"])
    lines = capsys.readouterr().out.strip().split("\n")
    assert len(lines) == 11
    assert "E2 (4-fret)" in lines[4]
    assert lines[4].endswith("frets 7-10")


def test_show_shape(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    run(monkeypatch, ["--shape", "4", "--labels", "fingers"])
    out = capsys.readouterr().out
    assert out.startswith("E2 (4-fret)")
    assert "2!" in out


def test_no_shapes(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    run(monkeypatch, ["--tuning", "E2"])
    assert capsys.readouterr().out.startswith("No valid shape")

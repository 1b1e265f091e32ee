from uiuniversals.layout.text_align import (
    TextAlignment,
    align_by,
    center,
    leading,
    trailing,
)

lines = [1, 2, 3, 10]


def test_leading():
    assert leading(10, lines) == [0, 0, 0, 0]


def test_trailing():
    assert trailing(10, lines) == [9, 8, 7, 0]


def test_center():
    assert center(10, lines) == [4.5, 4, 3.5, 0]


def test_align_by():
    assert align_by(TextAlignment.center, 10, lines) == center(10, lines)
    assert align_by(TextAlignment.trailing, 10, []) == []

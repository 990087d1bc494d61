"""Tests for rendering and numeric suffixes."""

import random
import re

import pytest

from fluent_codes import random_digits, render

from helpers import DeterministicRng


@pytest.mark.parametrize("joiner", ["-", "", "..{-_-}..", "^"])
def test_render_edge_cases(joiner):
    assert render([], joiner) == ""
    assert render(["solo"], joiner) == "solo"
    assert render(["left", "right"], joiner) == "left" + joiner + "right"


def test_render_keeps_order():
    assert render(("fluffy", "vacuum", "misuse", "deadly"), "-") == "fluffy-vacuum-misuse-deadly"


@pytest.mark.parametrize(
    "value, expected",
    [(0, "000000"), (7, "000007"), (887709, "887709"), (999999, "999999")],
)
def test_six_digits_padding(value, expected):
    assert random_digits(DeterministicRng(randint_values=[value])) == expected


def test_random_digits_always_fixed_width():
    rng = random.Random(123)
    for width in (1, 4, 6, 9):
        for _ in range(200):
            assert re.fullmatch(rf"\d{{{width}}}", random_digits(rng, width))


def test_six_digit_draw_is_inclusive():
    calls = []

    class RecordingRng:
        def randint(self, a, b):
            calls.append((a, b))
            return b

    assert random_digits(RecordingRng()) == "999999"
    assert calls == [(0, 999999)]


@pytest.mark.parametrize("width", [0, -3, 2.5, True])
def test_invalid_width(width):
    with pytest.raises(ValueError):
        random_digits(random.Random(0), width)

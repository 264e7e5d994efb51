import random

import pytest

from ocr_field_generator.ocr.lines import (
    _character_pitches,
    _probe_text,
    _sample_lines,
    _words_from_lines,
)
from ocr_field_generator.ocr.types import OcrLine, OcrWord, PageOcr


def test_sample_lines_uses_designated_line(page_ocr: PageOcr) -> None:
    lines = _sample_lines(page_ocr, ocr_line=1, samples=12, rng=random.Random(0))

    assert lines == [page_ocr.lines[1]]


def test_sample_lines_draws_with_replacement(page_ocr: PageOcr) -> None:
    lines = _sample_lines(page_ocr, ocr_line=-1, samples=12, rng=random.Random(0))

    assert len(lines) == 12
    assert all(line in page_ocr.lines for line in lines)


def test_sample_lines_on_empty_page_returns_nothing() -> None:
    page = PageOcr(width=10, height=10)

    assert _sample_lines(page, ocr_line=-1, samples=12, rng=random.Random(0)) == []


@pytest.mark.parametrize("ocr_line", [3, 10])
def test_designated_line_out_of_range(page_ocr: PageOcr, ocr_line: int) -> None:
    with pytest.raises(IndexError, match="out of range"):
        _sample_lines(page_ocr, ocr_line=ocr_line, samples=1, rng=random.Random(0))


def test_words_from_lines_skips_empty_text(word_factory) -> None:
    line = OcrLine(
        bounding_box=(0, 0, 1, 0, 1, 1, 0, 1),
        text="a",
        words=(
            word_factory("a", 0, 0),
            OcrWord(bounding_box=(0, 0, 1, 0, 1, 1, 0, 1), text=""),
        ),
    )

    assert [word.text for word in _words_from_lines([line, line])] == ["a", "a"]


def test_character_pitches(word_factory) -> None:
    words = [
        word_factory("abcd", 0, 0, char_width=10, height=20),
        word_factory("12", 0, 0, char_width=7, height=18),
    ]

    widths, heights = _character_pitches(words)

    assert widths == pytest.approx([10, 7])
    assert heights == pytest.approx([20, 18])


def test_probe_text_prefers_designated_line(page_ocr: PageOcr) -> None:
    assert _probe_text(page_ocr, 0, "fallback") == "Invoice Number"
    assert _probe_text(page_ocr, -1, "fallback") == "fallback"

import pytest

from ocr_field_generator.measure import FontDescriptor, TextMetrics
from ocr_field_generator.models import FieldRegion, FieldTag
from ocr_field_generator.ocr.types import OcrLine, OcrWord, PageOcr

# Image pixels (y down) and map units (y up); 2 image pixels per map unit.
REGION_BBOX = (0.0, 0.0, 200.0, 0.0, 200.0, 100.0, 0.0, 100.0)
REGION_CANVAS_BBOX = (0.0, 0.0, 100.0, 0.0, 100.0, -50.0, 0.0, -50.0)


class FixedAdvanceMeasurer:
    """Deterministic stand-in for a text-shaping backend.

    Every glyph advances ``advance * size`` pixels. Ink spans the whole font
    size: three quarters above the baseline and one quarter below. With
    ``short_lowercase`` all-lowercase text only rises half the size.
    """

    def __init__(self, advance: float = 0.5, *, short_lowercase: bool = False) -> None:
        self.advance = advance
        self.short_lowercase = short_lowercase
        self.calls: list[tuple[str, FontDescriptor]] = []

    def measure(self, text: str, font: FontDescriptor) -> TextMetrics:
        self.calls.append((text, font))
        size = font.size_px
        ascent = 0.75 * size
        if self.short_lowercase and text.islower():
            ascent = 0.5 * size
        return TextMetrics(
            width=len(text) * self.advance * size,
            ascent=ascent,
            descent=0.25 * size,
        )


def make_word(
    text: str,
    left: float,
    top: float,
    *,
    char_width: float = 10.0,
    height: float = 20.0,
) -> OcrWord:
    right = left + char_width * len(text)
    bottom = top + height
    return OcrWord(
        bounding_box=(left, top, right, top, right, bottom, left, bottom),
        text=text,
        confidence=0.98,
    )


def make_line(words: list[OcrWord]) -> OcrLine:
    left, top = words[0].bounding_box[0:2]
    right, bottom = words[-1].bounding_box[4:6]
    return OcrLine(
        bounding_box=(left, top, right, top, right, bottom, left, bottom),
        text=" ".join(word.text for word in words),
        words=tuple(words),
    )


@pytest.fixture
def measurer() -> FixedAdvanceMeasurer:
    return FixedAdvanceMeasurer()


@pytest.fixture
def page_ocr() -> PageOcr:
    """Page whose words all measure 10 px per character and 20 px tall."""
    return PageOcr(
        width=1000,
        height=500,
        lines=(
            make_line([make_word("Invoice", 10, 10), make_word("Number", 90, 10)]),
            make_line([make_word("Total", 10, 40), make_word("1234", 70, 40)]),
            make_line([make_word("Ship", 10, 70), make_word("to", 60, 70)]),
        ),
    )


@pytest.fixture
def region() -> FieldRegion:
    return FieldRegion(
        bbox=REGION_BBOX,
        canvas_bbox=REGION_CANVAS_BBOX,
        page=1,
        tag=FieldTag(name="customer", type="string", format="alphanumeric"),
        ocr_line=0,
    )


@pytest.fixture
def measurer_factory() -> type[FixedAdvanceMeasurer]:
    return FixedAdvanceMeasurer


@pytest.fixture
def word_factory():
    return make_word


@pytest.fixture
def line_factory():
    return make_line

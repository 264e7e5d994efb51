import random
from collections.abc import Sequence

from ocr_field_generator.geometry import box_height, box_width
from ocr_field_generator.ocr.types import OcrLine, OcrWord, PageOcr


def _designated_line(ocr: PageOcr, ocr_line: int) -> OcrLine:
    if not 0 <= ocr_line < len(ocr.lines):
        raise IndexError(
            f"OCR line {ocr_line} is out of range for a page with "
            f"{len(ocr.lines)} lines."
        )
    return ocr.lines[ocr_line]


def _sample_lines(
    ocr: PageOcr,
    *,
    ocr_line: int,
    samples: int,
    rng: random.Random,
) -> list[OcrLine]:
    """Pick the lines whose words drive the text-scale estimate.

    A designated line (``ocr_line >= 0``) is used on its own; otherwise
    ``samples`` lines are drawn uniformly with replacement.
    """
    if ocr_line >= 0:
        return [_designated_line(ocr, ocr_line)]
    if not ocr.lines:
        return []
    return [rng.choice(ocr.lines) for _ in range(samples)]


def _words_from_lines(lines: Sequence[OcrLine]) -> list[OcrWord]:
    return [word for line in lines for word in line.words if word.text]


def _character_pitches(
    words: Sequence[OcrWord],
) -> tuple[list[float], list[float]]:
    """Per-character width and full height of each word, in image pixels."""
    widths: list[float] = []
    heights: list[float] = []
    for word in words:
        widths.append(box_width(word.bounding_box) / len(word.text))
        heights.append(box_height(word.bounding_box))
    return widths, heights


def _probe_text(ocr: PageOcr, ocr_line: int, default: str) -> str:
    if ocr_line >= 0:
        return _designated_line(ocr, ocr_line).text
    return default

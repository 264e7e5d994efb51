from collections.abc import Sequence

from ocr_field_generator.config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from ocr_field_generator.generation.limits import effective_line_height
from ocr_field_generator.generation.models import ScaleEstimate
from ocr_field_generator.geometry import (
    box_center,
    image_per_map_unit,
    map_to_image,
    pixels_to_map,
    to_percentage,
)
from ocr_field_generator.measure import FontDescriptor, TextMeasurer
from ocr_field_generator.models import FieldRegion, GeneratedBoxes, TextStyle, WordBox
from ocr_field_generator.ocr.types import BoundingBox, OcrLine, OcrWord, PageOcr

SYNTHETIC_CONFIDENCE = 1.0


def _corners(left: float, top: float, width: float, height: float) -> BoundingBox:
    right = left + width
    bottom = top + height
    return (left, top, right, top, right, bottom, left, bottom)


def _line_envelope(words: Sequence[WordBox]) -> BoundingBox:
    """Box from the first word's top-left to the last word's bottom-right."""
    left, top = words[0].bounding_box[0:2]
    right, bottom = words[-1].bounding_box[4:6]
    return (left, top, right, top, right, bottom, left, bottom)


def _as_ocr_word(word: WordBox) -> OcrWord:
    return OcrWord(
        bounding_box=word.bounding_box,
        text=word.text,
        confidence=SYNTHETIC_CONFIDENCE,
    )


def compose_boxes(
    region: FieldRegion,
    style: TextStyle,
    ocr: PageOcr,
    scale: ScaleEstimate,
    resolution: float,
    *,
    measurer: TextMeasurer,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
) -> GeneratedBoxes:
    """Lay out ``style.text`` word by word and return OCR-shaped boxes.

    Horizontal positions come from measuring the words already placed on a
    line (plus a trailing space). Text hangs from its top, so words whose ink
    is shorter than the alignment probe are pushed down by the difference.
    Like real OCR output, no box has empty text and blank lines are omitted.
    """
    font = FontDescriptor.from_style(style)
    width_scale, height_scale = image_per_map_unit(region)
    center_x, center_y = box_center(region.bbox)
    # Map y points up, image y points down.
    offset_x = style.offset_x
    offset_y = -style.offset_y
    line_advance = effective_line_height(scale, style.line_height, config)
    probe_ascent = measurer.measure(config.alignment_probe, font).ascent

    lines: list[OcrLine] = []
    words: list[WordBox] = []
    line_offset = 0.0
    for line_text in style.text.split("\n"):
        line_words: list[WordBox] = []
        placed = ""
        for word_text in line_text.split(" "):
            advance = measurer.measure(placed, font).width
            placed += word_text + " "
            # Repeated or edge spaces still advance the pen but yield no box.
            if not word_text:
                continue
            metrics = measurer.measure(word_text, font)

            alignment = map_to_image(
                pixels_to_map(probe_ascent - metrics.ascent, resolution),
                height_scale,
            )
            left = center_x + map_to_image(
                offset_x + pixels_to_map(advance, resolution),
                width_scale,
            )
            top = (
                center_y
                + map_to_image(offset_y + line_offset, height_scale)
                + alignment
            )
            box = _corners(
                left,
                top,
                map_to_image(pixels_to_map(metrics.width, resolution), width_scale),
                map_to_image(pixels_to_map(metrics.height, resolution), height_scale),
            )
            line_words.append(
                WordBox(
                    bounding_box=box,
                    bounding_box_percentage=to_percentage(box, ocr.width, ocr.height),
                    text=word_text,
                )
            )
        line_offset += line_advance
        if not line_words:
            continue

        lines.append(
            OcrLine(
                bounding_box=_line_envelope(line_words),
                text=" ".join(word.text for word in line_words),
                words=tuple(_as_ocr_word(word) for word in line_words),
            )
        )
        words.extend(line_words)

    return GeneratedBoxes(full=region.bbox, lines=tuple(lines), words=tuple(words))

import math
from collections.abc import Sequence
from typing import Final

from ocr_field_generator.models import FieldTag, GeneratorTagInfo
from ocr_field_generator.ocr.types import PageOcr
from ocr_field_generator.text import camel_case, normalize_text

NUMBER_CUES: Final = ("#", "number", "num.", "phone", "amount")
# Roughly half an inch in the page units of a read result.
DEFAULT_MAX_DISTANCE: Final = 1.0
# Longer lines are named after the matched word instead of the whole line.
MAX_LINE_NAME_LENGTH: Final = 20
DEFAULT_PROPOSAL: Final = FieldTag(type="string", format="alphanumeric")


def propose_tag(
    bbox: Sequence[float],
    page_ocr: PageOcr | None,
    *,
    max_distance: float = DEFAULT_MAX_DISTANCE,
) -> GeneratorTagInfo:
    """Propose a tag for a newly drawn box from the closest OCR word.

    The word whose top-left corner is nearest to the box's top-left corner,
    and strictly within ``max_distance``, names the field. Lines mentioning a
    number cue are typed as numbers. Without a match the defaults are kept.
    """
    if page_ocr is None:
        return GeneratorTagInfo(tag_proposal=DEFAULT_PROPOSAL)

    ref_x, ref_y = bbox[0], bbox[1]
    closest = max_distance
    best: tuple[int, str, str] | None = None
    for index, line, word in page_ocr.iter_words():
        distance = math.hypot(
            word.bounding_box[0] - ref_x,
            word.bounding_box[1] - ref_y,
        )
        if distance < closest:
            closest = distance
            best = (index, normalize_text(line.text), word.text)

    if best is None:
        return GeneratorTagInfo(tag_proposal=DEFAULT_PROPOSAL)
    line_index, line_text, word_text = best
    name_source = word_text if len(line_text) > MAX_LINE_NAME_LENGTH else line_text
    lowered = line_text.lower()
    name = camel_case(name_source)
    if any(cue in lowered for cue in NUMBER_CUES):
        tag = FieldTag(name=name, type="number", format="not-specified")
    else:
        tag = FieldTag(name=name, type="string", format="alphanumeric")
    return GeneratorTagInfo(tag_proposal=tag, ocr_line=line_index)

from ocr_field_generator.models import GeneratedInfo, Label, LabelValue
from ocr_field_generator.ocr.types import OcrLine


def to_ocr_lines(info: GeneratedInfo) -> tuple[OcrLine, ...]:
    """Generated lines, ready to be merged into a page read result."""
    return info.bounding_boxes.lines


def to_label(info: GeneratedInfo) -> Label:
    """Project generated words onto the labeling tool's label record."""
    return Label(
        label=info.name,
        key=None,
        value=tuple(
            LabelValue(
                page=info.page,
                text=word.text,
                bounding_boxes=(word.bounding_box_percentage,),
            )
            for word in info.bounding_boxes.words
        ),
    )

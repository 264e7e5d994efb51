from ocr_field_generator.adapters import to_label, to_ocr_lines
from ocr_field_generator.config import (
    DEFAULT_GENERATOR_CONFIG,
    NO_JITTER_CONFIG,
    GeneratorConfig,
)
from ocr_field_generator.generation import generate, generate_batch
from ocr_field_generator.inference import propose_tag
from ocr_field_generator.measure import (
    FontDescriptor,
    PillowTextMeasurer,
    TextMeasurer,
    TextMetrics,
    ThreadSafeTextMeasurer,
    style_to_font,
)
from ocr_field_generator.models import (
    FieldRegion,
    FieldTag,
    GeneratedInfo,
    GeneratorTagInfo,
    Label,
    TextStyle,
)
from ocr_field_generator.ocr import OcrLine, OcrWord, PageOcr

__all__ = [
    "DEFAULT_GENERATOR_CONFIG",
    "FieldRegion",
    "FieldTag",
    "FontDescriptor",
    "GeneratedInfo",
    "GeneratorConfig",
    "GeneratorTagInfo",
    "Label",
    "NO_JITTER_CONFIG",
    "OcrLine",
    "OcrWord",
    "PageOcr",
    "PillowTextMeasurer",
    "TextMeasurer",
    "TextMetrics",
    "TextStyle",
    "ThreadSafeTextMeasurer",
    "generate",
    "generate_batch",
    "propose_tag",
    "style_to_font",
    "to_label",
    "to_ocr_lines",
]

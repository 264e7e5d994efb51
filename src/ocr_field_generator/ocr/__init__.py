from ocr_field_generator.ocr.types import BoundingBox, OcrLine, OcrWord, PageOcr

__all__ = [
    "BoundingBox",
    "OcrLine",
    "OcrWord",
    "PageOcr",
]

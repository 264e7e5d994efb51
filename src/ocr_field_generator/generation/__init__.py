from ocr_field_generator.generation.boxes import compose_boxes
from ocr_field_generator.generation.calibration import calibrate_font
from ocr_field_generator.generation.common import Randomizer
from ocr_field_generator.generation.engine import (
    generate,
    generate_batch,
    pages_by_number,
)
from ocr_field_generator.generation.limits import compute_limits
from ocr_field_generator.generation.models import (
    FontCalibration,
    LengthLimits,
    ScaleEstimate,
)
from ocr_field_generator.generation.scale import estimate_scale
from ocr_field_generator.generation.synthesis import field_pattern, synthesize

__all__ = [
    "FontCalibration",
    "LengthLimits",
    "Randomizer",
    "ScaleEstimate",
    "calibrate_font",
    "compose_boxes",
    "compute_limits",
    "estimate_scale",
    "field_pattern",
    "generate",
    "generate_batch",
    "pages_by_number",
    "synthesize",
]

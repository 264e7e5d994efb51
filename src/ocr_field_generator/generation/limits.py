from ocr_field_generator.config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from ocr_field_generator.generation.common import Randomizer, round_half_up
from ocr_field_generator.generation.models import (
    FontCalibration,
    LengthLimits,
    ScaleEstimate,
)
from ocr_field_generator.geometry import map_extent
from ocr_field_generator.models import FieldRegion

# Structured values render as a single centered line: [1, 2) lines.
SINGLE_LINE_HEIGHT_LIMIT = 2


def effective_line_height(
    scale: ScaleEstimate,
    line_height: float,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
) -> float:
    """Map-unit advance between consecutive lines of generated text."""
    return scale.map_height_per_char * line_height * config.leading_line_height_scale


def compute_limits(
    region: FieldRegion,
    scale: ScaleEstimate,
    calibration: FontCalibration,
    *,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    randomizer: Randomizer | None = None,
) -> LengthLimits:
    """Translate the region's map extent into character and line count bounds.

    Also places the text: offsets run from the region center to its top-left
    corner (map y points up, so the top is ``+height / 2``). Non-string
    fields are centered vertically and limited to one line.
    """
    randomizer = randomizer or Randomizer.from_config(config)
    map_width, map_height = map_extent(region)
    line_advance = effective_line_height(scale, calibration.line_height, config)

    width_low, width_high = config.width_bounds
    height_low, height_high = config.height_bounds
    char_low = round_half_up(map_width * width_low / scale.map_width_per_char)
    char_high = round_half_up(map_width * width_high / scale.map_width_per_char)
    lines_low = max(1, round_half_up(map_height * height_low / line_advance))
    lines_high = round_half_up(map_height * height_high / line_advance)

    offset_x = (
        -map_width / 2 + config.offset_x + randomizer.jitter(config.offset_x_jitter)
    )
    offset_y = (
        map_height / 2 + config.offset_y + randomizer.jitter(config.offset_y_jitter)
    )
    if region.tag.type != "string":
        offset_y = (
            scale.map_height_per_char / 2
            + config.offset_y
            + lines_high * randomizer.jitter(config.offset_y_jitter)
        )
        lines_high = SINGLE_LINE_HEIGHT_LIMIT

    return LengthLimits(
        width_range=(char_low, char_high),
        height_range=(lines_low, lines_high),
        offset_x=offset_x,
        offset_y=offset_y,
    )

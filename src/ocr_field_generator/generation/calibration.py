import logging

from ocr_field_generator.config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from ocr_field_generator.generation.common import Randomizer
from ocr_field_generator.generation.models import FontCalibration, ScaleEstimate
from ocr_field_generator.geometry import map_to_pixels
from ocr_field_generator.measure import FontDescriptor, TextMeasurer
from ocr_field_generator.models import FieldRegion
from ocr_field_generator.ocr.lines import _probe_text
from ocr_field_generator.ocr.types import PageOcr

logger = logging.getLogger(__name__)


def _search_font_size(
    probe: str,
    target_height: float,
    *,
    weight: int,
    line_height: float,
    family: str,
    size_range: tuple[int, int],
    measurer: TextMeasurer,
) -> int:
    """Walk up from the smallest size until the measured height stops improving.

    Measured height grows with size, so the first size that moves away from
    the target ends the search.
    """
    low, high = size_range
    best_size = low
    best_distance = float("inf")
    size = low
    while size < high:
        font = FontDescriptor(
            weight=weight,
            size_px=size,
            line_height=line_height,
            family=family,
        )
        distance = abs(measurer.measure(probe, font).height - target_height)
        if distance > best_distance:
            break
        best_distance = distance
        best_size = size
        size += 1
    return best_size


def calibrate_font(
    region: FieldRegion,
    scale: ScaleEstimate,
    ocr: PageOcr,
    resolution: float,
    *,
    measurer: TextMeasurer,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    randomizer: Randomizer | None = None,
) -> FontCalibration:
    """Pick the pixel font size whose rendered height matches the local scale.

    ``resolution`` is map units per device pixel, so the target pixel height
    follows the zoom level while the map-unit height stays fixed.
    """
    randomizer = randomizer or Randomizer.from_config(config)
    weight = config.weight + int(randomizer.jitter(config.weight_jitter, rounded=True))
    line_height = config.line_height + randomizer.jitter(config.line_height_jitter)

    target_height = map_to_pixels(scale.map_height_per_char, resolution)
    probe = _probe_text(ocr, region.ocr_line, config.sizing_string)
    best_size = _search_font_size(
        probe,
        target_height,
        weight=weight,
        line_height=line_height,
        family=config.font_family,
        size_range=config.sizing_range,
        measurer=measurer,
    )
    font_size = best_size + randomizer.jitter(config.size_jitter)
    logger.debug(
        "Calibrated font: target=%.2fpx best=%dpx final=%.2fpx weight=%d",
        target_height,
        best_size,
        font_size,
        weight,
    )
    return FontCalibration(
        font_weight=weight,
        font_size_px=font_size,
        line_height=line_height,
    )

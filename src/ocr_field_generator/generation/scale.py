import logging
from statistics import median

from ocr_field_generator.config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from ocr_field_generator.generation.common import Randomizer
from ocr_field_generator.generation.models import ScaleEstimate
from ocr_field_generator.geometry import image_per_map_unit, image_to_map
from ocr_field_generator.models import FieldRegion
from ocr_field_generator.ocr.lines import (
    _character_pitches,
    _sample_lines,
    _words_from_lines,
)
from ocr_field_generator.ocr.types import PageOcr

logger = logging.getLogger(__name__)


def estimate_scale(
    region: FieldRegion,
    ocr: PageOcr,
    *,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    randomizer: Randomizer | None = None,
) -> ScaleEstimate:
    """Estimate map units per character from OCR words near the region.

    Medians are used so digit-only or punctuation-only words do not skew the
    pitch. Raises ``ValueError`` for degenerate region geometry, when the
    sampled lines hold no words, or when their median pitch is zero.
    """
    randomizer = randomizer or Randomizer.from_config(config)
    width_scale, height_scale = image_per_map_unit(region)

    lines = _sample_lines(
        ocr,
        ocr_line=region.ocr_line,
        samples=config.sizing_samples,
        rng=randomizer.rng,
    )
    words = _words_from_lines(lines)
    if not words:
        raise ValueError(
            "No OCR words available to estimate text scale "
            f"(ocr_line={region.ocr_line}, lines={len(ocr.lines)})."
        )
    widths, heights = _character_pitches(words)
    median_width = median(widths)
    median_height = median(heights)
    if median_width <= 0 or median_height <= 0:
        raise ValueError(
            "OCR words have no measurable character pitch "
            f"(median width={median_width}, median height={median_height})."
        )

    map_width = image_to_map(median_width, width_scale)
    map_height = image_to_map(median_height, height_scale)
    logger.debug(
        "Estimated text scale from %d words: width=%.3f height=%.3f map units",
        len(words),
        map_width,
        map_height,
    )
    return ScaleEstimate(
        map_width_per_char=map_width
        * config.width_scale
        * (1 + randomizer.jitter(config.width_scale_jitter)),
        map_height_per_char=map_height
        * config.height_scale
        * (1 + randomizer.jitter(config.height_scale_jitter)),
    )

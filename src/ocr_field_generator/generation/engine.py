import logging
import random
from collections.abc import Sequence

from ocr_field_generator.config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from ocr_field_generator.generation.boxes import compose_boxes
from ocr_field_generator.generation.calibration import calibrate_font
from ocr_field_generator.generation.common import Randomizer
from ocr_field_generator.generation.limits import compute_limits
from ocr_field_generator.generation.scale import estimate_scale
from ocr_field_generator.generation.synthesis import synthesize
from ocr_field_generator.measure import TextMeasurer, _get_default_measurer
from ocr_field_generator.models import FieldRegion, GeneratedInfo, TextStyle
from ocr_field_generator.ocr.types import PageOcr

logger = logging.getLogger(__name__)


def generate(
    region: FieldRegion,
    ocr: PageOcr,
    resolution: float = 1.0,
    *,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    measurer: TextMeasurer | None = None,
    rng: random.Random | None = None,
) -> GeneratedInfo:
    """Synthesize text and OCR-shaped boxes for one field region.

    Args:
        region: Field region with its tag and optional reference OCR line.
        ocr: Read result of the page the region is drawn on.
        resolution: Map units per device pixel of the measuring surface.
        config: Generation constants; read once for the whole call.
        measurer: Text measurement backend, Pillow when omitted.
        rng: Random source, seeded from ``config.seed`` when omitted.
    Returns:
        The generated text, its style and its region/line/word boxes.
    """
    randomizer = Randomizer.from_config(config, rng)
    resolved_measurer = measurer or _get_default_measurer()
    adjusted_resolution = resolution * config.resolution_scale

    scale = estimate_scale(region, ocr, config=config, randomizer=randomizer)
    calibration = calibrate_font(
        region,
        scale,
        ocr,
        adjusted_resolution,
        measurer=resolved_measurer,
        config=config,
        randomizer=randomizer,
    )
    limits = compute_limits(
        region,
        scale,
        calibration,
        config=config,
        randomizer=randomizer,
    )
    text = synthesize(
        region.tag.type,
        region.tag.format,
        limits.width_range,
        limits.height_range,
        config=config,
        randomizer=randomizer,
    )
    style = TextStyle(
        text=text,
        font_weight=calibration.font_weight,
        font_size=calibration.font_size,
        line_height=calibration.line_height,
        font_family=config.font_family,
        offset_x=limits.offset_x,
        offset_y=limits.offset_y,
    )
    bounding_boxes = compose_boxes(
        region,
        style,
        ocr,
        scale,
        adjusted_resolution,
        measurer=resolved_measurer,
        config=config,
    )
    return GeneratedInfo(
        name=region.tag.name,
        text=text,
        bounding_boxes=bounding_boxes,
        style=style,
        page=region.page,
    )


def pages_by_number(ocr_pages: Sequence[PageOcr]) -> dict[int, PageOcr]:
    """Index read results by their own page number, else by 1-based position."""
    return {
        page.page if page.page is not None else index: page
        for index, page in enumerate(ocr_pages, start=1)
    }


def generate_batch(
    regions: Sequence[FieldRegion],
    ocr_pages: Sequence[PageOcr],
    resolution: float = 1.0,
    *,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    measurer: TextMeasurer | None = None,
    rng: random.Random | None = None,
) -> list[GeneratedInfo]:
    """Generate every region of a document with one shared random source.

    Regions pick their OCR page by 1-based ``page``. Regions are processed in
    order on the calling thread.
    """
    pages = pages_by_number(ocr_pages)
    shared_rng = rng if rng is not None else random.Random(config.seed)
    results: list[GeneratedInfo] = []
    for region in regions:
        page = pages.get(region.page)
        if page is None:
            raise KeyError(f"No OCR read result for page {region.page}.")
        results.append(
            generate(
                region,
                page,
                resolution,
                config=config,
                measurer=measurer,
                rng=shared_rng,
            )
        )
    logger.debug("Generated %d region(s) across %d page(s).", len(results), len(pages))
    return results

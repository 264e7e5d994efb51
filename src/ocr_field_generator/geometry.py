"""Conversions between the three coordinate spaces used during generation.

Map units are the authoring space of a region's ``canvasBbox``. Image units
are the OCR page pixels that ``bbox`` and every OCR box are expressed in.
Device pixels are where text is measured; ``resolution`` is map units per
device pixel. Percentages normalize image units by the page width (x) and
height (y).
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ocr_field_generator.models import FieldRegion


def box_width(box: Sequence[float]) -> float:
    return abs(box[2] - box[0])


def box_height(box: Sequence[float]) -> float:
    return abs(box[5] - box[1])


def box_center(box: Sequence[float]) -> tuple[float, float]:
    return (box[0] + box[2]) / 2, (box[1] + box[5]) / 2


def _require_extent(box: Sequence[float], name: str) -> tuple[float, float]:
    if len(box) != 8:
        raise ValueError(f"{name} must contain 8 numbers, got {len(box)}.")
    width = box_width(box)
    height = box_height(box)
    if width == 0 or height == 0:
        raise ValueError(
            f"{name} is degenerate (width={width}, height={height}); "
            "cannot derive a text scale."
        )
    return width, height


def map_extent(region: "FieldRegion") -> tuple[float, float]:
    """Width and height of the region in map units."""
    return _require_extent(region.canvas_bbox, "canvasBbox")


def image_per_map_unit(region: "FieldRegion") -> tuple[float, float]:
    """Image pixels per map unit, independently for x and y.

    Extents are taken as magnitudes, so a map space whose y axis points up
    and an image space whose y axis points down still yield positive scales.
    """
    image_width, image_height = _require_extent(region.bbox, "bbox")
    map_width, map_height = map_extent(region)
    return image_width / map_width, image_height / map_height


def pixels_to_map(pixels: float, resolution: float) -> float:
    return pixels * resolution


def map_to_pixels(map_units: float, resolution: float) -> float:
    return map_units / resolution


def map_to_image(map_units: float, scale: float) -> float:
    return map_units * scale


def image_to_map(image_units: float, scale: float) -> float:
    return image_units / scale


def to_percentage(
    box: Sequence[float],
    width: float,
    height: float,
) -> tuple[float, ...]:
    """Normalize alternating x/y coordinates by the page width and height."""
    return tuple(
        value / width if index % 2 == 0 else value / height
        for index, value in enumerate(box)
    )

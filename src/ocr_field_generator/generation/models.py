from dataclasses import dataclass


@dataclass(frozen=True)
class ScaleEstimate:
    """Local text scale around a region, in map units per character."""

    map_width_per_char: float
    map_height_per_char: float


@dataclass(frozen=True)
class FontCalibration:
    """Font attributes chosen to match the local text scale."""

    font_weight: int
    font_size_px: float
    line_height: float

    @property
    def font_size(self) -> str:
        return f"{self.font_size_px:g}px"


@dataclass(frozen=True)
class LengthLimits:
    """Admissible character and line counts plus the text anchor offsets.

    ``height_range`` is half-open: the sampled line count is drawn from
    ``[low, high)``.
    """

    width_range: tuple[int, int]
    height_range: tuple[int, int]
    offset_x: float
    offset_y: float

from dataclasses import dataclass, replace
from typing import Literal

AlphanumericStrategy = Literal["pattern", "words"]


@dataclass(frozen=True)
class GeneratorConfig:
    """Statistical constants and switches for text generation.

    Offsets are in map units, sizes in device pixels. Each ``*_jitter`` is the
    half-width of a uniform perturbation around its nominal value.
    """

    jitter: bool = True
    seed: int | None = None
    weight: int = 100
    weight_jitter: int = 25
    line_height: float = 1.0
    line_height_jitter: float = 0.3
    width_scale: float = 1.0
    width_scale_jitter: float = 0.05
    height_scale: float = 1.0
    height_scale_jitter: float = 0.05
    # Gap between a font's nominal line box and its visible glyph height.
    leading_line_height_scale: float = 1.35
    size_jitter: float = 1.0
    offset_x: float = 5.0
    offset_x_jitter: float = 20.0
    offset_y: float = -3.0
    offset_y_jitter: float = 3.0
    # Linear bounds; long boxes still get the same fraction of their width.
    width_bounds: tuple[float, float] = (0.3, 1.05)
    height_bounds: tuple[float, float] = (0.2, 0.9)
    sizing_samples: int = 12
    # No descenders, so the probe can size a little larger.
    sizing_string: str = "abcdefghiklmnorstuvwxzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    sizing_range: tuple[int, int] = (10, 100)
    alignment_probe: str = "M"
    font_family: str = "sans-serif"
    resolution_scale: float = 1.0
    alphanumeric_strategy: AlphanumericStrategy = "pattern"

    def without_jitter(self) -> "GeneratorConfig":
        return replace(self, jitter=False)


DEFAULT_GENERATOR_CONFIG = GeneratorConfig()
NO_JITTER_CONFIG = DEFAULT_GENERATOR_CONFIG.without_jitter()

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from threading import Lock
from typing import Protocol

from PIL import ImageFont

from ocr_field_generator.models import TextStyle

SANS_SERIF_FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/Library/Fonts/Arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
)
SANS_SERIF_BOLD_FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/Library/Fonts/Arial Bold.ttf",
    "C:/Windows/Fonts/arialbd.ttf",
)
BOLD_WEIGHT = 600


@dataclass(frozen=True)
class FontDescriptor:
    """Font request in CSS shorthand terms: weight, pixel size, line height."""

    weight: int
    size_px: float
    line_height: float
    family: str = "sans-serif"

    @property
    def css(self) -> str:
        return f"{self.weight} {self.size_px:g}px/{self.line_height:g} {self.family}"

    @classmethod
    def from_style(cls, style: TextStyle) -> "FontDescriptor":
        return cls(
            weight=style.font_weight,
            size_px=style.font_size_px,
            line_height=style.line_height,
            family=style.font_family,
        )


@dataclass(frozen=True)
class TextMetrics:
    """Advance width and ink extents above/below the baseline, in pixels."""

    width: float
    ascent: float
    descent: float

    @property
    def height(self) -> float:
        return self.ascent + self.descent


class TextMeasurer(Protocol):
    def measure(self, text: str, font: FontDescriptor) -> TextMetrics: ...


def style_to_font(style: TextStyle) -> str:
    return FontDescriptor.from_style(style).css


def _font_candidates(bold: bool) -> tuple[str, ...]:
    if bold:
        return SANS_SERIF_BOLD_FONT_CANDIDATES + SANS_SERIF_FONT_CANDIDATES
    return SANS_SERIF_FONT_CANDIDATES


@lru_cache(maxsize=256)
def _load_font(size_px: float, bold: bool) -> ImageFont.FreeTypeFont:
    for path in _font_candidates(bold):
        if not Path(path).exists():
            continue
        try:
            return ImageFont.truetype(path, size=size_px)
        except OSError:
            continue
    return ImageFont.load_default(size=size_px)


class PillowTextMeasurer:
    """Measure text with Pillow's FreeType bindings.

    Only sans-serif families are resolved; other family names fall back to the
    same candidates. Weight only switches between regular and bold faces.
    """

    def measure(self, text: str, font: FontDescriptor) -> TextMetrics:
        loaded = _load_font(font.size_px, font.weight >= BOLD_WEIGHT)
        if not text:
            return TextMetrics(width=0.0, ascent=0.0, descent=0.0)
        _, top, _, bottom = loaded.getbbox(text, anchor="ls")
        return TextMetrics(
            width=float(loaded.getlength(text)),
            ascent=float(-top),
            descent=float(bottom),
        )


class ThreadSafeTextMeasurer:
    """Serialize measurements for measurers shared across threads."""

    def __init__(self, inner: TextMeasurer) -> None:
        self._inner = inner
        self._lock = Lock()

    def measure(self, text: str, font: FontDescriptor) -> TextMetrics:
        with self._lock:
            return self._inner.measure(text, font)


@lru_cache(maxsize=1)
def _get_default_measurer() -> PillowTextMeasurer:
    return PillowTextMeasurer()

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

BoundingBox = tuple[float, float, float, float, float, float, float, float]
"""Four corner points, flattened: top-left, top-right, bottom-right, bottom-left."""


class OcrWord(BaseModel):
    """Recognized word with its box and optional confidence."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bounding_box: BoundingBox = Field(alias="boundingBox")
    text: str
    confidence: float | None = None


class OcrLine(BaseModel):
    """Recognized line and the words it contains, in reading order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bounding_box: BoundingBox = Field(alias="boundingBox")
    text: str
    words: tuple[OcrWord, ...] = ()


class PageOcr(BaseModel):
    """Read result for a single page image."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    width: float = Field(gt=0)
    height: float = Field(gt=0)
    lines: tuple[OcrLine, ...] = ()
    page: int | None = None
    unit: str | None = None

    def iter_words(self) -> Iterator[tuple[int, OcrLine, OcrWord]]:
        """Yield every word on the page with its owning line and line index."""
        for index, line in enumerate(self.lines):
            for word in line.words:
                yield index, line, word

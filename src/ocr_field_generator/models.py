from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ocr_field_generator.ocr.types import BoundingBox, OcrLine

FieldType = Literal[
    "string",
    "number",
    "date",
    "time",
    "integer",
    "selectionMark",
]
FieldFormat = Literal[
    "not-specified",
    "alphanumeric",
    "no-whitespaces",
    "currency",
    "dmy",
    "mdy",
    "ymd",
]


class FieldTag(BaseModel):
    """Semantic metadata of a field: its name and declared type/format."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: FieldType = "string"
    format: FieldFormat = "not-specified"


class FieldRegion(BaseModel):
    """User-drawn region that synthetic text is generated for.

    ``bbox`` is in OCR image pixels and ``canvasBbox`` is the same rectangle
    in map units. ``ocrLine`` designates a reference OCR line, ``-1`` means
    the text scale is sampled from random lines on the page.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bbox: BoundingBox
    canvas_bbox: BoundingBox = Field(alias="canvasBbox")
    page: int = Field(default=1, ge=1)
    tag: FieldTag = Field(default_factory=FieldTag)
    ocr_line: int = Field(default=-1, alias="ocrLine", ge=-1)


class TextStyle(BaseModel):
    """Rendering attributes of the generated text.

    Text is anchored at the region's visual center; ``offsetX``/``offsetY``
    move the top-left of the text from there, in map units.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = "SAMPLE"
    font_weight: int = Field(default=100, alias="fontWeight")
    font_size: str = Field(default="14px", alias="fontSize")
    line_height: float = Field(default=1.0, alias="lineHeight")
    font_family: str = Field(default="sans-serif", alias="fontFamily")
    align: str = "left"
    baseline: str = "top"
    offset_x: float = Field(default=0.0, alias="offsetX")
    offset_y: float = Field(default=0.0, alias="offsetY")
    placement: str = "point"
    max_angle: float | None = Field(default=None, alias="maxAngle")
    overflow: bool = True
    rotation: float = 0.0
    fill: str = "#000"
    outline_color: str = Field(default="#E00", alias="outlineColor")
    outline_width: float = Field(default=0.0, alias="outlineWidth")

    @property
    def font_size_px(self) -> float:
        return float(self.font_size.removesuffix("px"))


class WordBox(BaseModel):
    """Word box in image pixels and as page percentages."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bounding_box: BoundingBox = Field(alias="boundingBox")
    bounding_box_percentage: BoundingBox = Field(alias="boundingBoxPercentage")
    text: str


class GeneratedBoxes(BaseModel):
    """Region, line and word geometry of one generated sample."""

    model_config = ConfigDict(frozen=True)

    full: BoundingBox
    lines: tuple[OcrLine, ...]
    words: tuple[WordBox, ...]


class GeneratedInfo(BaseModel):
    """Synthetic annotation produced for a single field region."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    text: str
    bounding_boxes: GeneratedBoxes = Field(alias="boundingBoxes")
    style: TextStyle = Field(alias="format")
    page: int


class GeneratorTagInfo(BaseModel):
    """Tag proposal for a newly drawn region."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tag_proposal: FieldTag = Field(default_factory=FieldTag, alias="tagProposal")
    ocr_line: int = Field(default=-1, alias="ocrLine")


class LabelValue(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: int
    text: str
    bounding_boxes: tuple[BoundingBox, ...] = Field(alias="boundingBoxes")


class Label(BaseModel):
    """Label record in the export schema of the labeling tool."""

    model_config = ConfigDict(frozen=True)

    label: str
    key: str | None = None
    value: tuple[LabelValue, ...] = ()

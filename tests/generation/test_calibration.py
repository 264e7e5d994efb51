import random

import pytest

from ocr_field_generator.config import DEFAULT_GENERATOR_CONFIG, NO_JITTER_CONFIG
from ocr_field_generator.generation.calibration import calibrate_font
from ocr_field_generator.generation.common import Randomizer
from ocr_field_generator.generation.models import ScaleEstimate
from ocr_field_generator.models import FieldRegion
from ocr_field_generator.ocr.types import PageOcr

SCALE = ScaleEstimate(map_width_per_char=5.0, map_height_per_char=10.0)


def _no_jitter() -> Randomizer:
    return Randomizer(random.Random(0), jitter_enabled=False)


@pytest.mark.parametrize(
    ("resolution", "expected_size"),
    [
        (1.0, 10),
        (0.5, 20),
        (0.25, 40),
        # Target below the smallest candidate keeps the smallest size.
        (10 / 3, 10),
        # Target above the range keeps the largest candidate.
        (0.01, 99),
    ],
)
def test_font_size_matches_target_height(
    region: FieldRegion,
    page_ocr: PageOcr,
    measurer,
    resolution: float,
    expected_size: int,
) -> None:
    calibration = calibrate_font(
        region,
        SCALE,
        page_ocr,
        resolution,
        measurer=measurer,
        config=NO_JITTER_CONFIG,
        randomizer=_no_jitter(),
    )

    assert calibration.font_size_px == expected_size
    assert calibration.font_size == f"{expected_size}px"
    assert calibration.font_weight == 100
    assert calibration.line_height == 1


def test_designated_line_text_is_the_probe(
    region: FieldRegion,
    page_ocr: PageOcr,
    measurer,
) -> None:
    calibrate_font(
        region,
        SCALE,
        page_ocr,
        1.0,
        measurer=measurer,
        config=NO_JITTER_CONFIG,
        randomizer=_no_jitter(),
    )

    assert {text for text, _ in measurer.calls} == {"Invoice Number"}


def test_sizing_string_is_the_probe_without_a_line(
    region: FieldRegion,
    page_ocr: PageOcr,
    measurer,
) -> None:
    sampled = region.model_copy(update={"ocr_line": -1})

    calibrate_font(
        sampled,
        SCALE,
        page_ocr,
        1.0,
        measurer=measurer,
        config=NO_JITTER_CONFIG,
        randomizer=_no_jitter(),
    )

    assert {text for text, _ in measurer.calls} == {NO_JITTER_CONFIG.sizing_string}


def test_jittered_calibration_stays_in_bounds(
    region: FieldRegion,
    page_ocr: PageOcr,
    measurer,
) -> None:
    for seed in range(20):
        calibration = calibrate_font(
            region,
            SCALE,
            page_ocr,
            1.0,
            measurer=measurer,
            config=DEFAULT_GENERATOR_CONFIG,
            randomizer=Randomizer(random.Random(seed), jitter_enabled=True),
        )

        assert 75 <= calibration.font_weight <= 125
        assert 0.7 <= calibration.line_height <= 1.3
        assert 9 <= calibration.font_size_px <= 11


def test_same_seed_gives_same_calibration(
    region: FieldRegion,
    page_ocr: PageOcr,
    measurer,
) -> None:
    results = [
        calibrate_font(
            region,
            SCALE,
            page_ocr,
            1.0,
            measurer=measurer,
            config=DEFAULT_GENERATOR_CONFIG,
            randomizer=Randomizer(random.Random(42), jitter_enabled=True),
        )
        for _ in range(2)
    ]

    assert results[0] == results[1]

import logging
import random
from collections.abc import Callable
from functools import lru_cache

from rstr import Rstr
from wonderwords import RandomWord

from ocr_field_generator.config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from ocr_field_generator.generation.common import Randomizer, round_half_up
from ocr_field_generator.models import FieldFormat, FieldType

logger = logging.getLogger(__name__)

DAY_PATTERN = "(0[1-9]|[12][0-9]|3[01])"
MONTH_PATTERN = "(0[1-9]|1[012])"
YEAR_PATTERN = r"(19|20)\d\d"
# Shared by every date layout; later groups back-reference the first separator.
DATE_SEPARATOR_PATTERN = "([- /.])"
WORD_CAPITALIZE_PROBABILITY = 0.3
WORD_MIN_LENGTH = 3
WORD_MAX_LENGTH = 10


def generic_pattern(low: int, high: int) -> str:
    """Any printable ASCII character, repeated between low and high times."""
    return f"^[ -~]{{{low},{high}}}$"


def field_pattern(
    field_type: FieldType,
    field_format: FieldFormat,
    low: int,
    high: int,
) -> str:
    """Regular expression describing one line of text for a field.

    Unregistered type/format pairs use the generic bounded pattern.
    ``selectionMark`` fields have no textual form and raise
    ``NotImplementedError``.
    """
    match (field_type, field_format):
        case ("string", "not-specified"):
            return generic_pattern(low, high)
        case ("string", "alphanumeric"):
            return f"^[a-zA-Z ]{{{low},{high}}}$"
        case ("string", "no-whitespaces"):
            return f"^[a-zA-Z0-9]{{{low},{high}}}$"
        case ("number", "not-specified") | ("integer", "not-specified"):
            return rf"^\d{{{low},{high}}}$"
        case ("number", "currency"):
            groups_low = round_half_up(low / 5)
            groups_high = max(groups_low, round_half_up(high / 5))
            return (
                rf"^\$?([1-9][0-9]{{0,2}}(,[0-9]{{3}}){{{groups_low},{groups_high}}}"
                rf"|[0-9]{{{low},{high}}})(\.[0-9][0-9])?$"
            )
        case ("date", "not-specified"):
            return rf"^\d\d{DATE_SEPARATOR_PATTERN}\d\d\1\d{{2,4}}$"
        case ("date", "dmy"):
            return (
                f"^{DAY_PATTERN}{DATE_SEPARATOR_PATTERN}{MONTH_PATTERN}"
                rf"\2{YEAR_PATTERN}$"
            )
        case ("date", "mdy"):
            return (
                f"^{MONTH_PATTERN}{DATE_SEPARATOR_PATTERN}{DAY_PATTERN}"
                rf"\2{YEAR_PATTERN}$"
            )
        case ("date", "ymd"):
            return (
                f"^{YEAR_PATTERN}{DATE_SEPARATOR_PATTERN}{MONTH_PATTERN}"
                rf"\2{DAY_PATTERN}$"
            )
        case ("time", "not-specified"):
            return "^([01][0-9]|2[0-3]):[0-5][0-9]$"
        case ("selectionMark", _):
            raise NotImplementedError("Selection marks have no text to synthesize.")
        case _:
            logger.warning(
                "No pattern for type=%s format=%s; using generic pattern.",
                field_type,
                field_format,
            )
            return generic_pattern(low, high)


@lru_cache(maxsize=16)
def _vocabulary(min_length: int, max_length: int) -> tuple[str, ...]:
    words = RandomWord().filter(
        word_min_length=min_length,
        word_max_length=max_length,
        regex="^[a-z]+$",
    )
    return tuple(sorted(words))


def random_phrase(low: int, high: int, rng: random.Random) -> str:
    """Natural-looking phrase of dictionary words, roughly low..high chars.

    Words are occasionally capitalized. At least one word is always emitted,
    so very small bounds can be exceeded.
    """
    vocabulary = _vocabulary(
        WORD_MIN_LENGTH,
        max(WORD_MIN_LENGTH, min(high, WORD_MAX_LENGTH)),
    )
    target = rng.randint(low, max(low, high))
    words: list[str] = []
    length = 0
    while length < target:
        word = rng.choice(vocabulary)
        if rng.random() < WORD_CAPITALIZE_PROBABILITY:
            word = word.capitalize()
        extended = length + len(word) + (1 if words else 0)
        if words and extended > high:
            break
        words.append(word)
        length = extended
    if not words:
        words.append(rng.choice(vocabulary))
    return " ".join(words)


def _line_generator(
    field_type: FieldType,
    field_format: FieldFormat,
    width_range: tuple[int, int],
    config: GeneratorConfig,
    rng: random.Random,
) -> Callable[[], str]:
    low, high = width_range
    if (
        config.alphanumeric_strategy == "words"
        and (field_type, field_format) == ("string", "alphanumeric")
    ):
        return lambda: random_phrase(low, high, rng)
    pattern = field_pattern(field_type, field_format, low, high)
    xeger = Rstr(rng).xeger
    return lambda: xeger(pattern)


def synthesize(
    field_type: FieldType,
    field_format: FieldFormat,
    width_range: tuple[int, int],
    height_range: tuple[int, int],
    *,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    randomizer: Randomizer | None = None,
) -> str:
    """Generate newline-separated text for a field.

    The line count is drawn from ``[low, high)`` of ``height_range``; each
    line is an independent instance of the field's grammar.
    """
    randomizer = randomizer or Randomizer.from_config(config)
    make_line = _line_generator(
        field_type,
        field_format,
        width_range,
        config,
        randomizer.rng,
    )
    line_count = randomizer.randrange(*height_range)
    logger.debug(
        "Synthesizing %d line(s) for type=%s format=%s width=%s",
        line_count,
        field_type,
        field_format,
        width_range,
    )
    return "\n".join(make_line() for _ in range(line_count))

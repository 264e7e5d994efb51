import math
import random
from dataclasses import dataclass, field

from ocr_field_generator.config import GeneratorConfig


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Randomizer:
    """Random source for one generation call.

    The jitter switch is captured once, when the randomizer is built, so a
    single call never mixes jittered and unjittered parameters.
    """

    rng: random.Random = field(default_factory=random.Random)
    jitter_enabled: bool = True

    @classmethod
    def from_config(
        cls,
        config: GeneratorConfig,
        rng: random.Random | None = None,
    ) -> "Randomizer":
        return cls(
            rng=rng if rng is not None else random.Random(config.seed),
            jitter_enabled=config.jitter,
        )

    def jitter(self, amount: float, *, rounded: bool = False) -> float:
        """Uniform perturbation in ``[-amount, amount]``, zero when disabled."""
        if not self.jitter_enabled:
            return 0
        value = (self.rng.random() * 2 - 1) * amount
        return round_half_up(value) if rounded else value

    def randrange(self, low: int, high: int) -> int:
        """Integer in ``[low, high)``; ``low`` when the range is empty."""
        if high <= low:
            return low
        return self.rng.randrange(low, high)

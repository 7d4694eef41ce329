# ==============================================================================
# Файл: terrain_engine/algorithms/sampling.py
# Назначение: Равномерные выборки и выбор категорий по таблице вероятностей.
# ==============================================================================
from __future__ import annotations
import logging
import math
from typing import List, Sequence

from ..core.constants import DEFAULT_WEIGHT_EPSILON
from ..core.errors import InvalidArgumentError
from ..core.preset.errors import ConfigurationError
from ..core.utils.rng import RNG

logger = logging.getLogger(__name__)


class UniformSampler:
    """Выдаёт наборы независимых равномерных значений в [0, 1]."""

    def __init__(self, rng: RNG):
        self.rng = rng

    def generate(self, count: int) -> List[float]:
        if count < 0:
            raise InvalidArgumentError(f"sample count must be >= 0, got {count}")
        return [self.rng.uniform_closed() for _ in range(count)]


def check_weights(weights: Sequence[float], epsilon: float = DEFAULT_WEIGHT_EPSILON) -> None:
    """
    Проверка таблицы перед выборкой.

    Raises ConfigurationError, если есть отрицательный или не конечный вес, или сумма
    отличается от 1.0 больше чем на epsilon.
    """
    for i, w in enumerate(weights):
        if not math.isfinite(w) or w < 0.0:
            raise ConfigurationError(f"reverse_histogram[{i}] must be finite and >= 0, got {w}")
    total = math.fsum(weights)
    if not abs(total - 1.0) <= epsilon:
        raise ConfigurationError(
            f"reverse_histogram must sum to 1.0 (+-{epsilon}), got {total!r}"
        )


def pick_categories(samples: Sequence[float], weights: Sequence[float]) -> List[int]:
    """
    Переводит равномерные значения в индексы категорий.

    Для каждого r идём по весам по порядку: если r < weights[i], берём i,
    иначе r -= weights[i]. Если веса закончились, для этого r ничего не
    добавляется, поэтому результат может быть короче samples.
    """
    out: List[int] = []
    for r in samples:
        for i, w in enumerate(weights):
            if r < w:
                out.append(i)
                break
            r -= w
    return out


class WeightedSelector:
    def __init__(self, sampler: UniformSampler, strict: bool = False,
                 epsilon: float = DEFAULT_WEIGHT_EPSILON):
        self.sampler = sampler
        self.strict = strict
        self.epsilon = epsilon

    def select(self, count: int, weights: Sequence[float], validate: bool | None = None) -> List[int]:
        strict = self.strict if validate is None else validate
        if strict:
            check_weights(weights, self.epsilon)

        samples = self.sampler.generate(count)
        choices = pick_categories(samples, weights)

        missed = count - len(choices)
        if missed:
            logger.debug(
                "Weighted walk exhausted the table for %d of %d samples (sum=%r)",
                missed, count, math.fsum(weights),
            )
        return choices

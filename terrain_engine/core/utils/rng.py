# terrain_engine/core/utils/rng.py
from __future__ import annotations
import time
from typing import Union

_MASK64 = 0xFFFFFFFFFFFFFFFF
# 53 бита мантиссы double
_UNIT_OPEN = 1.0 / (1 << 53)
_MAX53 = (1 << 53) - 1


def _splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & _MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & _MASK64
    return z ^ (z >> 31)


def seed_from_any(x: Union[int, str, bytes]) -> int:
    if isinstance(x, bool):
        raise TypeError("Unsupported seed type")
    if isinstance(x, int):
        return x & _MASK64
    if isinstance(x, bytes):
        acc = 0xcbf29ce484222325
        for b in x:
            acc ^= b
            acc = (acc * 0x100000001B3) & _MASK64
        return acc
    if isinstance(x, str):
        return seed_from_any(x.encode('utf-8'))
    raise TypeError("Unsupported seed type")


def seed_from_time() -> int:
    """Сид по текущему времени (секунды)."""
    return int(time.time()) & _MASK64


class RNG:
    """
    Явный генератор вместо глобального состояния.
    Каждый владелец (генератор террейна, тест) держит свой экземпляр.
    """
    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = seed & _MASK64

    def u64(self) -> int:
        self.state = _splitmix64(self.state)
        return self.state

    def u32(self) -> int:
        return self.u64() >> 32

    def uniform(self) -> float:
        # [0, 1)
        return (self.u64() >> 11) * _UNIT_OPEN

    def uniform_closed(self) -> float:
        # [0, 1] включая обе границы
        return (self.u64() >> 11) / _MAX53

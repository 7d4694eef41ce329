# ==============================================================================
# Файл: terrain_engine/core/constants.py
# Назначение: Константы проекта (категории тайлов, раскладка атласа,
#             встроенная таблица вероятностей).
# ==============================================================================
from __future__ import annotations
from typing import Dict, Tuple

# =======================================================================
# КАТЕГОРИИ ТАЙЛОВ
# =======================================================================
KIND_GRASS = "grass"
KIND_HIGH_GRASS = "high_grass"
KIND_BLUE_FLOWER = "blue_flower"
KIND_YELLOW_FLOWER = "yellow_flower"
KIND_PURPLE_FLOWER = "purple_flower"

# =======================================================================
# РАСКЛАДКА АТЛАСА (tileset.png)
# =======================================================================
# Клетки атласа (col, row) для каждой категории 0..13. Умножаются на размер
# тайла атласа, чтобы получить левый верхний пиксель.
#
# Физическая раскладка картинки:
#   row 0: [0] [1] [2] [3] [4]   <- трава и высокая трава
#   row 1: [6] [7] [8]           <- голубые цветы
#   row 2: [9] [A] [B]           <- жёлтые цветы ([9] - розовый цветок)
#   row 3: [C] [D]               <- фиолетовые цветы
# Категория 5 указывает на ту же клетку, что и 2 (col 2, row 0).
#
# Таблица совпадает с формулой в закрытом виде:
#   i < 5:  (i * TS, 0)
#   иначе:  (((i + 3) * TS) % (3 * TS), (i // 3) * TS - TS)
ATLAS_CELLS: Tuple[Tuple[int, int], ...] = (
    (0, 0), (1, 0), (2, 0), (3, 0), (4, 0),
    (2, 0),
    (0, 1), (1, 1), (2, 1),
    (0, 2), (1, 2), (2, 2),
    (0, 3), (1, 3),
)
ATLAS_CAPACITY = len(ATLAS_CELLS)

CATEGORY_TO_KIND: Dict[int, str] = {
    0: KIND_GRASS,
    1: KIND_HIGH_GRASS,
    2: KIND_HIGH_GRASS,
    3: KIND_HIGH_GRASS,
    4: KIND_HIGH_GRASS,
    5: KIND_HIGH_GRASS,
    6: KIND_BLUE_FLOWER,
    7: KIND_BLUE_FLOWER,
    8: KIND_BLUE_FLOWER,
    9: KIND_YELLOW_FLOWER,
    10: KIND_YELLOW_FLOWER,
    11: KIND_YELLOW_FLOWER,
    12: KIND_PURPLE_FLOWER,
    13: KIND_PURPLE_FLOWER,
}

# =======================================================================
# ВСТРОЕННАЯ ТАБЛИЦА ВЕРОЯТНОСТЕЙ ("reverse histogram")
# =======================================================================
# Сумма должна быть 1.0 в пределах погрешности float.
DEFAULT_REVERSE_HISTOGRAM: Tuple[float, ...] = (
    0.76875,   # обычная трава (0,0)
    0.025,     # высокая трава
    0.025,
    0.025,
    0.025,
    0.025,
    0.003125,  # голубой цветок
    0.003125,
    0.025,
    0.0125,
    0.0125,
    0.025,
    0.0125,
    0.0125,
)

DEFAULT_WEIGHT_EPSILON = 1e-6

# ==============================================================================
# Файл: terrain_engine/world/layout.py
# Назначение: Куда рисовать каждый регион снапшота (центрированная сетка).
#             Используется и окном pygame, и экспортом превью.
# ==============================================================================
from __future__ import annotations
from typing import List, Tuple


def grid_origin(
        screen_width: int, screen_height: int,
        grid_width: int, grid_height: int,
        draw_tile_width: int, draw_tile_height: int,
) -> Tuple[int, int]:
    """Левый верхний угол сетки, отцентрированной на экране."""
    return (
        screen_width // 2 - (grid_width * draw_tile_width) // 2,
        screen_height // 2 - (grid_height * draw_tile_height) // 2,
    )


def grid_destinations(
        count: int,
        screen_width: int, screen_height: int,
        grid_width: int, grid_height: int,
        draw_tile_width: int, draw_tile_height: int,
) -> List[Tuple[int, int]]:
    """
    Позиции на экране для первых count регионов.

    Для региона i:
        x = (i * draw_w) % (draw_w * grid_w) + origin_x
        y = (i // grid_h) * draw_h + origin_y
    Строка считается делением на высоту сетки;
    для квадратной сетки это то же самое, что деление на ширину.
    """
    ox, oy = grid_origin(
        screen_width, screen_height, grid_width, grid_height, draw_tile_width, draw_tile_height
    )
    row_span = draw_tile_width * grid_width
    return [
        ((i * draw_tile_width) % row_span + ox, (i // grid_height) * draw_tile_height + oy)
        for i in range(count)
    ]

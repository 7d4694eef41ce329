# tile_viewer/controls.py
from __future__ import annotations
from typing import Optional

import pygame

SIGNAL_EXIT = "exit"
SIGNAL_REGENERATE = "regenerate"
SIGNAL_EXPORT = "export"

KEY_SIGNALS = {
    pygame.K_ESCAPE: SIGNAL_EXIT,
    pygame.K_r: SIGNAL_REGENERATE,
    pygame.K_F12: SIGNAL_EXPORT,
}


def signal_for_event(event: pygame.event.Event) -> Optional[str]:
    """Переводит событие pygame в сигнал для главного цикла (или None)."""
    if event.type == pygame.QUIT:
        return SIGNAL_EXIT
    if event.type == pygame.KEYDOWN:
        return KEY_SIGNALS.get(event.key)
    return None

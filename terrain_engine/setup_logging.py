import logging
import sys
from pathlib import Path


def setup_logging(level: int = logging.INFO, log_dir: str | Path = "logs") -> None:
    """
    Настраивает глобальный логгер для приложения.
    - Устанавливает формат сообщений.
    - Выводит логи в консоль (stdout).
    - Сохраняет логи в файл logs/tile_viewer.log.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tile_viewer.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, mode="w", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # убирает старые хендлеры, чтобы не было дублей
    )

    logging.getLogger("terrain_engine").setLevel(level)
    logging.getLogger("tile_viewer").setLevel(level)
    logging.getLogger("PIL").setLevel(logging.WARNING)

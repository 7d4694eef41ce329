# tile_viewer/config.py
import pathlib

# --- Пути ---
PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent
ASSETS_ROOT = PROJECT_ROOT / "assets"
ARTIFACTS_ROOT = PROJECT_ROOT / "artifacts"
LOG_DIR = PROJECT_ROOT / "logs"
PRESET_ID = "terrain/grassland_default"

# --- Цвета ---
BACKGROUND_COLOR = (0, 0, 0)
STATUS_TEXT_COLOR = (255, 255, 255)

# Сколько держать баннер фатальной ошибки перед выходом (мс)
FATAL_ERROR_WAIT_MS = 5000

# ========================
# file: terrain_engine/core/preset/errors.py
# ========================
class PresetError(Exception):
    """Base error for preset system."""


class ValidationError(PresetError):
    """Raised when a preset fails validation."""


class ConfigurationError(ValidationError):
    """Raised when the reverse histogram does not sum to 1.0 within epsilon."""


class NotFoundError(PresetError):
    """Raised when a preset id or path cannot be resolved."""

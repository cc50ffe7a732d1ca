"""
Presentation preferences: selected template and theme color.

Both are stored as plain strings under their own keys. Anything absent or
unrecognized falls back to the default instead of raising.
"""

import re
from enum import Enum

from vitae.contexts.persistence.logger import log_preference_fallback
from vitae.contexts.persistence.store import KeyValueStore

TEMPLATE_KEY = "resumeTemplate"
COLOR_KEY = "resumeThemeColor"


class TemplateName(str, Enum):
    CLASSIC = "classic"
    MODERN = "modern"
    MINIMAL = "minimal"


DEFAULT_TEMPLATE = TemplateName.CLASSIC

# Named palette offered by the builder
THEME_COLORS = {
    "teal": "#0d9488",
    "navy": "#234a97",
    "burgundy": "#8f1e40",
    "forest": "#1b7340",
    "charcoal": "#404040",
}
DEFAULT_THEME_COLOR = THEME_COLORS["teal"]

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_hex_color(value: str) -> bool:
    """True for "#rgb" or "#rrggbb"."""
    return isinstance(value, str) and bool(HEX_COLOR_PATTERN.match(value))


class PreferencesRepository:
    """Reads and writes template/theme preferences in a key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load_template(self) -> TemplateName:
        raw = self.store.get(TEMPLATE_KEY)
        try:
            return TemplateName(raw)
        except ValueError:
            log_preference_fallback(TEMPLATE_KEY, raw, DEFAULT_TEMPLATE.value)
            return DEFAULT_TEMPLATE

    def save_template(self, template: str) -> TemplateName:
        """
        Persist the template choice.

        Raises:
            ValueError: If template is not one of the known template names
        """
        name = TemplateName(template)
        self.store.set(TEMPLATE_KEY, name.value)
        return name

    def load_theme_color(self) -> str:
        raw = self.store.get(COLOR_KEY)
        if raw is not None and is_hex_color(raw):
            return raw
        log_preference_fallback(COLOR_KEY, raw, DEFAULT_THEME_COLOR)
        return DEFAULT_THEME_COLOR

    def save_theme_color(self, color: str) -> str:
        """
        Persist the theme color.

        Args:
            color: Hex color ("#0d9488") or a palette name ("navy")

        Raises:
            ValueError: If color is neither a hex color nor a palette name
        """
        color = THEME_COLORS.get(color, color)
        if not is_hex_color(color):
            raise ValueError(f"Not a hex color or palette name: {color!r}")
        self.store.set(COLOR_KEY, color)
        return color

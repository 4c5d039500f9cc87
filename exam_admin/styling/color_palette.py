"""Light and dark colors for the exam admin console."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from exam_admin.core.models import ScoreTier


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """One color in both themes."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Named colors; widgets never hard-code hex values."""

    TEXT_PRIMARY = ThemeColors("#1B1B1B", "#F0F0F0")
    TEXT_SECONDARY = ThemeColors("#5F5F5F", "#A8A8A8")

    BACKGROUND_PRIMARY = ThemeColors("#FFFFFF", "#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors("#F4F6F8", "#2A2D31")
    BORDER_PRIMARY = ThemeColors("#D0D4D9", "#4A4F55")

    BUTTON_PRIMARY_BG = ThemeColors("#2563EB", "#5B8DEF")
    BUTTON_PRIMARY_TEXT = ThemeColors("#FFFFFF", "#0B0B0B")
    BUTTON_SECONDARY_BG = ThemeColors("#EEF0F3", "#34383D")
    BUTTON_HOVER_BG = ThemeColors("#E1E5EA", "#43484E")

    # Notices, tab-switch flags and score tiers
    SUCCESS = ThemeColors("#15803D", "#6FCF8A")
    WARNING = ThemeColors("#B07D00", "#FFC83D")
    ERROR = ThemeColors("#C62828", "#FF6B6B")

    # Row behind the correct option on a question card
    CORRECT_OPTION_BG = ThemeColors("#DCFCE7", "#1F3D29")


_TIER_COLORS = {
    ScoreTier.HIGH: ColorPalette.SUCCESS,
    ScoreTier.MEDIUM: ColorPalette.WARNING,
    ScoreTier.LOW: ColorPalette.ERROR,
}


def tier_color(tier: ScoreTier, theme: Theme = Theme.LIGHT) -> str:
    """Text color for a score in the given tier."""
    return _TIER_COLORS[tier].get(theme)

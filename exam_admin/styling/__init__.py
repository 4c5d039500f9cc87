"""Styling module for the exam admin console."""

from .color_palette import ColorPalette, Theme, tier_color

__all__ = ["ColorPalette", "Theme", "tier_color"]

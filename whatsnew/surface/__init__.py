"""Changelog surface composition and text painting."""

from whatsnew.surface.core import ChangelogSurface, open_changelog, paint_text
from whatsnew.surface.models import OPEN_APPEARANCE, Appearance

__all__ = ["ChangelogSurface", "open_changelog", "paint_text", "Appearance", "OPEN_APPEARANCE"]

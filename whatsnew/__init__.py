"""Main entrypoint. Exposes the public API."""

from whatsnew.blocks import BlockType, RenderedBlocks, render
from whatsnew.dismissal import DismissalController, DismissalState
from whatsnew.surface import ChangelogSurface, open_changelog, paint_text

__all__ = [
    "render",
    "RenderedBlocks",
    "BlockType",
    "DismissalController",
    "DismissalState",
    "ChangelogSurface",
    "open_changelog",
    "paint_text",
]

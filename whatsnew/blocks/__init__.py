"""Render release-note text into typed blocks."""

from whatsnew.blocks.core import ListBuffer, render, split_spans
from whatsnew.blocks.models import (
    BlockNode,
    BlockType,
    EmphasizedSpan,
    Heading,
    InlineSpan,
    ListBlock,
    ListItem,
    Paragraph,
    PlainSpan,
    RenderedBlocks,
    Separator,
    SpanType,
)

__all__ = [
    "render",
    "split_spans",
    "ListBuffer",
    "BlockNode",
    "BlockType",
    "Heading",
    "Separator",
    "ListBlock",
    "Paragraph",
    "ListItem",
    "InlineSpan",
    "PlainSpan",
    "EmphasizedSpan",
    "SpanType",
    "RenderedBlocks",
]

"""Core line-oriented changelog renderer."""

import re

from whatsnew.blocks.models import (
    BlockNode,
    EmphasizedSpan,
    Heading,
    InlineSpan,
    ListBlock,
    ListItem,
    Paragraph,
    PlainSpan,
    RenderedBlocks,
    Separator,
)
from whatsnew.common.utils.config import get_config
from whatsnew.common.utils.logger import get_logger

logger = get_logger(__name__)

# A BOM counts as edge whitespace; the C0 information separators and NEL do not
_EDGE_SPACE = re.compile(r"^(?:[^\S\x1c-\x1f\x85]|\ufeff)+|(?:[^\S\x1c-\x1f\x85]|\ufeff)+\Z")


def trim(line: str) -> str:
    """Strip edge whitespace from a line before it is classified."""
    return _EDGE_SPACE.sub("", line)


def _emphasis_pattern(delimiter: str) -> re.Pattern[str]:
    d = re.escape(delimiter)
    # non-greedy, so pairs are matched left to right
    return re.compile(f"{d}(.*?){d}", re.DOTALL)


def split_spans(text: str) -> list[InlineSpan]:
    """Split list item text into plain and emphasized spans.

    Text between a pair of emphasis delimiters becomes an `EmphasizedSpan`.
    A delimiter without a partner is kept as literal plain text. Empty plain
    segments are dropped; an empty delimited pair is kept as an empty
    `EmphasizedSpan` so the item can be written back unchanged.
    """
    pattern = _emphasis_pattern(get_config().emphasis_delimiter)
    spans: list[InlineSpan] = []
    # re.split with one capture group alternates outside/inside segments
    for idx, part in enumerate(pattern.split(text)):
        if idx % 2:
            spans.append(EmphasizedSpan(text=part))
        elif part:
            spans.append(PlainSpan(text=part))
    return spans


class ListBuffer:
    """Accumulates consecutive list items until something terminates the list."""

    def __init__(self):
        self.items: list[ListItem] = []

    def __bool__(self) -> bool:
        return bool(self.items)

    def add(self, item: ListItem) -> None:
        self.items.append(item)

    def flush(self, into: list[BlockNode]) -> None:
        """Append the buffered items to `into` as one ListBlock, then clear."""
        if not self.items:
            return
        into.append(ListBlock(items=self.items))
        self.items = []


def render(text: str) -> RenderedBlocks:
    """Render changelog text into an ordered sequence of blocks.

    Lines are trimmed, then classified in priority order: blank, heading,
    list item, paragraph. Never raises for string input; callers are expected
    to skip rendering entirely when there is no text.
    """
    cfg = get_config()
    blocks: list[BlockNode] = []
    buffer = ListBuffer()

    lines = text.split("\n")
    for line in lines:
        trimmed = trim(line)

        if not trimmed:
            buffer.flush(blocks)
            continue

        if trimmed.startswith(cfg.heading_marker):
            buffer.flush(blocks)
            # Only separate from something that came before
            if blocks:
                blocks.append(Separator())
            blocks.append(Heading(text=trimmed[len(cfg.heading_marker) :]))
            continue

        if trimmed.startswith(cfg.list_marker):
            buffer.add(ListItem(spans=split_spans(trimmed[len(cfg.list_marker) :])))
            continue

        buffer.flush(blocks)
        blocks.append(Paragraph(text=trimmed))

    buffer.flush(blocks)

    logger.debug("Rendered %d blocks from %d lines", len(blocks), len(lines))
    return RenderedBlocks(blocks=blocks)

"""Block and span models produced by the changelog renderer."""

from collections.abc import Iterator
from enum import Enum
from functools import cached_property
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, Field

from whatsnew.common.utils.config import get_config


class BlockType(Enum):
    HEADING = "heading"
    SEPARATOR = "separator"
    LIST = "list"
    PARAGRAPH = "paragraph"


class SpanType(Enum):
    PLAIN = "plain"
    EMPHASIZED = "emphasized"


class PlainSpan(BaseModel):
    """A run of unstyled text inside a list item."""

    type: Literal[SpanType.PLAIN] = SpanType.PLAIN
    text: str

    model_config = {"frozen": True}


class EmphasizedSpan(BaseModel):
    """A run of bold text inside a list item."""

    type: Literal[SpanType.EMPHASIZED] = SpanType.EMPHASIZED
    text: str

    model_config = {"frozen": True}


InlineSpan: TypeAlias = Annotated[PlainSpan | EmphasizedSpan, Field(discriminator="type")]


class ListItem(BaseModel):
    spans: list[InlineSpan]

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        """Get concatenated text from all spans."""
        return "".join(span.text for span in self.spans)


class Heading(BaseModel):
    type: Literal[BlockType.HEADING] = BlockType.HEADING
    text: str

    model_config = {"frozen": True}


class Separator(BaseModel):
    type: Literal[BlockType.SEPARATOR] = BlockType.SEPARATOR

    model_config = {"frozen": True}


class ListBlock(BaseModel):
    type: Literal[BlockType.LIST] = BlockType.LIST
    items: list[ListItem]  # consecutive list lines, in source order

    model_config = {"frozen": True}


class Paragraph(BaseModel):
    type: Literal[BlockType.PARAGRAPH] = BlockType.PARAGRAPH
    text: str

    model_config = {"frozen": True}


BlockNode: TypeAlias = Annotated[Heading | Separator | ListBlock | Paragraph, Field(discriminator="type")]


class RenderedBlocks(BaseModel):
    """Blocks rendered from one changelog body.

    A: Iterate directly over blocks

    B: access json representation via .json property

    C: access markdown representation via .markdown property
    """

    blocks: list[BlockNode]

    model_config = {"frozen": True}

    def __getitem__(self, index: int) -> BlockNode:
        return self.blocks[index]

    def __iter__(self) -> Iterator[BlockNode]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @staticmethod
    def _format_spans(spans: list[InlineSpan]) -> str:
        delimiter = get_config().emphasis_delimiter
        parts: list[str] = []
        for span in spans:
            match span:
                case EmphasizedSpan():
                    parts.append(f"{delimiter}{span.text}{delimiter}")
                case PlainSpan():
                    parts.append(span.text)
        return "".join(parts)

    @cached_property
    def json(self) -> str:  # pyright: ignore[reportIncompatibleMethodOverride]
        return self.model_dump_json()

    @cached_property
    def markdown(self) -> str:
        cfg = get_config()
        chunks: list[str] = []
        for block in self.blocks:
            match block:
                case Heading():
                    chunks.append(f"{cfg.heading_marker}{block.text}\n")
                case ListBlock():
                    items = "".join(f"{cfg.list_marker}{self._format_spans(item.spans)}\n" for item in block.items)
                    chunks.append(items)
                case Paragraph():
                    chunks.append(f"{block.text}\n")
                case Separator():
                    # implied by the heading that follows it
                    pass

        return "\n".join(chunks)

"""The "What's New" surface: rendered changelog plus its dismissal lifecycle."""

from typing import Callable

from whatsnew.blocks import (
    EmphasizedSpan,
    Heading,
    InlineSpan,
    ListBlock,
    Paragraph,
    RenderedBlocks,
    Separator,
    render,
)
from whatsnew.common.utils.config import get_config
from whatsnew.common.utils.logger import get_logger
from whatsnew.dismissal import DismissalController, DismissalState
from whatsnew.surface.models import OPEN_APPEARANCE, Appearance

logger = get_logger(__name__)

RULE = "-" * 40
CHECK = "✓"


class ChangelogSurface:
    """A mounted changelog panel.

    Built by `open_changelog`; the host paints `blocks`, binds `appearance`,
    calls `close()` from its close control and `transition_finished()` when
    the exit transition ends.
    """

    def __init__(self, blocks: RenderedBlocks, version: str | None, on_close: Callable[[], None]):
        cfg = get_config()
        self.blocks = blocks
        self.title = cfg.title
        self.close_label = cfg.close_label
        self.version_label = f"v{version or cfg.default_version}"
        self.transition_ms = cfg.transition_ms
        self.controller = DismissalController(on_close)

    @property
    def state(self) -> DismissalState:
        return self.controller.state

    @property
    def appearance(self) -> Appearance:
        if self.controller.is_closing:
            cfg = get_config()
            return Appearance(opacity=cfg.closing_opacity, scale=cfg.closing_scale)
        return OPEN_APPEARANCE

    def close(self) -> None:
        self.controller.request_close()

    def transition_finished(self) -> None:
        self.controller.on_transition_finished()


def open_changelog(
    changelog: str | None,
    version: str | None,
    on_close: Callable[[], None],
) -> ChangelogSurface | None:
    """Build a surface for `changelog`, or None when there is nothing to show."""
    if not changelog:
        logger.debug("No changelog body, skipping surface")
        return None

    return ChangelogSurface(render(changelog), version, on_close)


def _paint_spans(spans: list[InlineSpan]) -> str:
    return "".join(f"*{span.text}*" if isinstance(span, EmphasizedSpan) else span.text for span in spans)


def paint_text(surface: ChangelogSurface) -> str:
    """Paint a surface as plain text for terminals and logs."""
    lines = [f"{surface.title}  {surface.version_label}", RULE]

    for block in surface.blocks:
        match block:
            case Separator():
                lines.append(RULE)
            case Heading():
                lines.append(block.text.upper())
            case ListBlock():
                lines.extend(f"  {CHECK} {_paint_spans(item.spans)}" for item in block.items)
            case Paragraph():
                lines.append(block.text)

    return "\n".join(lines) + "\n"

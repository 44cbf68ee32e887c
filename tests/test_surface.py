import pytest

from whatsnew.blocks import Heading
from whatsnew.common.utils.config import get_config, set_config
from whatsnew.dismissal import DismissalState
from whatsnew.surface import OPEN_APPEARANCE, Appearance, open_changelog, paint_text


@pytest.mark.parametrize("body", [None, ""])
def test_no_changelog_skips_surface(body) -> None:
    assert open_changelog(body, "1.2.0", lambda: None) is None


def test_surface_labels(changelog: str) -> None:
    surface = open_changelog(changelog, "1.2.0", lambda: None)

    assert surface is not None
    assert surface.title == "What's New"
    assert surface.close_label == "Close changelog"
    assert surface.version_label == "v1.2.0"
    assert surface.transition_ms == 150
    assert surface.blocks[0] == Heading(text="Features")


@pytest.mark.parametrize("version", [None, ""])
def test_missing_version_uses_placeholder(changelog: str, version) -> None:
    surface = open_changelog(changelog, version, lambda: None)
    assert surface is not None
    assert surface.version_label == "v0.0.0"


def test_version_is_not_validated(changelog: str) -> None:
    surface = open_changelog(changelog, "next-nightly", lambda: None)
    assert surface is not None
    assert surface.version_label == "vnext-nightly"


def test_close_lifecycle(changelog: str) -> None:
    removed = []
    surface = open_changelog(changelog, "1.0.0", lambda: removed.append(True))
    assert surface is not None

    assert surface.appearance == OPEN_APPEARANCE
    surface.transition_finished()
    assert removed == []

    surface.close()
    assert surface.state is DismissalState.CLOSING
    assert surface.appearance == Appearance(opacity=0.0, scale=0.95)
    assert removed == []

    surface.transition_finished()
    surface.transition_finished()
    assert removed == [True]


def test_closing_appearance_follows_config(changelog: str) -> None:
    set_config(get_config().model_copy(update={"closing_opacity": 0.5, "closing_scale": 0.8}))
    surface = open_changelog(changelog, None, lambda: None)
    assert surface is not None

    surface.close()
    assert surface.appearance == Appearance(opacity=0.5, scale=0.8)


def test_paint_text(changelog: str) -> None:
    surface = open_changelog(changelog, "2.0.0", lambda: None)
    assert surface is not None

    rule = "-" * 40
    assert paint_text(surface) == "\n".join(
        [
            "What's New  v2.0.0",
            rule,
            "FEATURES",
            "  ✓ a",
            "  ✓ *b* and c",
            rule,
            "FIXES",
            "  ✓ d",
        ]
    ) + "\n"


def test_paint_text_paragraphs() -> None:
    surface = open_changelog("Thanks for updating!", None, lambda: None)
    assert surface is not None
    assert paint_text(surface).splitlines()[-1] == "Thanks for updating!"

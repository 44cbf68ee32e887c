import pytest

from whatsnew.dismissal import DismissalController, DismissalState


class CloseRecorder:
    def __init__(self):
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def on_close() -> CloseRecorder:
    return CloseRecorder()


def test_starts_open(on_close: CloseRecorder) -> None:
    controller = DismissalController(on_close)
    assert controller.state is DismissalState.OPEN
    assert not controller.is_closing
    assert not controller.removed


def test_transition_end_while_open_is_ignored(on_close: CloseRecorder) -> None:
    """A transition unrelated to closing must not unmount the surface."""
    controller = DismissalController(on_close)

    controller.on_transition_finished()
    controller.on_transition_finished()

    assert on_close.calls == 0
    assert controller.state is DismissalState.OPEN
    assert not controller.removed


def test_close_waits_for_transition(on_close: CloseRecorder) -> None:
    controller = DismissalController(on_close)

    controller.request_close()
    assert controller.state is DismissalState.CLOSING
    assert on_close.calls == 0

    controller.on_transition_finished()
    assert on_close.calls == 1
    assert controller.removed


def test_repeated_close_requests_notify_once(on_close: CloseRecorder) -> None:
    controller = DismissalController(on_close)

    controller.request_close()
    controller.request_close()
    controller.on_transition_finished()

    assert on_close.calls == 1


def test_repeated_transition_ends_notify_once(on_close: CloseRecorder) -> None:
    controller = DismissalController(on_close)

    controller.on_transition_finished()
    controller.request_close()
    controller.on_transition_finished()
    controller.on_transition_finished()
    controller.request_close()

    assert on_close.calls == 1
    assert controller.state is DismissalState.CLOSING


def test_raising_callback_is_not_retried() -> None:
    calls = []

    def on_close() -> None:
        calls.append(1)
        raise RuntimeError("host failed to unmount")

    controller = DismissalController(on_close)
    controller.request_close()

    with pytest.raises(RuntimeError):
        controller.on_transition_finished()

    controller.on_transition_finished()
    assert len(calls) == 1
    assert controller.removed


def test_rejects_non_callable() -> None:
    with pytest.raises(TypeError):
        DismissalController("not a callback")  # type: ignore[arg-type]

from __future__ import annotations

from typing import List

from wrap_buffer.adapters.textual import TextualBufferAdapter, TextualUIHooks
from wrap_buffer.buffer import BufferSync, TextBuffer
from wrap_buffer.session import RenderRequest, SessionState


def make_adapter(
    views: List[RenderRequest],
    titles: List[str] | None = None,
    logs: List[str] | None = None,
    *,
    text: str = "",
) -> TextualBufferAdapter:
    hooks = TextualUIHooks(
        update_view=views.append,
        update_title=(titles.append if titles is not None else lambda _: None),
        log=(logs.append if logs is not None else lambda _: None),
    )
    state = SessionState(buffer=TextBuffer.from_text(text))
    return TextualBufferAdapter(state, hooks)


def test_adapter_waits_for_width_before_drawing() -> None:
    views: List[RenderRequest] = []
    adapter = make_adapter(views)

    adapter.handle_textual_key("h", text="h")
    assert views == []

    adapter.resize(10)
    assert views[-1].rows == ("h",)


def test_adapter_updates_view_and_title() -> None:
    views: List[RenderRequest] = []
    titles: List[str] = []
    adapter = make_adapter(views, titles)
    adapter.resize(10)

    adapter.handle_textual_key("h", text="h")
    adapter.handle_textual_key("i", text="i")
    adapter.handle_textual_key("left")

    assert views[-1].rows == ("hi",)
    assert views[-1].cursor == (1, 0)
    assert titles[-1] == "(1, 0)"


def test_adapter_handles_enter_and_vertical_motion() -> None:
    views: List[RenderRequest] = []
    adapter = make_adapter(views, text="abc")
    adapter.resize(10)

    adapter.handle_textual_key("enter")
    adapter.handle_textual_key("x", text="x")
    adapter.handle_textual_key("up")

    assert adapter.state.buffer.text == "abc\nx"
    assert views[-1].cursor == (1, 0)
    assert adapter.state.buffer.cursor == 1


def test_adapter_ignores_unbound_keys() -> None:
    views: List[RenderRequest] = []
    adapter = make_adapter(views)
    adapter.resize(10)

    assert adapter.handle_textual_key("f5") is None
    assert len(views) == 1


def test_escape_terminates_session() -> None:
    views: List[RenderRequest] = []
    adapter = make_adapter(views, text="done")
    adapter.resize(10)

    result = adapter.handle_textual_key("escape")

    assert result is not None
    assert result.render is None
    assert adapter.running is False


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter([], logs=logs)

    adapter.handle_textual_key("a", text="a")

    assert any(line.startswith("key ->") for line in logs)
    assert any("command='InsertChar'" in line for line in logs)


def test_broken_log_hook_does_not_block_keys() -> None:
    def explode(_line: str) -> None:
        raise RuntimeError("log sink down")

    hooks = TextualUIHooks(update_view=lambda _: None, log=explode)
    adapter = TextualBufferAdapter(SessionState(buffer=TextBuffer()), hooks)

    adapter.handle_textual_key("a", text="a")

    assert adapter.state.buffer.text == "a"


def test_adapter_satisfies_buffer_sync() -> None:
    adapter = make_adapter([], text="abc")
    adapter.resize(7)

    sync: BufferSync = adapter
    mirror = sync.pull_buffer()

    assert (mirror.text, mirror.cursor) == ("abc", 3)
    assert mirror.attributes == {"width": "7"}

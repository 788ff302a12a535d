"""Executable Textual app hosting a single bordered input buffer."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use wrap_buffer.adapters.textual.app"
    ) from exc

from wrap_buffer.buffer import TextBuffer
from wrap_buffer.config import BufferConfig, VerticalMotion
from wrap_buffer.runtime import telemetry
from wrap_buffer.session import RenderRequest, SessionState

from .controller import TextualBufferAdapter, TextualUIHooks

BORDER_COLUMNS = 2


def render_text(request: RenderRequest) -> Text:
    """Visual rows as rich text with the caret cell in reverse video."""

    x, y = request.cursor
    text = Text()
    for row, line in enumerate(request.rows):
        if row:
            text.append("\n")
        if row != y:
            text.append(line)
            continue
        text.append(line[:x])
        text.append(line[x : x + 1] or " ", style="reverse")
        text.append(line[x + 1 :])
    return text


class WrapBufferApp(App[str]):
    """Full-screen input box; Escape leaves and returns the typed text."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-area {
		height: 1fr;
		border: round $accent;
		padding: 0 0;
		content-align: left top;
	}
	"""

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+q", "quit", "Quit"),
        # Screen-level focus and dismiss bindings would otherwise eat these.
        Binding("tab", "forward_key('tab')", show=False, priority=True),
        Binding("escape", "forward_key('escape')", show=False, priority=True),
    ]

    def __init__(self, *, config: Optional[BufferConfig] = None) -> None:
        super().__init__()
        self._config = config or BufferConfig.from_env()
        self.adapter: TextualBufferAdapter | None = None
        self._view: Static | None = None
        self.logger = telemetry.get_logger("wrap_buffer.adapters.textual")

    def compose(self) -> ComposeResult:
        self._view = Static("", id="text-area")
        yield self._view

    def on_mount(self) -> None:
        state = SessionState(buffer=TextBuffer(name="input", config=self._config))
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_title=self._update_title,
            log=self.logger.debug,
        )
        self.adapter = TextualBufferAdapter(state, hooks)
        self._apply_width(self.size.width)

    def on_resize(self, event: events.Resize) -> None:
        self._apply_width(event.size.width)

    def on_key(self, event: events.Key) -> None:
        if event.key in {"ctrl+c", "ctrl+q"}:
            return
        self._dispatch_key(event.key, event.character)
        event.stop()

    def action_forward_key(self, key: str) -> None:
        self._dispatch_key(key, None)

    def _dispatch_key(self, key: str, character: Optional[str]) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(key, text=character)
        if not self.adapter.running:
            self.exit(self.adapter.state.buffer.text)

    def _apply_width(self, total_width: int) -> None:
        if not self.adapter:
            return
        width = total_width - BORDER_COLUMNS
        if width < 1:
            return
        self.adapter.resize(width)

    def _update_view(self, request: RenderRequest) -> None:
        if self._view:
            self._view.update(render_text(request))

    def _update_title(self, title: str) -> None:
        if self._view:
            self._view.border_title = title


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = BufferConfig.from_env()
    parser = argparse.ArgumentParser(description="Run the wrap-aware input box.")
    parser.add_argument(
        "--tab-width",
        type=_positive_int,
        default=defaults.tab_width,
        help="Columns a tab advances to (default: 1, env WRAP_BUFFER_TAB_WIDTH)",
    )
    parser.add_argument(
        "--vertical-motion",
        choices=[motion.value for motion in VerticalMotion],
        default=defaults.vertical_motion.value,
        help="Up/Down behaviour: keep the column or jump to row starts",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset to apply before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> Optional[str]:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    config = BufferConfig(
        tab_width=args.tab_width,
        vertical_motion=VerticalMotion(args.vertical_motion),
    )
    return WrapBufferApp(config=config).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()

"""Textual adapter that feeds key events through the session reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from wrap_buffer.buffer import BufferMirror
from wrap_buffer.keymaps import KeyInput, KeymapRegistry, load_default_keymaps
from wrap_buffer.session import (
    Command,
    RenderRequest,
    Resize,
    SessionState,
    UpdateResult,
    render_request,
    update,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[RenderRequest], None]
    update_title: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualBufferAdapter:
    """Owns the session state and pushes each redraw to the host hooks."""

    def __init__(
        self,
        state: SessionState,
        hooks: TextualUIHooks,
        *,
        registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.state = state
        self.hooks = hooks
        self.registry = registry or load_default_keymaps(
            KeymapRegistry(logger_name="wrap_buffer.keymaps")
        )
        self._refresh(render_request(state))

    @property
    def running(self) -> bool:
        return self.state.running

    def pull_buffer(self) -> BufferMirror:
        width = self.state.width
        return self.state.buffer.mirror(
            attributes={"width": "" if width is None else str(width)}
        )

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[UpdateResult]:
        """Resolve a Textual key to a command and apply it.

        Returns ``None`` when the key maps to nothing.
        """

        key_input = KeyInput(key=key, text=text, modifiers=tuple(modifiers))
        command = self.registry.resolve(key_input)
        self._log_state("key ->", key=key_input.token, text=text)
        if command is None:
            return None
        return self.dispatch(command)

    def resize(self, width: int) -> UpdateResult:
        return self.dispatch(Resize(width))

    def dispatch(self, command: Command) -> UpdateResult:
        result = update(self.state, command)
        self._log_state("result <-", command=type(command).__name__, changed=result.changed)
        if result.render is not None:
            self._refresh(result.render)
        return result

    def _refresh(self, request: Optional[RenderRequest]) -> None:
        if request is None:
            return
        self.hooks.update_view(request)
        self.hooks.update_title(request.title)

    def _log_state(self, prefix: str, **fields: object) -> None:
        try:
            snapshot = self._state_metadata()
            snapshot.update({k: v for k, v in fields.items() if v is not None})
            line = " ".join([prefix, *(f"{k}={v!r}" for k, v in snapshot.items())])
            self.hooks.log(line)
        except Exception:
            # A broken log sink must not eat key presses.
            pass

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.state.buffer
        return {
            "cursor": buffer.cursor,
            "length": len(buffer),
            "width": self.state.width,
            "version": buffer.version,
        }


__all__ = ["TextualBufferAdapter", "TextualUIHooks"]

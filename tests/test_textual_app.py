from __future__ import annotations

import pytest

from wrap_buffer.adapters.textual import app
from wrap_buffer.session import RenderRequest


def make_request(rows: tuple[str, ...], cursor: tuple[int, int]) -> RenderRequest:
    return RenderRequest(rows=rows, cursor=cursor, title=f"({cursor[0]}, {cursor[1]})")


def test_render_text_highlights_caret_cell() -> None:
    text = app.render_text(make_request(("abc", "def"), (1, 1)))

    assert text.plain == "abc\ndef"
    styled = [(text.plain[span.start : span.end], str(span.style)) for span in text.spans]
    assert styled == [("e", "reverse")]


def test_render_text_pads_caret_at_row_end() -> None:
    text = app.render_text(make_request(("hi",), (2, 0)))

    assert text.plain == "hi "


def test_parse_args_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WRAP_BUFFER_TAB_WIDTH", raising=False)
    monkeypatch.delenv("WRAP_BUFFER_VERTICAL_MOTION", raising=False)

    args = app._parse_args([])

    assert args.tab_width == 1
    assert args.vertical_motion == "column"
    assert args.log_preset is None


def test_parse_args_overrides() -> None:
    args = app._parse_args(["--tab-width", "8", "--vertical-motion", "boundary"])

    assert args.tab_width == 8
    assert args.vertical_motion == "boundary"


@pytest.mark.parametrize("value", ["0", "-2", "wide"])
def test_parse_args_rejects_bad_tab_width(
    value: str, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        app._parse_args(["--tab-width", value])

    assert excinfo.value.code == 2
    assert "--tab-width" in capsys.readouterr().err

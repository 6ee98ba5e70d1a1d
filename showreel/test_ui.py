from __future__ import annotations

import pytest
from rich.console import Console

from showreel import ui as ui_module
from showreel.ui import TerminalUI


def _ui(monkeypatch: pytest.MonkeyPatch, answers: list[str], page_size: int = 10) -> tuple[TerminalUI, Console]:
    console = Console(record=True, width=120)
    replies = iter(answers)
    monkeypatch.setattr(ui_module.Prompt, "ask", lambda *_args, **_kwargs: next(replies))
    return TerminalUI(console=console, page_size=page_size), console


@pytest.mark.asyncio
async def test_present_choice_accepts_number(monkeypatch: pytest.MonkeyPatch) -> None:
    ui, console = _ui(monkeypatch, ["2"])

    picked = await ui.present_choice("Pick a season", ["1", "2", "3"])

    assert picked == "2"
    assert "Pick a season:" in console.export_text()


@pytest.mark.asyncio
async def test_present_choice_accepts_exact_label(monkeypatch: pytest.MonkeyPatch) -> None:
    ui, _ = _ui(monkeypatch, ["2) The Second"])

    assert await ui.present_choice("Pick an episode", ["1) Pilot", "2) The Second"]) == "2) The Second"


@pytest.mark.asyncio
async def test_present_choice_reprompts_on_invalid_input(monkeypatch: pytest.MonkeyPatch) -> None:
    ui, console = _ui(monkeypatch, ["9", "abc", "1"])

    assert await ui.present_choice("Pick a torrent", ["▲5 ▼1 - 1 GB - 720p", "▲1 ▼0 - 2 GB - unknown"]) == "▲5 ▼1 - 1 GB - 720p"
    assert console.export_text().count("Invalid choice") == 2


@pytest.mark.asyncio
async def test_present_choice_pages_long_lists(monkeypatch: pytest.MonkeyPatch) -> None:
    labels = [f"{n}) Episode {n}" for n in range(1, 8)]
    ui, console = _ui(monkeypatch, ["n", "6"], page_size=3)

    assert await ui.present_choice("Pick an episode", labels) == "6) Episode 6"
    text = console.export_text()
    assert "[4] 4) Episode 4" in text
    assert "page 2 of 3" in text


@pytest.mark.asyncio
async def test_present_choice_requires_labels() -> None:
    with pytest.raises(ValueError):
        await TerminalUI(console=Console(record=True)).present_choice("Pick", [])


@pytest.mark.parametrize(
    ("answer", "expected"),
    [("y", True), ("Yes", True), ("n", False), ("NO", False), ("", True), ("  ", True), ("x", False), ("maybe", False)],
)
@pytest.mark.asyncio
async def test_present_confirmation(monkeypatch: pytest.MonkeyPatch, answer: str, expected: bool) -> None:
    ui, _ = _ui(monkeypatch, [answer])

    assert await ui.present_confirmation("Is this what you are looking for?") is expected


def test_emit_error_escapes_markup() -> None:
    console = Console(record=True, width=120)
    TerminalUI(console=console).emit_error("bad [label]")

    assert "x bad [label]" in console.export_text()


@pytest.mark.asyncio
async def test_present_confirmation_empty_answer_takes_no_default(monkeypatch: pytest.MonkeyPatch) -> None:
    ui, _ = _ui(monkeypatch, [""])

    assert await ui.present_confirmation("Do you really want to remove Dark?", default_yes=False) is False

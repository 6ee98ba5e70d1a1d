"""Rich-based terminal chooser and notifications (all on stderr)."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from showreel import logger

DEFAULT_PAGE_SIZE = 10


class TerminalUI:
    """Numbered menus answered by number or exact label, plus Y/n confirmations."""

    def __init__(self, console: Console | None = None, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.console = console or Console(stderr=True)
        self.page_size = page_size

    def _ui_prompt(self, label: str, default: str | None = None) -> str:
        if default is None:
            return Prompt.ask(label, console=self.console)
        return Prompt.ask(label, default=default, console=self.console)

    def emit_info(self, text: str) -> None:
        self.console.print(f"[green]>[/green] {text}")
        logger.debug(f"info: {text}")

    def emit_error(self, text: str) -> None:
        self.console.print(f"[red]x[/red] [bold]{escape(text)}[/bold]")
        logger.debug(f"error: {text}")

    def emit_detail(self, label: str, value: str) -> None:
        self.console.print(f"[blue]{escape(label)}[/blue] {escape(value)}")

    def status(self, text: str) -> AbstractContextManager:
        return self.console.status(text)

    async def present_choice(self, prompt: str, labels: Sequence[str]) -> str:
        if not labels:
            raise ValueError("present_choice needs at least one label")

        page = 0
        total_pages = (len(labels) + self.page_size - 1) // self.page_size
        while True:
            start = page * self.page_size
            window = labels[start:start + self.page_size]
            self.console.print(f"\n{prompt}:")
            for idx, label in enumerate(window, start=start + 1):
                self.console.print(f"  [{idx}] {escape(label)}", markup=True, highlight=False)
            if total_pages > 1:
                self.console.print(f"  (page {page + 1} of {total_pages}; [N]ext, [P]revious)")

            raw = self._ui_prompt("Choice", default=str(start + 1)).strip()
            picked = self._match_choice(raw, labels)
            if picked is not None:
                return picked
            lowered = raw.lower()
            if total_pages > 1 and lowered in {"n", "next"}:
                page = (page + 1) % total_pages
                continue
            if total_pages > 1 and lowered in {"p", "prev", "previous"}:
                page = (page - 1) % total_pages
                continue
            self.console.print("[yellow][WARNING][/yellow] Invalid choice. Please select a listed option.")

    @staticmethod
    def _match_choice(raw: str, labels: Sequence[str]) -> str | None:
        if raw.isdigit() and 1 <= int(raw) <= len(labels):
            return labels[int(raw) - 1]
        if raw in labels:
            return raw
        return None

    async def present_confirmation(self, prompt: str, default_yes: bool = True) -> bool:
        suffix = "[Y/n]" if default_yes else "[y/N]"
        choice = self._ui_prompt(f"{prompt} {escape(suffix)}", default="Y" if default_yes else "N").strip().lower()
        if not choice:
            return default_yes
        return choice.startswith("y")

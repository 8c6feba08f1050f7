"""Progress sinks notified while a scenario's candidates run."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console


class ProgressSink(Protocol):
    """Receives scenario start, per-candidate and scenario end notifications."""

    def begin(self, scenario: str) -> None: ...

    def advance(self, label: str) -> None: ...

    def end(self) -> None: ...


class NullProgress:
    """Discards all progress notifications."""

    def begin(self, scenario: str) -> None:
        pass

    def advance(self, label: str) -> None:
        pass

    def end(self) -> None:
        pass


class ConsoleProgress:
    """Prints the scenario name followed by one dot per finished candidate."""

    def __init__(self, console: Console, *, marker: str = ".") -> None:
        self._console = console
        self._marker = marker

    def _write(self, text: str) -> None:
        self._console.print(text, end="", markup=False, highlight=False, soft_wrap=True)

    def begin(self, scenario: str) -> None:
        self._write(f"\n{scenario} ")

    def advance(self, label: str) -> None:
        self._write(self._marker)

    def end(self) -> None:
        self._write("\n")

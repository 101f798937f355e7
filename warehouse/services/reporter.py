"""Text reporter for repository contents (console or file sink)."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

EMPTY_MESSAGE = "No items found."


class Reporter:
    """Renders items one per line using their display string.

    An empty collection renders as EMPTY_MESSAGE rather than nothing.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys / redirected stdout are honoured
        return self._stream or sys.stdout

    def render(self, items: Iterable[object]) -> list[str]:
        lines = [str(item) for item in items]
        return lines or [EMPTY_MESSAGE]

    def write(self, items: Iterable[object], title: str | None = None) -> list[str]:
        lines = self.render(items)
        if title:
            print(title, file=self.stream)
        for line in lines:
            print(line, file=self.stream)
        return lines

    def write_file(self, path: str | Path, sections: dict[str, Iterable[object]]) -> Path:
        """Write one titled block per section to `path`, overwriting it."""
        target = Path(path)
        with target.open("w", encoding="utf-8") as fh:
            file_reporter = Reporter(fh)
            for title, items in sections.items():
                file_reporter.write(items, title=title)
                print(file=fh)
        return target

from __future__ import annotations

import sys
from typing import Optional, TextIO

BAR_WIDTH = 20


class Display:
    """Status lines and a single-line progress bar on the console."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None, quiet: bool = False):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.quiet = quiet
        self._progress_open = False

    def header(self, text: str) -> None:
        if not self.quiet:
            print("", file=self.out)
            print(text, file=self.out)

    def success(self, text: str) -> None:
        if not self.quiet:
            print(f" ✔ {text}", file=self.out)

    def error(self, text: str) -> None:
        self.progress_done()
        print(f" ✗ {text}", file=self.err)

    def banner(self, text: str) -> None:
        if self.quiet:
            return
        line = "*" * max(27, len(text) + 4)
        print(line, file=self.out)
        print(text, file=self.out)
        print(line, file=self.out)

    def progress(self, section: str, index: int, total: int, name: str) -> None:
        if self.quiet:
            return
        done = int(BAR_WIDTH * index / total) if total else BAR_WIDTH
        bar = "#" * done + "." * (BAR_WIDTH - done)
        print(f"\r{section} [{bar}] {index}/{total} {name}\x1b[K", end="", file=self.out, flush=True)
        self._progress_open = True

    def progress_done(self) -> None:
        if self._progress_open:
            print("", file=self.out)
            self._progress_open = False

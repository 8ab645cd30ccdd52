# Where: echobin/bench/ui.py
# What: Plain console reporter for benchmark progress and summaries.
# Why: Keep output readable on a TTY and deterministic when piped.
from __future__ import annotations

import os
import sys
from typing import TextIO

_COLOR_RESET = "\033[0m"
_COLOR_BOLD = "\033[1m"
_COLOR_GREEN = "\033[32m"
_COLOR_BLUE = "\033[34m"
_BG_GREEN = "\033[42m"
_BG_BLUE = "\033[44m"
_BG_WHITE = "\033[47m"

# Clear the current line, then move up and clear the label line.
_REWIND = "\033[2K\033[0G\033[1F\033[2K\033[0G"

SERVICE_TARGET = "target"
SERVICE_REFERENCE = "reference"

_SERVICE_COLORS = {
    SERVICE_TARGET: (_COLOR_BLUE, _BG_BLUE),
    SERVICE_REFERENCE: (_COLOR_GREEN, _BG_GREEN),
}


def _resolve_feature(flag: bool | None, default: bool) -> bool:
    if flag is None:
        return default
    return bool(flag)


def format_ms(value: float) -> str:
    return f"{value:.2f}ms"


class Reporter:
    def __init__(
        self,
        *,
        iterations: int,
        width: int = 25,
        stream: TextIO | None = None,
        color: bool | None = None,
    ) -> None:
        self._iterations = iterations
        self._width = width
        self._stream = stream or sys.stdout
        is_tty = hasattr(self._stream, "isatty") and self._stream.isatty()
        term = os.environ.get("TERM", "").lower()
        color_default = is_tty and term != "dumb" and not os.environ.get("NO_COLOR")
        self._color = _resolve_feature(color, color_default)
        self._in_place = is_tty

    def _colorize(self, text: str, *codes: str) -> str:
        if not self._color or not text:
            return text
        return f"{''.join(codes)}{text}{_COLOR_RESET}"

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def render_bar(self, service: str, path: str, current: int) -> str:
        filled = current * self._width // self._iterations
        empty = self._width - filled
        fg, bg = _SERVICE_COLORS.get(service, ("", ""))
        bar = self._colorize("=" * filled, bg, fg) + self._colorize(" " * empty, _BG_WHITE)
        if not self._color:
            bar = f"[{'=' * filled}{' ' * empty}]"
        return f"{service} {path}\n{bar}  {current}/{self._iterations}"

    def progress(self, service: str, path: str, current: int) -> None:
        """Redraw the progress bar of one endpoint measurement."""
        bar = self.render_bar(service, path, current)
        if self._in_place:
            self._write(_REWIND + bar)
        elif current == self._iterations:
            self._write(bar + "\n")

    def newline(self) -> None:
        self._write("\n")

    def summary(self, label: str, average: float, minimum: float, maximum: float) -> None:
        fg = _SERVICE_COLORS.get(label, (_COLOR_BOLD, ""))[0]
        self._write(f"{self._colorize(f'{label}:', _COLOR_BOLD, fg)}\n")
        self._write(f"  average: {format_ms(average)}\n")
        self._write(f"  min: {format_ms(minimum)}\n")
        self._write(f"  max: {format_ms(maximum)}\n")

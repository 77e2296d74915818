"""
Single-line terminal rendering.

The bar lives on the current terminal line. Every redraw moves the cursor
back to column zero, erases the line and writes the new content without a
newline. Text written through `writeln` is put above the bar: the bar line is
cleared, the text becomes a permanent line, and the bar is drawn again below.

Only one bar is expected on screen at a time. Other code writing to the same
terminal while a bar is drawn will garble the output.
"""

import math
import os
import sys
import weakref
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Union

from loguru import logger

from prgrs.config import RenderConfig

CSI = "\x1b["  # Control Sequence Introducer
ERASE_LINE = f"{CSI}K"  # erase from cursor to end of line
CLEAR_LINE = "\r" + ERASE_LINE

_active = None  # weakref to the renderer whose bar is on screen


def terminal_columns(stream) -> Optional[int]:
    """
    Width of the terminal behind stream, None when there is no terminal.
    """
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        logger.debug("No terminal size for {}", stream)
        return None


def round_half_up(value: Union[float, Fraction]) -> int:
    return math.floor(value + Fraction(1, 2))


@dataclass
class CursorContext:
    """
    What the renderer left on the current line.
    """

    bar_drawn: bool = False
    line: str = ""


class Renderer:
    """
    Owns the bar line of one progress bar.
    All write errors (OSError) are raised to the caller.
    """

    def __init__(self, config: RenderConfig, stream=None):
        self.config = config
        self.stream = stream if stream is not None else sys.stdout
        self.context = CursorContext()

    def render_line(self, fraction: Union[float, Fraction]) -> str:
        """
        Line for fraction in [0, 1]; values outside are clamped.
        Glyph count and percentage are rounded half up. Pass a Fraction
        to round exact halves such as 23/40 exactly.
        """
        fraction = max(0, min(1, fraction))
        width = self.config.bar_width
        filled = round_half_up(fraction * width)
        percent = round_half_up(fraction * 100)
        bar = self.config.fill * filled + self.config.empty * (width - filled)
        return f"[{bar}] ({percent:3d}%)"

    def draw(self, fraction: Union[float, Fraction]):
        global _active
        line = self.render_line(fraction)
        self._write(CLEAR_LINE + line)
        self.context.bar_drawn = True
        self.context.line = line
        _active = weakref.ref(self)

    def writeln(self, text: str):
        """
        Write text as a permanent line above the bar and redraw the bar.
        Without a bar on screen this is a plain line write.
        """
        if not self.context.bar_drawn:
            self._write(text + "\n")
            return
        self._write(CLEAR_LINE + text + "\n" + CLEAR_LINE + self.context.line)

    def finish(self):
        """
        Leave the last bar in the scrollback and release the line.
        """
        global _active
        if self.context.bar_drawn:
            self._write("\n")
            self.context = CursorContext()
        if active_renderer() is self:
            _active = None

    def _write(self, data: str):
        self.stream.write(data)
        self.stream.flush()


def active_renderer():
    """
    Renderer whose bar is on screen, None once it finished or was dropped.
    """
    if _active is None:
        return None
    return _active()


def writeln(text: str):
    """
    Print a line while a progress bar is displayed.

    Goes through the bar currently on screen, if any, so the bar is kept
    intact below the text. Otherwise it is a plain line on stdout.

    Raises:
        OSError: when the terminal write fails
    """
    renderer = active_renderer()
    if renderer is not None:
        renderer.writeln(text)
        return
    sys.stdout.write(text + "\n")
    sys.stdout.flush()

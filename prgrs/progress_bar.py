import sys
from dataclasses import dataclass
from fractions import Fraction

from loguru import logger

from prgrs.config import DEFAULT_LENGTH, Length, RenderConfig
from prgrs.terminal import Renderer, terminal_columns


@dataclass
class ProgressState:
    """
    Position of the iteration against the declared total.
    current is not capped; the fraction is.
    """

    current: int = 0
    total: int = 0

    @property
    def fraction(self) -> Fraction:
        # Exact ratio, floats would round some halves down. An empty total is done.
        if self.total == 0:
            return Fraction(1)
        return Fraction(min(self.current, self.total), self.total)


class ProgressBar:
    """
    Wrap an iterable and redraw a progress bar on every pulled item.

    The total is declared by the caller and does not need to match the real
    number of items: fewer items leave the bar short of 100%, extra items
    keep it at 100%.

    A failed terminal write raises OSError out of the pull, the item of that
    pull is dropped. Iteration can be resumed afterwards.

    Example:
        for i in ProgressBar(range(1000), 1000).with_length(Proportional(0.5)):
            if i % 10 == 0:
                writeln(str(i))
    """

    def __init__(self, iterable, total: int, length: Length = DEFAULT_LENGTH, stream=None):
        if isinstance(total, bool) or not isinstance(total, int):
            raise TypeError(f"total must be an int, got {type(total).__name__}")
        if total < 0:
            raise ValueError(f"total must be >= 0, got {total}")
        if total == 0:
            logger.debug("Progress bar with a total of 0, every step shows 100%")
        self.iterator = iter(iterable)
        self.state = ProgressState(0, total)
        self.length = length
        self.stream = stream if stream is not None else sys.stdout
        self.renderer = None
        self.finished = False

    def set_length(self, length: Length):
        """
        Set the bar length, either Absolute or Proportional to the terminal.
        Takes effect at the next redraw.
        """
        self.length = length
        if self.renderer is not None:
            self.renderer.config = self._make_config()

    def with_length(self, length: Length) -> "ProgressBar":
        """
        Same as set_length, returns the bar for one-liners.
        """
        self.set_length(length)
        return self

    def __iter__(self):
        return self

    def __len__(self):
        return self.state.total

    def __next__(self):
        if self.finished:
            raise StopIteration
        try:
            item = next(self.iterator)
        except StopIteration:
            self.close()
            raise
        self.state.current += 1
        self._get_renderer().draw(self.state.fraction)
        return item

    def writeln(self, text: str):
        self._get_renderer().writeln(text)

    def close(self):
        """
        Stop the bar, keeping its last line on screen.
        """
        if self.finished:
            return
        self.finished = True
        if self.renderer is not None:
            self.renderer.finish()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _get_renderer(self) -> Renderer:
        if self.renderer is None:
            self.renderer = Renderer(self._make_config(), self.stream)
        return self.renderer

    def _make_config(self) -> RenderConfig:
        config = RenderConfig.from_length(self.length, terminal_columns(self.stream))
        logger.debug("Bar width {} for length {}", config.bar_width, self.length)
        return config

from dataclasses import dataclass
from typing import Optional, Union

DECORATION_WIDTH = 9  # "[", "] (", three digits, "%)"
FALLBACK_LENGTH = 30
FILL = "#"
EMPTY = " "


@dataclass(frozen=True)
class Absolute:
    """
    Total length of the bar line, brackets and percentage included.
    Values larger than the terminal are not handled and will wrap.
    """

    columns: int

    def resolve(self, terminal_columns: Optional[int]) -> int:
        return self.columns


@dataclass(frozen=True)
class Proportional:
    """
    Length of the bar line as a share of the terminal width.
    Ratio is clamped to [0, 1]; 1 fills the whole line.
    """

    ratio: float

    def resolve(self, terminal_columns: Optional[int]) -> int:
        if terminal_columns is None:
            return FALLBACK_LENGTH
        ratio = max(0.0, min(1.0, self.ratio))
        return int(terminal_columns * ratio)


Length = Union[Absolute, Proportional]

DEFAULT_LENGTH = Proportional(0.33)


@dataclass(frozen=True)
class RenderConfig:
    """
    Immutable render settings.

    Args:
        bar_width (int): number of glyph columns between the brackets
        fill (str): glyph for the completed part
        empty (str): glyph for the remaining part
    """

    bar_width: int
    fill: str = FILL
    empty: str = EMPTY

    def __post_init__(self):
        if self.bar_width < 1:
            raise ValueError(f"bar_width must be >= 1, got {self.bar_width}")
        if len(self.fill) != 1 or len(self.empty) != 1:
            raise ValueError("fill and empty must be single characters")

    @property
    def line_width(self) -> int:
        return self.bar_width + DECORATION_WIDTH

    @classmethod
    def from_length(cls, length: Length, terminal_columns: Optional[int], **kwargs):
        """
        Build a config from an Absolute or Proportional length.
        Lines too short to hold the decoration get a single step.
        """
        columns = length.resolve(terminal_columns)
        bar_width = 1
        if columns > DECORATION_WIDTH + 1:
            bar_width = columns - DECORATION_WIDTH
        return cls(bar_width, **kwargs)

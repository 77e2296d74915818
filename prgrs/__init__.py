"""
prgrs: a tqdm-like progress bar for iteration loops.
"""

from loguru import logger

from prgrs.config import Absolute, Proportional, RenderConfig
from prgrs.log import setup_logging
from prgrs.progress_bar import ProgressBar, ProgressState
from prgrs.terminal import Renderer, writeln

logger.disable("prgrs")

__all__ = [
    "Absolute",
    "Proportional",
    "ProgressBar",
    "ProgressState",
    "RenderConfig",
    "Renderer",
    "setup_logging",
    "writeln",
]

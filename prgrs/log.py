from loguru import logger

from prgrs.terminal import writeln

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"


def bar_sink(message):
    """
    Loguru sink printing records above the progress bar.
    """
    writeln(str(message).rstrip("\n"))


def setup_logging(level="INFO", fmt=LOG_FORMAT) -> int:
    """
    Route loguru output through the progress bar.

    Removes every handler already added to loguru, the default stderr one
    included, since any handler writing to the terminal would break the bar
    line. Add file handlers after this call. Returns the handler id.
    """
    logger.remove()
    logger.enable("prgrs")
    return logger.add(bar_sink, level=level, format=fmt, colorize=False)

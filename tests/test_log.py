import io

from loguru import logger

from prgrs.config import Absolute
from prgrs.log import bar_sink, setup_logging
from prgrs.progress_bar import ProgressBar
from prgrs.terminal import CLEAR_LINE


def test_library_is_silent_by_default():
    records = []
    logger.add(records.append, level="DEBUG")
    ProgressBar([], 0, stream=io.StringIO())
    assert records == []


def test_bar_sink_without_bar(capsys):
    bar_sink("hello\n")
    assert capsys.readouterr().out == "hello\n"


def test_records_go_above_bar(stream):
    setup_logging(fmt="{message}")
    bar = ProgressBar(range(2), 2, Absolute(13), stream)
    next(bar)
    logger.info("halfway")
    assert stream.getvalue().endswith(
        CLEAR_LINE + "halfway\n" + CLEAR_LINE + "[##  ] ( 50%)"
    )


def test_level_filter(capsys):
    setup_logging(level="WARNING", fmt="{level}:{message}")
    logger.info("hidden")
    logger.warning("shown")
    assert capsys.readouterr().out == "WARNING:shown\n"


def test_library_debug_records(capsys):
    handler_id = setup_logging(level="DEBUG", fmt="{message}")
    assert isinstance(handler_id, int)
    ProgressBar(range(1), 0, stream=io.StringIO())
    assert "total of 0" in capsys.readouterr().out


def test_setup_logging_replaces_handlers(capsys):
    records = []
    logger.add(records.append)
    setup_logging(fmt="{message}")
    logger.info("only above the bar")
    assert records == []
    assert capsys.readouterr().out == "only above the bar\n"

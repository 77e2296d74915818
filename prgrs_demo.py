#!/usr/bin/env python3
"""
Progress bar demo.
Simulates a scoring job and logs the running mean above the bar.
"""

import time

import click
import numpy as np
from loguru import logger

from prgrs import Absolute, ProgressBar, Proportional, setup_logging

WINDOW = 50  # running mean window


def running_mean(x, N=WINDOW):
    """
    Mean of the last N values of x, or of all of them when x is shorter.
    """
    x = np.asarray(x, dtype=float)
    if x.shape[0] == 0:
        return 0.0
    kernel = np.ones(min(N, x.shape[0]))
    return float(kernel @ x[-kernel.shape[0] :] / kernel.shape[0])


def run_demo(total: int, length, delay: float, log_every: int, seed: int):
    rng = np.random.default_rng(seed)
    scores = []
    for i in ProgressBar(range(total), total).with_length(length):
        scores.append(rng.normal(loc=i / max(total, 1), scale=0.1))
        if log_every > 0 and i % log_every == 0:
            logger.info("step {} running mean {:.3f}", i, running_mean(scores))
        if delay > 0:
            time.sleep(delay)
    logger.info("done, {} steps, final mean {:.3f}", len(scores), running_mean(scores))
    return scores


@click.command()
@click.option(
    "--total",
    "-n",
    type=click.IntRange(min=0),
    default=1000,
    show_default=True,
    help="Number of steps.",
)
@click.option(
    "--length",
    "-l",
    type=click.FloatRange(0.0, 1.0),
    default=0.33,
    show_default=True,
    help="Bar length as a share of the terminal width.",
)
@click.option(
    "--absolute",
    "-a",
    type=int,
    default=None,
    help="Bar length in columns, overrides --length.",
)
@click.option(
    "--delay",
    "-d",
    type=float,
    default=0.01,
    show_default=True,
    help="Seconds spent on each step.",
)
@click.option(
    "--log_every",
    "-e",
    type=click.IntRange(min=0),
    default=10,
    show_default=True,
    help="Log a line every N steps, 0 to disable.",
)
@click.option(
    "--seed",
    type=int,
    default=0,
    show_default=True,
    help="Seed of the simulated scores.",
)
def main(
    total: int,
    length: float,
    absolute: int,
    delay: float,
    log_every: int,
    seed: int,
):
    setup_logging()
    if absolute is not None:
        bar_length = Absolute(absolute)
    else:
        bar_length = Proportional(length)
    run_demo(total, bar_length, delay, log_every, seed)


if __name__ == "__main__":
    main()

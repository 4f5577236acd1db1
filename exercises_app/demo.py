"""
Example invocations of every exercise.

Produces the same lines the exercises print: three age groups, the profit
of "Cats", the total of the sample products and a greeting for two names.
"""

from typing import Optional, TextIO

from .calculations import classify_age, format_total, get_profit, get_total
from .config import DefaultConfig, get_default_config
from .data.samples import CATS, DEMO_AGES, DEMO_NAMES, SAMPLE_PRODUCTS
from .greeting import Greeter, Many, greeting_lines
from .logging import get_logger

logger = get_logger(__name__)


def demo_lines(config: Optional[DefaultConfig] = None) -> list[str]:
    """Build the demo output lines without writing them."""
    config = config or get_default_config()

    lines = [classify_age(age, config.age) for age in DEMO_AGES]
    lines.append(str(get_profit(CATS)))
    lines.append(format_total(get_total(SAMPLE_PRODUCTS), config.output))
    lines.extend(greeting_lines(Many(DEMO_NAMES), config.output.greeting_template))

    return lines


def run_demo(config: Optional[DefaultConfig] = None, stream: Optional[TextIO] = None) -> list[str]:
    """
    Write the demo lines to ``stream`` (stdout by default).

    Returns:
        The lines written, in order
    """
    config = config or get_default_config()
    writer = Greeter(stream=stream, params=config.output)

    lines = demo_lines(config)
    for line in lines:
        writer.write_line(line)

    logger.info("Demo finished", line_count=len(lines))
    return lines

"""Greeting output to a text stream."""

import sys
from typing import Optional, TextIO

from ..config.defaults import OutputParams
from ..errors import DeliveryError
from ..logging import get_output_logger
from .variants import Greeting, Many, Single


def greeting_lines(target: Greeting, template: str = OutputParams.greeting_template) -> list[str]:
    """
    Format the greeting lines for a target.

    Args:
        target: Single name or Many names
        template: Line template with a ``{name}`` placeholder

    Returns:
        One line for Single, one line per name in order for Many
    """
    if isinstance(target, Single):
        return [template.format(name=target.name)]
    if isinstance(target, Many):
        return [template.format(name=name) for name in target.names]
    raise TypeError(f"Expected Single or Many, got {type(target).__name__}")


class Greeter:
    """Writes greeting lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, params: Optional[OutputParams] = None):
        self._stream = stream
        self.params = params or OutputParams()
        self.logger = get_output_logger(__name__)
        self._line_count = 0

    @property
    def stream(self) -> TextIO:
        """Target stream, stdout unless one was given."""
        return self._stream if self._stream is not None else sys.stdout

    @property
    def line_count(self) -> int:
        """Number of lines written by this greeter."""
        return self._line_count

    def greet(self, target: Greeting) -> None:
        """Write one greeting line per name in the target."""
        lines = greeting_lines(target, self.params.greeting_template)

        for line in lines:
            self.write_line(line)

        self.logger.debug(
            "Greeted",
            variant=type(target).__name__,
            line_count=len(lines),
        )

    def write_line(self, line: str) -> None:
        """Write a single line and flush it."""
        try:
            print(line, file=self.stream, flush=True)
        except (OSError, ValueError) as e:
            self.logger.error(
                "Failed to write line",
                line=line,
                error=str(e),
            )
            raise DeliveryError(
                f"Cannot write to output stream: {e}",
                delivery_method="stream",
                line=line,
            ) from e

        self._line_count += 1

    def health_check(self) -> bool:
        """Check if the stream accepts writes."""
        try:
            return self.stream.writable()
        except (OSError, ValueError):
            return False


def greet(target: Greeting, stream: Optional[TextIO] = None) -> None:
    """Greet a target on ``stream`` (stdout by default)."""
    Greeter(stream=stream).greet(target)

"""Integration tests for the exercise demo."""

import io

from exercises_app.config.defaults import AgeParams, DefaultConfig, OutputParams
from exercises_app.demo import demo_lines, run_demo

EXPECTED_LINES = [
    "Minor",
    "Adult",
    "Senior",
    "-21166652",
    "Total Price: $61.44",
    "Hello, Sam",
    "Hello, Lee",
]


class TestDemo:
    """Test the demo output end to end."""

    def test_demo_lines(self):
        """Demo lines match the exercises' example output."""
        assert demo_lines() == EXPECTED_LINES

    def test_run_demo_stdout(self, capsys):
        """run_demo prints every line to stdout in order."""
        lines = run_demo()

        assert lines == EXPECTED_LINES
        assert capsys.readouterr().out.splitlines() == EXPECTED_LINES

    def test_run_demo_stream(self):
        """run_demo writes to the given stream."""
        stream = io.StringIO()
        run_demo(stream=stream)
        assert stream.getvalue() == "\n".join(EXPECTED_LINES) + "\n"

    def test_configured_output(self):
        """Configuration changes the rendered lines."""
        config = DefaultConfig(
            age=AgeParams(adult_min_age=16, senior_min_age=30),
            output=OutputParams(greeting_template="Hi {name}", currency_symbol="€"),
        )

        lines = demo_lines(config)

        assert lines[:3] == ["Minor", "Senior", "Senior"]
        assert lines[4] == "Total Price: €61.44"
        assert lines[5:] == ["Hi Sam", "Hi Lee"]

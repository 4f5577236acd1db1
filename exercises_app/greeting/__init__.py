"""
Greeting one or many names.
"""
from .greeter import Greeter, greet, greeting_lines
from .variants import Greeting, Many, Single, greeting_for

__all__ = [
    "Greeter",
    "greet",
    "greeting_lines",
    "Greeting",
    "Single",
    "Many",
    "greeting_for",
]

"""
Greeting targets.

A greeting is addressed either to a single name or to many names. The two
cases are separate record types so that callers say which one they mean
instead of the greeter inspecting the payload.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Union

from ..errors import MalformedDataError


@dataclass(frozen=True)
class Single:
    """Greet exactly one name."""
    name: str


@dataclass(frozen=True)
class Many:
    """Greet each name in order."""
    names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple
        object.__setattr__(self, "names", tuple(self.names))


Greeting = Union[Single, Many]


def greeting_for(value: Union[str, Iterable[str]]) -> Greeting:
    """
    Build a greeting target from a raw name or collection of names.

    Args:
        value: A single name, or an iterable of names

    Returns:
        Single for a string, Many for an iterable

    Raises:
        MalformedDataError: value is neither a string nor an iterable of strings
    """
    if isinstance(value, str):
        return Single(value)

    if isinstance(value, Iterable) and not isinstance(value, (bytes, Mapping)):
        names = tuple(value)
        for name in names:
            if not isinstance(name, str):
                raise MalformedDataError(
                    "Names must all be strings",
                    raw_data=repr(names),
                    expected_format="list[str]",
                )
        return Many(names)

    raise MalformedDataError(
        f"Cannot greet a {type(value).__name__}",
        raw_data=repr(value),
        expected_format="str | list[str]",
    )

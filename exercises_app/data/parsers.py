"""
Parsers for converting raw mappings into exercise records.

Raw records may use either snake_case keys or the camelCase keys of the
JSON-style literals (``releaseYear``, ``boxOffice``, ``grossWorldwide``).
Parsing is the only place where record shapes are checked at runtime; the
calculations themselves trust their inputs.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import MalformedDataError, MissingDataError
from ..models import (
    HSL,
    RGB,
    BoxOffice,
    Color,
    Movie,
    Product,
    SkiSchoolStudent,
    SkillLevel,
    Sport,
)

_KEY_ALIASES = {
    "originalTitle": "original_title",
    "releaseYear": "release_year",
    "boxOffice": "box_office",
    "grossUS": "gross_us",
    "grossWorldwide": "gross_worldwide",
}


def _normalize_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    return {_KEY_ALIASES.get(key, key): value for key, value in raw.items()}


def _require_mapping(raw: Any, data_type: str) -> dict[str, Any]:
    if not isinstance(raw, Mapping):
        raise MalformedDataError(
            f"{data_type} must be a mapping, got {type(raw).__name__}",
            raw_data=repr(raw),
            expected_format="mapping",
        )
    return _normalize_keys(raw)


def _require_field(data: dict[str, Any], field: str, data_type: str) -> Any:
    if field not in data or data[field] is None:
        raise MissingDataError(
            f"{data_type} is missing required field '{field}'",
            data_type=data_type,
            field=field,
            context={"available_fields": sorted(data)},
        )
    return data[field]


def _require_number(data: dict[str, Any], field: str, data_type: str) -> Any:
    value = _require_field(data, field, data_type)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedDataError(
            f"{data_type}.{field} must be a number",
            raw_data=repr(value),
            expected_format="number",
        )
    return value


def _require_str(data: dict[str, Any], field: str, data_type: str) -> str:
    value = _require_field(data, field, data_type)
    if not isinstance(value, str):
        raise MalformedDataError(
            f"{data_type}.{field} must be a string",
            raw_data=repr(value),
            expected_format="string",
        )
    return value


def _require_choice(data: dict[str, Any], field: str, data_type: str, enum_cls: Any) -> Any:
    value = _require_field(data, field, data_type)
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise MalformedDataError(
            f"{data_type}.{field} must be one of: {allowed}",
            raw_data=repr(value),
            expected_format=allowed,
        ) from e


def parse_box_office(raw: Any) -> BoxOffice:
    """Parse box office figures."""
    data = _require_mapping(raw, "BoxOffice")
    return BoxOffice(
        budget=_require_number(data, "budget", "BoxOffice"),
        gross_us=_require_number(data, "gross_us", "BoxOffice"),
        gross_worldwide=_require_number(data, "gross_worldwide", "BoxOffice"),
    )


def parse_movie(raw: Any) -> Movie:
    """
    Parse a movie record.

    Args:
        raw: Mapping with title, director, release year, box office and an
            optional original title

    Returns:
        Frozen Movie record

    Raises:
        MissingDataError: A required field is absent
        MalformedDataError: A field has the wrong type
    """
    data = _require_mapping(raw, "Movie")

    original_title = data.get("original_title")
    if original_title is not None and not isinstance(original_title, str):
        raise MalformedDataError(
            "Movie.original_title must be a string",
            raw_data=repr(original_title),
            expected_format="string",
        )

    return Movie(
        title=_require_str(data, "title", "Movie"),
        director=_require_str(data, "director", "Movie"),
        release_year=_require_number(data, "release_year", "Movie"),
        box_office=parse_box_office(_require_field(data, "box_office", "Movie")),
        original_title=original_title,
    )


def parse_product(raw: Any) -> Product:
    """Parse a product record."""
    data = _require_mapping(raw, "Product")
    return Product(
        name=_require_str(data, "name", "Product"),
        price=_require_number(data, "price", "Product"),
    )


def parse_products(raw: Iterable[Any]) -> list[Product]:
    """Parse a list of product records, keeping their order."""
    if raw is None or isinstance(raw, (str, bytes, Mapping)):
        raise MalformedDataError(
            "Products must be a list of mappings",
            raw_data=repr(raw),
            expected_format="list",
        )
    return [parse_product(item) for item in raw]


def parse_student(raw: Any) -> SkiSchoolStudent:
    """Parse a ski school student, checking sport and level labels."""
    data = _require_mapping(raw, "SkiSchoolStudent")
    return SkiSchoolStudent(
        name=_require_str(data, "name", "SkiSchoolStudent"),
        age=_require_number(data, "age", "SkiSchoolStudent"),
        sport=_require_choice(data, "sport", "SkiSchoolStudent", Sport),
        level=_require_choice(data, "level", "SkiSchoolStudent", SkillLevel),
    )


def parse_color(raw: Any) -> Color:
    """
    Parse a color, telling RGB and HSL apart by their component keys.

    A mapping with r/g/b becomes RGB, one with h/s/l becomes HSL.
    """
    data = _require_mapping(raw, "Color")
    keys = set(data)

    if keys == {"r", "g", "b"}:
        return RGB(
            r=_require_number(data, "r", "RGB"),
            g=_require_number(data, "g", "RGB"),
            b=_require_number(data, "b", "RGB"),
        )

    if keys == {"h", "s", "l"}:
        return HSL(
            h=_require_number(data, "h", "HSL"),
            s=_require_number(data, "s", "HSL"),
            l=_require_number(data, "l", "HSL"),
        )

    raise MalformedDataError(
        "Color must have exactly r/g/b or h/s/l components",
        raw_data=repr(dict(raw)),
        expected_format="{r, g, b} | {h, s, l}",
    )

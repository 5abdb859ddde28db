"""
Line formatter: parse one input line as JSON and render it as indented, colored text.
Lines that are not JSON come back unchanged so plain-text log lines can share the stream.
"""
import json
import logging
from typing import Any

from .schemes import Palette

logger = logging.getLogger(__name__)

INDENT = "  "


class JSONNumber(str):
    """A JSON number kept as its exact source text (1.0 stays 1.0, big ints keep every digit)."""
    __slots__ = ()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_line(line: str) -> Any:
    """Decode one complete JSON text. Raises ValueError (incl. JSONDecodeError) if the line is not JSON."""
    return json.loads(
        line,
        parse_int=JSONNumber,
        parse_float=JSONNumber,
        parse_constant=_reject_constant,
    )


def format_line(line: str, palette: Palette) -> str:
    """Pretty print line if it parses as JSON; otherwise return it as-is."""
    try:
        value = parse_line(line)
        rendered = render(value, palette)
    except ValueError as e:
        logger.debug("Passing through non-JSON line: %s", e)
        return line
    except RecursionError:
        logger.debug("Passing through JSON nested too deeply to render")
        return line
    try:
        # json accepts lone surrogates ("\ud800"), which cannot be written as UTF-8
        rendered.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.debug("Passing through JSON with unencodable text: %s", e)
        return line
    return rendered


def render(value: Any, palette: Palette, depth: int = 0) -> str:
    """Render a parsed JSON value. depth is the nesting level of value (0 for the top level)."""
    if value is None:
        return palette.null.paint("null")
    if isinstance(value, bool):
        return palette.boolean.paint("true" if value else "false")
    if isinstance(value, JSONNumber):
        return palette.number.paint(str(value))
    if isinstance(value, (int, float)):
        return palette.number.paint(json.dumps(value))
    if isinstance(value, str):
        return palette.string.paint(f'"{value}"')
    if isinstance(value, (list, tuple)):
        return _render_array(value, palette, depth)
    if isinstance(value, dict):
        return _render_object(value, palette, depth)
    raise TypeError(f"Cannot render {type(value).__name__} as JSON")


def _render_array(values: list | tuple, palette: Palette, depth: int) -> str:
    if not values:
        return "[]"
    inner = INDENT * (depth + 1)
    contents = [f"{inner}{render(v, palette, depth + 1)}" for v in values]
    return "[\n" + ",\n".join(contents) + "\n" + INDENT * depth + "]"


def _render_object(obj: dict, palette: Palette, depth: int) -> str:
    if not obj:
        return "{}"
    inner = INDENT * (depth + 1)
    contents = []
    for k, v in obj.items():
        key = palette.object_key.paint(f'"{k}"')
        contents.append(f"{inner}{key}: {render(v, palette, depth + 1)}")
    return "{\n" + ",\n".join(contents) + "\n" + INDENT * depth + "}"

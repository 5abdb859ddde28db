# prettylog: pretty print a stream of JSON log lines with truecolor palettes

from .errors import PrettyLogError, UnknownColorSchemeError
from .schemes import (
    Color,
    Palette,
    DEFAULT_COLOR_SCHEME,
    load_color_schemes,
    list_color_schemes,
    get_color_scheme,
)
from .formatter import JSONNumber, parse_line, format_line, render
from .config import load_config

__all__ = [
    "PrettyLogError",
    "UnknownColorSchemeError",
    "Color",
    "Palette",
    "DEFAULT_COLOR_SCHEME",
    "load_color_schemes",
    "list_color_schemes",
    "get_color_scheme",
    "JSONNumber",
    "parse_line",
    "format_line",
    "render",
    "load_config",
]

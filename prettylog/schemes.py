"""
Built-in color schemes: named 5-slot palettes (RGB 0–255) for JSON token kinds.
The table ships inside the package as data/color_schemes.yaml and is read once per process.
"""
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from .errors import UnknownColorSchemeError

DEFAULT_COLOR_SCHEME = "ocean"

_SCHEMES_PATH = Path(__file__).resolve().parent / "data" / "color_schemes.yaml"

# YAML slot key -> Palette field
_SLOT_KEYS: dict[str, str] = {
    "null": "null",
    "bool": "boolean",
    "number": "number",
    "string": "string",
    "object_key": "object_key",
}


@dataclass(frozen=True)
class Color:
    """24-bit truecolor value."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for f in fields(self):
            v = getattr(self, f.name)
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError(f"Color component {f.name} must be an int in 0-255, got {v!r}")

    def paint(self, text: str) -> str:
        """Wrap text in a truecolor foreground escape, reset to the default foreground after."""
        return f"\x1b[38;2;{self.r};{self.g};{self.b}m{text}\x1b[39m"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Color":
        if not isinstance(data, dict) or set(data) != {"r", "g", "b"}:
            raise ValueError(f"Color must be a mapping with exactly r, g, b; got {data!r}")
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True)
class Palette:
    """One color per JSON token kind."""
    null: Color
    boolean: Color
    number: Color
    string: Color
    object_key: Color

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Palette":
        """Build from the YAML slot layout (null, bool, number, string, object_key)."""
        if not isinstance(data, dict):
            raise ValueError(f"Palette must be a mapping, got {type(data).__name__}")
        missing = [k for k in _SLOT_KEYS if k not in data]
        extra = [k for k in data if k not in _SLOT_KEYS]
        if missing or extra:
            raise ValueError(f"Palette slots mismatch (missing={missing}, unexpected={extra})")
        return cls(**{attr: Color.from_dict(data[key]) for key, attr in _SLOT_KEYS.items()})


def _parse_schemes(data: Any) -> dict[str, Palette]:
    if not isinstance(data, dict) or not data:
        raise ValueError("Color scheme table must be a non-empty mapping of name -> palette")
    schemes: dict[str, Palette] = {}
    for name, palette in data.items():
        try:
            schemes[str(name)] = Palette.from_dict(palette)
        except ValueError as e:
            raise ValueError(f"Invalid color scheme {name!r}: {e}") from e
    return schemes


@lru_cache(maxsize=None)
def _load_bundled() -> dict[str, Palette]:
    with open(_SCHEMES_PATH, encoding="utf-8") as f:
        return _parse_schemes(yaml.safe_load(f))


def load_color_schemes(path: Path | None = None) -> dict[str, Palette]:
    """Load the scheme table. Path is optional; defaults to the bundled data/color_schemes.yaml."""
    if path is None:
        return dict(_load_bundled())
    with open(path, encoding="utf-8") as f:
        return _parse_schemes(yaml.safe_load(f))


def list_color_schemes(schemes: dict[str, Palette] | None = None) -> list[str]:
    """Scheme names in table order."""
    if schemes is None:
        schemes = load_color_schemes()
    return list(schemes)


def get_color_scheme(name: str, schemes: dict[str, Palette] | None = None) -> Palette:
    """Exact, case-sensitive lookup; raises UnknownColorSchemeError if name is not in the table."""
    if schemes is None:
        schemes = load_color_schemes()
    try:
        return schemes[name]
    except KeyError:
        raise UnknownColorSchemeError(name, list(schemes)) from None

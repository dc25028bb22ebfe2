"""Configuration model for string art patterns."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Tuple

RGB = Tuple[float, float, float]

MIN_SIDES = 3
MIN_DENSITY = 10


class ConfigurationError(ValueError):
    """Raised when a pattern configuration is out of range."""

    def __init__(self, field: str, constraint: str) -> None:
        super().__init__(f"{field}: {constraint}")
        self.field = field
        self.constraint = constraint


def _as_int(field: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(field, f"must be an integer >= {minimum}, got {value!r}")
    if not math.isfinite(value) or int(value) != value:
        raise ConfigurationError(field, f"must be an integer >= {minimum}, got {value!r}")
    if value < minimum:
        raise ConfigurationError(field, f"must be >= {minimum}, got {value!r}")
    return int(value)


def _as_flag(field: str, value: Any) -> bool:
    if not isinstance(value, (str, bytes)):
        try:
            if value == 0 or value == 1:
                return bool(value)
        except (TypeError, ValueError):
            # array-likes compare elementwise
            pass
    raise ConfigurationError(field, f"must be a boolean or 0/1, got {value!r}")


def _as_rgb(field: str, value: Any) -> RGB:
    if isinstance(value, (str, bytes)):
        raise ConfigurationError(field, f"must be a vector of 3 numbers, got {value!r}")
    try:
        components = tuple(value)
    except TypeError as exc:
        raise ConfigurationError(field, f"must be a vector of 3 numbers, got {value!r}") from exc
    if len(components) != 3:
        raise ConfigurationError(field, f"must have exactly 3 components, got {len(components)}")
    out = []
    for c in components:
        if isinstance(c, bool) or not isinstance(c, Real) or not math.isfinite(c):
            raise ConfigurationError(field, f"components must be finite numbers, got {c!r}")
        if not 0.0 <= c <= 1.0:
            raise ConfigurationError(field, f"components must lie in [0, 1], got {c!r}")
        out.append(float(c))
    return out[0], out[1], out[2]


@dataclass(frozen=True)
class StringArtConfig:
    """Validated pattern parameters.

    ``sides`` is the number of polygon sides, ``density`` the number of pins
    per side (or per bisector in crossed mode) and ``color`` the RGB colour of
    the string with components in ``[0, 1]``.  Values are checked and
    normalised on construction so an invalid instance never exists.
    """

    sides: int = 3
    crossed: bool = False
    density: int = 40
    color: RGB = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sides", _as_int("sides", self.sides, MIN_SIDES))
        object.__setattr__(self, "crossed", _as_flag("crossed", self.crossed))
        object.__setattr__(self, "density", _as_int("density", self.density, MIN_DENSITY))
        object.__setattr__(self, "color", _as_rgb("color", self.color))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sides": self.sides,
            "crossed": self.crossed,
            "density": self.density,
            "color": list(self.color),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "StringArtConfig":
        unknown = set(data) - {"sides", "crossed", "density", "color"}
        if unknown:
            name = sorted(unknown)[0]
            raise ConfigurationError(name, "unknown parameter")
        defaults = StringArtConfig()
        return StringArtConfig(
            sides=data.get("sides", defaults.sides),
            crossed=data.get("crossed", defaults.crossed),
            density=data.get("density", defaults.density),
            color=data.get("color", defaults.color),
        )


__all__ = ["RGB", "ConfigurationError", "StringArtConfig", "MIN_SIDES", "MIN_DENSITY"]

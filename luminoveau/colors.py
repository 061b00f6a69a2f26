"""RGBA colours and a set of named colours."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """A colour with 0-255 red, green, blue and alpha components."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @classmethod
    def from_code(cls, code: int) -> Color:
        """Build a colour from a 32-bit code laid out as 0xRRGGBBAA."""
        return cls(
            (code >> 24) & 0xFF,
            (code >> 16) & 0xFF,
            (code >> 8) & 0xFF,
            code & 0xFF,
        )

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float, alpha: float) -> Color:
        """Build a colour from 0.0-1.0 components, truncating toward zero."""
        return cls(int(red * 255.0), int(green * 255.0), int(blue * 255.0), int(alpha * 255.0))

    def as_floats(self) -> tuple[float, float, float, float]:
        return (self.r_float, self.g_float, self.b_float, self.a_float)

    @property
    def r_float(self) -> float:
        return self.r / 255.0

    @property
    def g_float(self) -> float:
        return self.g / 255.0

    @property
    def b_float(self) -> float:
        return self.b / 255.0

    @property
    def a_float(self) -> float:
        return self.a / 255.0


RED = Color(255, 0, 0, 255)
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)
BLUE = Color(0, 0, 255, 255)
GREEN = Color(0, 255, 0, 255)
YELLOW = Color(255, 255, 0, 255)
PURPLE = Color(255, 0, 255, 255)
PINK = Color(255, 0, 127, 255)

DARKGREEN = Color(0, 128, 0, 255)
DARKRED = Color(128, 0, 0, 255)

GRAY = Color(128, 128, 128, 255)
DARKGRAY = Color(64, 64, 64, 255)
LIME = Color(50, 205, 50, 255)

BROWN = Color(73, 54, 28, 255)
"""Custom crosshair."""

import string
from dataclasses import dataclass

from modkit.core import ConfigurableModule, PersistedField


@dataclass(frozen=True)
class Colour:
    red: int
    green: int
    blue: int
    alpha: int = 255

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}{:02x}".format(self.red, self.green, self.blue, self.alpha)

    @classmethod
    def from_hex(cls, value: str) -> "Colour":
        """Parse ``#rrggbb`` or ``#rrggbbaa``."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) not in (6, 8) or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Invalid colour: {value!r}")
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)


class CrosshairModule(ConfigurableModule):

    def __init__(self):
        super().__init__()
        self.colour = Colour(255, 255, 255)
        self.thickness = 1
        self.gap = 2
        self.dot = False

    @property
    def id(self) -> str:
        return "crosshair"

    @property
    def description(self) -> str:
        return "Customise the crosshair"

    def persisted_fields(self):
        return super().persisted_fields() + [
            PersistedField("colour", str, encode=Colour.to_hex, decode=Colour.from_hex),
            PersistedField("thickness", int),
            PersistedField("gap", int),
            PersistedField("dot", bool),
        ]

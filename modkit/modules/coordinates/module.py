"""Player coordinates display."""

from modkit.core import PersistedField
from modkit.modules.hud import HudModule


class CoordinatesModule(HudModule):
    default_x = 2.0
    default_y = 14.0

    def __init__(self):
        super().__init__()
        self.decimal_places = 1
        self.show_direction = True

    @property
    def id(self) -> str:
        return "coordinates"

    @property
    def description(self) -> str:
        return "Show the player's position"

    def persisted_fields(self):
        return super().persisted_fields() + [
            PersistedField("decimal_places", int),
            PersistedField("show_direction", bool),
        ]

    def init(self) -> bool:
        return 0 <= self.decimal_places <= 6

    def format(self, x: float, y: float, z: float) -> str:
        return ", ".join(f"{v:.{self.decimal_places}f}" for v in (x, y, z))

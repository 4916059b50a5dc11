"""Frames-per-second counter."""

from modkit.core import PersistedField
from modkit.modules.hud import HudModule


class FpsModule(HudModule):
    default_x = 2.0
    default_y = 2.0

    def __init__(self):
        super().__init__()
        self.show_label = True
        self.fps = 0  # updated by the host every frame, never stored

    @property
    def id(self) -> str:
        return "fps"

    @property
    def display_name(self) -> str:
        return "FPS"

    @property
    def description(self) -> str:
        return "Show the current frame rate"

    def persisted_fields(self):
        return super().persisted_fields() + [
            PersistedField("show_label", bool),
        ]

    def text(self) -> str:
        return f"{self.fps} FPS" if self.show_label else str(self.fps)

"""Toggle sprint and sneak instead of holding the keys."""

from modkit.core import ConfigurableModule, PersistedField


class ToggleSprintModule(ConfigurableModule):

    def __init__(self):
        super().__init__()
        self.toggle_sprint = True
        self.toggle_sneak = False
        self.fly_boost = 1.0
        self.sprinting = False

    @property
    def id(self) -> str:
        return "toggle_sprint"

    @property
    def description(self) -> str:
        return "Toggle sprint and sneak with a key press"

    def persisted_fields(self):
        return super().persisted_fields() + [
            PersistedField("toggle_sprint", bool),
            PersistedField("toggle_sneak", bool),
            PersistedField("fly_boost", float),
        ]

    def on_disable(self):
        self.sprinting = False

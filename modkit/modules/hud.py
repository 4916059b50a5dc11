"""Base class for modules that draw a single HUD element."""

from typing import List

from modkit.core import ConfigurableModule, HudElement, PersistedField


def _element_field(name: str, type_) -> PersistedField:
    return PersistedField(
        name,
        type_,
        getter=lambda module: getattr(module.element, name),
        setter=lambda module, value: setattr(module.element, name, value),
    )


class HudModule(ConfigurableModule):
    """A module owning one HUD element whose position is persisted."""

    default_x = 0.0
    default_y = 0.0

    def __init__(self):
        super().__init__()
        self.element = HudElement(self.id, self.display_name, x=self.default_x, y=self.default_y)

    def persisted_fields(self) -> List[PersistedField]:
        return super().persisted_fields() + [
            _element_field("x", float),
            _element_field("y", float),
            _element_field("scale", float),
            _element_field("visible", bool),
        ]

    def get_hud_elements(self) -> List[HudElement]:
        return [self.element]

    def on_enable(self):
        self.element.visible = True

    def on_disable(self):
        self.element.visible = False

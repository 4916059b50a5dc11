"""HUD elements exposed by modules to the host."""

from dataclasses import dataclass


@dataclass
class HudElement:
    """An on-screen element owned by a module.

    The registry only collects these; drawing them is up to the host.
    """
    module_id: str
    name: str
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    visible: bool = True

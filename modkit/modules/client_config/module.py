"""General client settings."""

from modkit.core import ConfigurableModule, PersistedField


class ClientConfigModule(ConfigurableModule):
    """Settings that apply to the whole client rather than one feature."""

    def __init__(self):
        super().__init__()
        self.language = "en_us"
        self.menu_scale = 1.0
        self.check_for_updates = True
        self.last_seen_version = None

    @property
    def id(self) -> str:
        return "client_config"

    @property
    def display_name(self) -> str:
        return "Client"

    @property
    def description(self) -> str:
        return "General client settings"

    def persisted_fields(self):
        return super().persisted_fields() + [
            PersistedField("language", str),
            PersistedField("menu_scale", float),
            PersistedField("check_for_updates", bool),
            PersistedField("last_seen_version", str, nullable=True),
        ]

    def init(self) -> bool:
        if not 0.5 <= self.menu_scale <= 3.0:
            raise ValueError(f"menu_scale out of range: {self.menu_scale}")
        return True

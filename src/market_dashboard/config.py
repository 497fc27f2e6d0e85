"""Settings dataclass and environment loading."""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.api-ninjas.com/v1"


@dataclass(frozen=True)
class DashboardConfig:
    # Upstream
    api_key: str = ""  # API Ninjas key; read from API_KEY by from_env()
    base_url: str = DEFAULT_BASE_URL

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, **overrides) -> "DashboardConfig":
        """Build a config from environment variables.

        Explicit keyword overrides win over the environment; ``None``
        overrides are ignored so CLI defaults can be passed straight through.
        A missing ``API_KEY`` is kept as an empty string: handlers report it
        per request instead of failing at startup.
        """
        fields = {
            "api_key": os.environ.get("API_KEY", ""),
            "base_url": os.environ.get("UPSTREAM_BASE_URL", DEFAULT_BASE_URL),
            "host": os.environ.get("HOST", "0.0.0.0"),
            "port": int(os.environ.get("PORT", "8000")),
        }
        fields.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**fields)

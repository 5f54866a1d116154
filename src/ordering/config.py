"""Application settings for the storefront.

Settings are an explicit, named set of options with defaults. They are read
from the environment once (`get_settings`) and handed to the code that needs
them; nothing reads `os.environ` at call time.
"""

import os
from datetime import timedelta
from functools import lru_cache

from pydantic import BaseModel, Field

_ENV_PREFIX = "STOREFRONT_"


class Settings(BaseModel):
    cancellation_window_minutes: int = Field(default=30, ge=0)
    whatsapp_base_url: str = "https://wa.me"
    currency_prefix: str = "Rs."
    store_name: str = "Storefront"

    model_config = {"frozen": True}

    @property
    def cancellation_window(self) -> timedelta:
        return timedelta(minutes=self.cancellation_window_minutes)

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from `STOREFRONT_*` variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{_ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

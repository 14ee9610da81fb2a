"""Application settings loaded from environment variables and ``.env``."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pronto.core.config.enums import Environment


class Settings(BaseSettings):
    """Pronto client settings.

    Analytics credentials normally come from the settings store (written by
    the settings screen). ``ANALYTICS_APP_ID`` / ``ANALYTICS_ENDPOINT`` are
    only the fallback used when nothing has been stored yet.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: Environment = Environment.LOCAL
    LOG_LEVEL: str = "INFO"

    # None means "derive from ENVIRONMENT"; set explicitly to force on/off.
    DIAGNOSTICS_ENABLED: Optional[bool] = None

    ANALYTICS_APP_ID: str = ""
    ANALYTICS_ENDPOINT: str = ""
    ANALYTICS_TRACK_SCREENS: bool = True
    ANALYTICS_TRACK_LIFECYCLE: bool = True
    ANALYTICS_SESSION_TIMEOUT_SECONDS: int = Field(default=1800, gt=0)

    # Bundle metadata
    APP_NAME: Optional[str] = None
    APP_VERSION: Optional[str] = None

    SETTINGS_STORE_PATH: Optional[Path] = None

    @property
    def is_production(self) -> bool:
        """Whether this is a production build."""
        return self.ENVIRONMENT == Environment.PRD

    @property
    def diagnostics_enabled(self) -> bool:
        """Whether the development diagnostics channel is active."""
        if self.DIAGNOSTICS_ENABLED is not None:
            return self.DIAGNOSTICS_ENABLED
        return not self.is_production

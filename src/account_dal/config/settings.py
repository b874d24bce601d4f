"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


def get_default_data_dir() -> Path:
    """Return the default data directory for the SQLite fallback database."""
    return Path.home() / "Documents" / "Account Data"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Account Data Access"

    # Data directory (home of the default SQLite database)
    data_dir: Optional[Path] = None

    # Full database URL (wins over the connection descriptor below)
    database_url: Optional[str] = None

    # Connection descriptor: location, catalog and authentication mode.
    # Leaving db_user unset means integrated authentication.
    db_driver: Optional[str] = None
    db_host: Optional[str] = None
    db_port: Optional[int] = None
    db_name: Optional[str] = None
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_query: dict[str, str] = {}

    echo_sql: bool = False
    log_level: str = "INFO"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """
        Resolve the connection endpoint.

        Order: explicit database_url, then the db_* descriptor, then a
        SQLite file inside the data directory.
        """
        if self.database_url:
            return self.database_url
        if self.db_driver:
            url = URL.create(
                drivername=self.db_driver,
                username=self.db_user,
                password=self.db_password,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
                query=self.db_query,
            )
            return url.render_as_string(hide_password=False)
        db_path = self.get_data_dir() / "accounts.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None

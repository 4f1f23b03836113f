"""Site configuration loaded once at startup."""
from pathlib import Path
from typing import Any, Tuple, Union

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.exceptions import ConfigError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SiteConfig(BaseSettings):
    """Process-wide settings read from the YAML config file."""

    # Network
    port: str = Field(..., description="Port number or host:port bind string")
    host: str = "0.0.0.0"

    # Content
    file_path: str = Field(..., description="Content root directory")

    # Feed metadata
    site_title: str
    site_description: str
    site_link: str

    # Submission credentials
    admin_username: str
    admin_password: str

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SIMPLEBLOG_",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @field_validator("port", mode="before")
    @classmethod
    def validate_port(cls, v: Union[int, str]) -> str:
        """Accept `8080`, `"8080"` or `"127.0.0.1:8080"`."""
        value = str(v).strip()
        port = value.rsplit(":", 1)[-1]
        if not port.isdigit() or not 0 < int(port) < 65536:
            raise ValueError(f"invalid port: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def content_root(self) -> Path:
        return Path(self.file_path)

    def bind_address(self) -> Tuple[str, int]:
        """Return the (host, port) pair the server listens on."""
        if ":" in self.port:
            host, port = self.port.rsplit(":", 1)
            return host or self.host, int(port)
        return self.host, int(self.port)


def load_config(path: Union[str, Path]) -> SiteConfig:
    """Read and validate the YAML config file at `path`."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            contents = f.read()
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e

    try:
        data: Any = yaml.safe_load(contents)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing config file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return SiteConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

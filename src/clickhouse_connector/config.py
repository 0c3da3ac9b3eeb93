from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from report_connector_sdk import OptionSpec

OPTIONS: Dict[str, OptionSpec] = {
    "url": OptionSpec(
        title="URL",
        description="ClickHouse instance URL",
        type="string",
        required=True,
    ),
    "username": OptionSpec(title="Username", type="string"),
    "password": OptionSpec(title="Password", type="string", secret=True),
}


class ClickHouseSettings(BaseSettings):
    """Connector defaults backed by CLICKHOUSE_* environment variables."""

    url: Optional[str] = Field(default=None, description="ClickHouse instance URL.")
    username: Optional[str] = Field(default=None)
    password: Optional[SecretStr] = Field(default=None)

    probe_timeout_sec: float = Field(
        default=5.0,
        description="Timeout in seconds for the connection health check."
    )
    log_level: str = Field(default="INFO", description="Root log level used by the CLI.")
    log_json: bool = Field(default=False, description="Emit JSON log lines from the CLI.")

    model_config = SettingsConfigDict(
        env_prefix="CLICKHOUSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


class ClickHouseOptions(BaseModel):
    """Connection options as supplied by the host.

    Values are not checked here; the vendor client rejects bad ones when a
    query runs.
    """

    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[SecretStr] = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def from_settings(cls, settings: Optional[ClickHouseSettings] = None) -> "ClickHouseOptions":
        settings = settings or ClickHouseSettings()
        return cls(url=settings.url, username=settings.username, password=settings.password)

    @property
    def display_host(self) -> str:
        """Host and port for log lines, without credentials embedded in the URL."""
        if not self.url:
            return "<unset>"
        parsed = urlparse(self.url)
        if not parsed.hostname:
            return "<invalid url>"
        return f"{parsed.hostname}:{parsed.port}" if parsed.port else parsed.hostname

    def client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``clickhouse_connect.get_async_client``."""
        kwargs: Dict[str, Any] = {
            "dsn": self.url,
            "username": self.username,
            "password": self.password.get_secret_value() if self.password else "",
        }
        scheme = urlparse(self.url).scheme if self.url else ""
        if scheme in ("http", "https"):
            kwargs["interface"] = scheme
        return kwargs

    def redact(self, message: str) -> str:
        """Masks the password wherever it appears in ``message``."""
        secret = self.password.get_secret_value() if self.password else ""
        if secret:
            message = message.replace(secret, "**********")
        return message


def coerce_options(options: Union[ClickHouseOptions, Mapping[str, Any], None]) -> ClickHouseOptions:
    if isinstance(options, ClickHouseOptions):
        return options
    return ClickHouseOptions.model_validate(dict(options or {}))

"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmailSettings(BaseModel):
    """Outbound email configuration.

    Either an API key (SendGrid) or a user/password pair (SMTP) enables
    delivery. Missing credentials never block startup; notifications fail
    when they are attempted instead.
    """

    # SendGrid API key, takes precedence over SMTP credentials
    api_key: str | None = None

    # SMTP credentials (e.g. a Gmail account with an app password)
    user: str | None = None
    password: str | None = None

    # Sender identity, falls back to the SMTP user when unset
    from_email: str | None = None
    from_name: str = "Date Invite"

    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    use_ssl: bool = False

    # Upper bound for one delivery attempt
    timeout_seconds: float = 30.0

    @computed_field
    @property
    def has_api_key(self) -> bool:
        """Whether an API key is configured."""
        return bool(self.api_key)

    @computed_field
    @property
    def has_smtp_credentials(self) -> bool:
        """Whether a complete SMTP user/password pair is configured."""
        return bool(self.user and self.password)

    @computed_field
    @property
    def is_configured(self) -> bool:
        """Whether any email transport can be used."""
        return self.has_api_key or self.has_smtp_credentials

    @property
    def sender_address(self) -> str | None:
        """Address used in the From header."""
        return self.from_email or self.user


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://<host>
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            # Production uses standard ports (80/443)
            return f"{self.protocol}://{self.host}"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL where invitation links are opened."""
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        else:
            return f"{self.protocol}://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        HOST=rsvp.example.com
        EMAIL__USER=me@gmail.com
        EMAIL__PASSWORD=app-password
        EMAIL__API_KEY=SG.xxxxx
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows EMAIL__USER syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Nested settings
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    email: EmailSettings = EmailSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol=protocol,
            frontend_host=self.frontend_host,
        )

        self.git_sha = self._load_git_sha()

        return self

    @property
    def cors_origins(self) -> list[str]:
        """Origins allowed to call the API from a browser."""
        origins = [self.api.frontend_url, "http://localhost:3000"]
        return list(dict.fromkeys(origins))

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"

"""Central environment-driven settings for the payment API.

The process loads this once at startup. Provider credentials are required:
a missing or blank key pair stops the process before any request is served
(see `.env.example`).
"""

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CORS_ORIGINS = [
    "https://vitalimes.com",
    "https://appconnect.cloud",
    "https://vitalimes-frontend-sbwube-c11f73-72-61-237-203.traefik.me",
]


class ConfigurationError(RuntimeError):
    """Raised when required runtime configuration is missing or invalid."""


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "payment-api"
    log_level: str = "INFO"
    port: int = 3000
    razorpay_key_id: str = Field(min_length=1)
    razorpay_key_secret: SecretStr
    razorpay_timeout_seconds: float = Field(default=10.0, gt=0)
    payment_currency: str = Field(default="INR", min_length=3, max_length=3)
    # Razorpay caps receipts at 40 chars; prefix + "-" + 13-digit millis fits.
    receipt_prefix: str = Field(default="VTL", min_length=1, max_length=24)
    cors_allowed_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    tracing_enabled: bool = True
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("razorpay_key_id")
    @classmethod
    def _key_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("razorpay_key_secret")
    @classmethod
    def _key_secret_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("payment_currency")
    @classmethod
    def _currency_upper(cls, value: str) -> str:
        return value.upper()


def load_settings(**overrides) -> CommonSettings:
    """Build settings, turning validation failures into `ConfigurationError`.

    Only the offending variable names are reported.
    """

    try:
        return CommonSettings(**overrides)
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in err["loc"]).upper() for err in exc.errors()})
        # ValidationError echoes raw input, which may carry the key secret.
        raise ConfigurationError(f"invalid or missing configuration: {', '.join(fields)}") from None


settings = load_settings()

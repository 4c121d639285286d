"""Startup-time helper for safe config logging."""

from pydantic import SecretStr

from vitalimes.common.config import CommonSettings
from vitalimes.common.logging import logger


def redacted_config(config: CommonSettings, fields: list[str]) -> dict:
    """Return selected settings with secret values masked."""

    snapshot = {"service": config.service_name}
    for name in fields:
        value = getattr(config, name, None)
        if value is None:
            snapshot[name] = "<unset>"
        elif isinstance(value, SecretStr) or any(s in name.upper() for s in ("SECRET", "PASSWORD", "TOKEN")):
            snapshot[name] = "<redacted>"
        else:
            snapshot[name] = value
    return snapshot


def log_startup_config(config: CommonSettings, fields: list[str]) -> None:
    """Log selected startup settings for quick troubleshooting."""

    logger.info("startup_config=%s", redacted_config(config, fields))

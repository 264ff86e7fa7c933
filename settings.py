import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from errors import ConfigError
from notion_records import DEFAULT_PROPERTY_NAMES


def _split_domains(raw):
    return frozenset(d.strip().lower() for d in raw.split(",") if d.strip())


def _parse_int(name, raw):
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def parse_property_names(raw):
    """Parse ``field=Property Name,...`` overrides of the Notion mapping."""
    names = {}
    for pair in filter(None, (p.strip() for p in (raw or "").split(","))):
        key, sep, value = pair.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not value:
            raise ConfigError(f"NOTION_PROPERTY_NAMES entry {pair!r} is not field=Name")
        if key not in DEFAULT_PROPERTY_NAMES:
            raise ConfigError(f"NOTION_PROPERTY_NAMES has unknown field {key!r}")
        names[key] = value
    return names


@dataclass(frozen=True)
class GatewayConfig:
    notion_token: str = ""
    notion_database_id: str = ""
    allowed_domains: frozenset = frozenset({"localhost"})
    property_names: dict = field(default_factory=dict)
    notion_timeout_ms: Optional[int] = None
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            load_dotenv()
            environ = os.environ

        domains = environ.get("ALLOWED_DOMAINS")
        timeout = environ.get("NOTION_TIMEOUT_MS")
        return cls(
            notion_token=environ.get("NOTION_TOKEN", ""),
            notion_database_id=environ.get("NOTION_DATABASE_ID", ""),
            allowed_domains=_split_domains(domains) if domains else cls.allowed_domains,
            property_names=parse_property_names(environ.get("NOTION_PROPERTY_NAMES")),
            notion_timeout_ms=_parse_int("NOTION_TIMEOUT_MS", timeout) if timeout else None,
            host=environ.get("HOST", cls.host),
            port=_parse_int("PORT", environ.get("PORT", str(cls.port))),
            log_level=environ.get("LOG_LEVEL", cls.log_level).upper(),
        )

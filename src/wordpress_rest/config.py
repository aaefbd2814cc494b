"""Configuration and logging setup for the WordPress REST client."""

import enum
import json
import logging
import os
import pathlib

import pydantic
import structlog

from .restapi import DEFAULT_TIMEOUT

CONFIG_ENV_VAR = "WORDPRESS_CLIENT_CONFIG_PATH"


class DeleteMethod(str, enum.Enum):
    """How delete requests are sent.

    ``override`` sends a GET with ``_method=DELETE`` and an
    ``X-HTTP-Method-Override`` header, for servers or proxies that reject
    the DELETE verb. ``native`` sends a plain DELETE.
    """

    OVERRIDE = "override"
    NATIVE = "native"


class LogFormat(str, enum.Enum):
    """Rendering of log lines: ``logfmt`` for people, ``json`` for collectors."""

    LOGFMT = "logfmt"
    JSON = "json"


class ClientOptions(pydantic.BaseModel):
    """Configuration for the WordPress REST client."""

    model_config = pydantic.ConfigDict(frozen=True)

    base_api_url: str = pydantic.Field(
        description="Base URL of the REST API, e.g. http://host/wp-json/wp/v2",
    )
    username: str | None = pydantic.Field(None, description="Basic auth username")
    password: str | None = pydantic.Field(None, description="Basic auth password")
    debug: bool = pydantic.Field(False, description="Log requests and responses")
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    delete_method: DeleteMethod = pydantic.Field(
        DeleteMethod.OVERRIDE,
        description="How delete requests are sent",
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")
    log_format: LogFormat = pydantic.Field(
        LogFormat.LOGFMT,
        description="Rendering of log lines",
    )

    @pydantic.field_validator("base_api_url")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            msg = "base_api_url cannot be empty"
            raise ValueError(msg)
        return value


def configure_logging(
    log_level_name: str,
    log_format: LogFormat = LogFormat.LOGFMT,
    logger_factory=None,
) -> None:
    """Configure structlog for the client's request logs.

    Every line starts with ``timestamp``, ``level`` and ``msg``, followed by
    the event fields (``method``, ``url``, ``status_code`` ...). Unknown
    level names fall back to INFO.

    Args:
        log_level_name: Minimum level, e.g. ``"DEBUG"``.
        log_format: ``logfmt`` or ``json`` rendering.
        logger_factory: Output sink. Defaults to printing to stdout.
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    if LogFormat(log_format) is LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.processors.LogfmtRenderer(
            key_order=("timestamp", "level", "msg"),
            drop_missing=True,
        )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=logger_factory or structlog.PrintLoggerFactory(),
        # Module loggers are created at import time, so they must not cache
        # whatever configuration was active then.
        cache_logger_on_first_use=False,
    )


def load_options(config_path: str | None = None) -> ClientOptions:
    """Load client options from a JSON file.

    Args:
        config_path: Path to the file. Falls back to the
            ``WORDPRESS_CLIENT_CONFIG_PATH`` environment variable.

    Raises:
        FileNotFoundError: If no path is given or the file does not exist.
        pydantic.ValidationError: If the file content is invalid.
    """
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not resolved_path:
        msg = f"No configuration path given and {CONFIG_ENV_VAR} is not set"
        raise FileNotFoundError(msg)

    path = pathlib.Path(resolved_path)
    if not path.exists():
        msg = f"Configuration file not found: {resolved_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientOptions(**data)

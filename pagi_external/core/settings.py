from __future__ import annotations

import logging
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagi_external.domain.exceptions import ConfigurationError, MissingConfigurationError

logger = logging.getLogger("pagi.config")

DEFAULT_MODEL = "openai/gpt-4o-mini"
DEFAULT_LLM_BASE_URL = "https://openrouter.ai/api/v1"

_API_KEY_ENV = "OPENROUTER_API_KEY"
_API_KEY_ALIASES = (_API_KEY_ENV, "LLM_API_KEY", "llm_api_key")


class PagiConfig(BaseSettings):
    """Immutable snapshot of provider settings and secrets.

    Values come from the process environment first; a local `.env` file only
    fills in variables the environment does not define.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        # An exported-but-empty variable counts as unset (required -> missing, optional -> default).
        env_ignore_empty=True,
    )

    # LLM provider (OpenRouter). IMPORTANT: the key is a SecretStr so it never shows in repr/logs.
    llm_api_key: SecretStr = Field(
        validation_alias=AliasChoices(*_API_KEY_ALIASES),
        description="Bearer credential for the chat-completions provider (required).",
    )
    llm_default_model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias=AliasChoices(
            "OPENROUTER_DEFAULT_MODEL", "LLM_DEFAULT_MODEL", "llm_default_model"
        ),
        description="Model identifier used when a call does not override it.",
    )
    llm_base_url: str = Field(
        default=DEFAULT_LLM_BASE_URL,
        validation_alias=AliasChoices("OPENROUTER_BASE_URL", "LLM_BASE_URL", "llm_base_url"),
        description="Base URL of the chat-completions API (override for proxies/emulators).",
    )
    llm_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("LLM_TIMEOUT_SECONDS", "llm_timeout_seconds"),
        description="Optional request timeout in seconds. Unset means no timeout.",
    )
    llm_http_referer: str = Field(
        default="https://localhost",
        validation_alias=AliasChoices("OPENROUTER_HTTP_REFERER", "llm_http_referer"),
        description="Value of the HTTP-Referer attribution header sent to OpenRouter.",
    )
    llm_app_title: str = Field(
        default="pagi-external-api-lib",
        validation_alias=AliasChoices("OPENROUTER_APP_TITLE", "llm_app_title"),
        description="Value of the X-Title attribution header sent to OpenRouter.",
    )

    # Placeholder integrations. Empty tokens are allowed; the clients refuse to run without them.
    jira_api_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("JIRA_API_TOKEN", "jira_api_token"),
    )
    jira_base_url: str = Field(
        default="https://jira.example.com",
        validation_alias=AliasChoices("JIRA_BASE_URL", "jira_base_url"),
    )
    crowdstrike_api_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("CROWDSTRIKE_API_TOKEN", "crowdstrike_api_token"),
    )
    crowdstrike_base_url: str = Field(
        default="https://api.crowdstrike.com",
        validation_alias=AliasChoices("CROWDSTRIKE_BASE_URL", "crowdstrike_base_url"),
    )

    @field_validator("llm_api_key")
    @classmethod
    def _reject_blank_api_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("must not be blank")
        return value


def _is_api_key_error(loc: tuple[int | str, ...]) -> bool:
    aliases = {alias.lower() for alias in _API_KEY_ALIASES}
    return bool(loc) and str(loc[0]).lower() in aliases


def load_config(*, env_file: str | Path | None = ".env") -> PagiConfig:
    """Load and validate configuration from the environment.

    `env_file` is resolved against the current working directory; a missing file
    is silently ignored. Pass None to read the process environment only.

    Raises:
        MissingConfigurationError: the LLM credential is absent or blank.
        ConfigurationError: any other setting has an invalid value.
    """

    try:
        config = PagiConfig(_env_file=env_file)
    except ValidationError as exc:
        errors = exc.errors(include_input=False)
        if any(_is_api_key_error(tuple(err["loc"])) for err in errors):
            raise MissingConfigurationError(_API_KEY_ENV) from None
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors
        )
        raise ConfigurationError(f"Invalid configuration: {details}") from exc

    logger.debug(
        "Configuration loaded",
        extra={"model": config.llm_default_model},
    )
    return config

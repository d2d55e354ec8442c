"""PAGI external API & LLM provider library.

Centralizes secure configuration loading (`.env` + environment), outbound
network I/O, and the OpenRouter chat-completions provider.
"""

from __future__ import annotations

from pagi_external.core.settings import PagiConfig, load_config
from pagi_external.domain.exceptions import (
    ConfigurationError,
    IntegrationNotConfiguredError,
    LLMError,
    LLMResponseError,
    LLMTransportError,
    MissingConfigurationError,
    PagiError,
)
from pagi_external.integrations import CrowdstrikeClient, JiraClient
from pagi_external.llm import LLMProvider
from pagi_external.main import bootstrap

__all__ = [
    "ConfigurationError",
    "CrowdstrikeClient",
    "IntegrationNotConfiguredError",
    "JiraClient",
    "LLMError",
    "LLMProvider",
    "LLMResponseError",
    "LLMTransportError",
    "MissingConfigurationError",
    "PagiConfig",
    "PagiError",
    "bootstrap",
    "load_config",
]

from __future__ import annotations


class PagiError(Exception):
    """Base class for all errors raised by this library."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(PagiError):
    """Raised when environment configuration is present but invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a required setting (e.g. the LLM credential) is absent or blank.

    Only the variable name is carried; the value is never part of the error.
    """

    def __init__(self, env_var: str):
        super().__init__(f"Missing required env var: {env_var}")
        self.env_var = env_var


class LLMError(PagiError):
    """Base error for chat-completion failures."""


class LLMTransportError(LLMError):
    """Raised on network failure or a non-success HTTP status from the provider."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"


class LLMResponseError(LLMError):
    """Raised when the provider returns malformed JSON or no completion."""


class IntegrationNotConfiguredError(PagiError):
    """Raised by placeholder integrations when their API token is not set."""

    def __init__(self, integration: str, env_var: str):
        super().__init__(f"{env_var} is not set")
        self.integration = integration
        self.env_var = env_var

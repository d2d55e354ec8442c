from __future__ import annotations

import logging
import time

import httpx
from pydantic import ValidationError

from pagi_external.core.metrics import observe_llm_request
from pagi_external.core.settings import PagiConfig, load_config
from pagi_external.domain.exceptions import LLMResponseError, LLMTransportError
from pagi_external.llm.schemas import ChatCompletionsResponse, Choice, build_chat_request

logger = logging.getLogger("pagi.llm")

MAX_ERROR_BODY_CHARS = 512
_REDACTED = "***"
OVERRIDE_MODEL_LABEL = "override"


def _safe_error_body(*, text: str, secret: str) -> str:
    """Truncate an upstream error body and scrub the credential should the provider echo it."""
    if secret:
        text = text.replace(secret, _REDACTED)
    if len(text) > MAX_ERROR_BODY_CHARS:
        text = text[:MAX_ERROR_BODY_CHARS] + "...[truncated]"
    return text


class LLMProvider:
    """
    Chat-completions client for OpenRouter (or any OpenAI-compatible endpoint).

    Design notes:
    - One POST per `generate_response` call: no retries, no caching, no streaming.
    - The httpx.AsyncClient is kept for the provider's lifetime so connections are reused.
      A client passed in by the caller is borrowed and never closed here.
    - Only call metadata is logged (model, status, duration). Prompts, completions and
      the bearer credential are never logged or put into error messages.
    """

    def __init__(self, config: PagiConfig, *, http_client: httpx.AsyncClient | None = None):
        self.config = config
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=config.llm_timeout_seconds)
        self._http = http_client

    @classmethod
    def from_env(cls) -> LLMProvider:
        """Load configuration from the environment and build a provider with a fresh transport.

        Raises MissingConfigurationError when the credential is not set.
        """
        return cls(load_config())

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> LLMProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.config.llm_default_model!r})"

    def resolve_model(self, model: str | None) -> str:
        """Return the per-call override when non-empty, else the configured default."""
        return model or self.config.llm_default_model

    def _metric_model_label(self, effective_model: str) -> str:
        # Per-call overrides are caller-controlled strings; one bucket keeps label cardinality fixed.
        if effective_model == self.config.llm_default_model:
            return effective_model
        return OVERRIDE_MODEL_LABEL

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.llm_api_key.get_secret_value()}",
            "Content-Type": "application/json",
            # OpenRouter attribution headers; ignored by other providers.
            "HTTP-Referer": self.config.llm_http_referer,
            "X-Title": self.config.llm_app_title,
        }

    async def generate_response(
        self,
        prompt: str,
        system_prompt: str = "",
        model: str | None = None,
    ) -> str:
        """Send a system/user prompt pair and return the first completion's text verbatim.

        Raises:
            ValueError: `prompt` is empty.
            LLMTransportError: network failure, timeout, or non-2xx status.
            LLMResponseError: the body is not the expected JSON shape or has no choices.
        """

        if not prompt:
            raise ValueError("prompt must not be empty")

        effective_model = self.resolve_model(model)
        body = build_chat_request(prompt=prompt, system_prompt=system_prompt, model=effective_model)
        url = f"{self.config.llm_base_url.rstrip('/')}/chat/completions"

        started = time.perf_counter()
        outcome = "aborted"
        status_code: int | None = None
        try:
            try:
                resp = await self._http.post(url, headers=self._headers(), json=body.model_dump())
            except httpx.TimeoutException as exc:
                outcome = "transport_error"
                raise LLMTransportError("LLM request timed out") from exc
            except httpx.HTTPError as exc:
                outcome = "transport_error"
                raise LLMTransportError(
                    f"LLM request failed: {type(exc).__name__}"
                ) from exc

            status_code = resp.status_code
            if not resp.is_success:
                outcome = "http_error"
                raise LLMTransportError(
                    f"LLM service returned HTTP {status_code}",
                    status_code=status_code,
                    body=_safe_error_body(
                        text=resp.text, secret=self.config.llm_api_key.get_secret_value()
                    ),
                )

            try:
                parsed = ChatCompletionsResponse.model_validate_json(resp.content)
            except ValidationError as exc:
                outcome = "malformed_response"
                raise LLMResponseError("LLM returned a malformed or empty response") from exc

            if not parsed.choices:
                outcome = "malformed_response"
                raise LLMResponseError(
                    "LLM returned a malformed or empty response: no completion returned"
                )

            try:
                first = Choice.model_validate(parsed.choices[0])
            except ValidationError as exc:
                outcome = "malformed_response"
                raise LLMResponseError("LLM returned a malformed or empty response") from exc

            outcome = "success"
            return first.message.content
        finally:
            duration = time.perf_counter() - started
            observe_llm_request(
                model=self._metric_model_label(effective_model),
                outcome=outcome,
                duration_seconds=duration,
            )
            logger.log(
                logging.INFO if outcome == "success" else logging.WARNING,
                "LLM request finished",
                extra={
                    "model": effective_model,
                    "status_code": status_code,
                    "duration_ms": round(duration * 1000.0, 2),
                    "outcome": outcome,
                },
            )

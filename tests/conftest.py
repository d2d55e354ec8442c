from __future__ import annotations

import pytest

_CONFIG_ENV_VARS = (
    "OPENROUTER_API_KEY",
    "LLM_API_KEY",
    "OPENROUTER_DEFAULT_MODEL",
    "LLM_DEFAULT_MODEL",
    "OPENROUTER_BASE_URL",
    "LLM_BASE_URL",
    "LLM_TIMEOUT_SECONDS",
    "OPENROUTER_HTTP_REFERER",
    "OPENROUTER_APP_TITLE",
    "JIRA_API_TOKEN",
    "JIRA_BASE_URL",
    "CROWDSTRIKE_API_TOKEN",
    "CROWDSTRIKE_BASE_URL",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Each test starts with no provider settings and an empty working directory,
    # so neither the developer's shell nor a stray .env leaks into assertions.
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
    monkeypatch.chdir(tmp_path)

"""Placeholder clients for external platforms.

Both clients are built from a shared `PagiConfig` and only check that their
token is configured before simulating the call. No network I/O happens yet.
"""

from __future__ import annotations

import logging

from pagi_external.core.settings import PagiConfig
from pagi_external.domain.exceptions import IntegrationNotConfiguredError

logger = logging.getLogger("pagi.integrations")


class JiraClient:
    """Issue-tracker placeholder."""

    def __init__(self, config: PagiConfig):
        self._config = config

    @property
    def base_url(self) -> str:
        return self._config.jira_base_url

    async def create_issue(self, summary: str) -> None:
        if not self._config.jira_api_token.get_secret_value():
            raise IntegrationNotConfiguredError("jira", "JIRA_API_TOKEN")

        # Simulated external API call; the summary may hold sensitive text, so it is not logged.
        logger.info("Simulated Jira issue creation", extra={"integration": "jira"})


class CrowdstrikeClient:
    """Security-platform placeholder."""

    def __init__(self, config: PagiConfig):
        self._config = config

    @property
    def base_url(self) -> str:
        return self._config.crowdstrike_base_url

    async def isolate_host(self, hostname: str) -> None:
        if not self._config.crowdstrike_api_token.get_secret_value():
            raise IntegrationNotConfiguredError("crowdstrike", "CROWDSTRIKE_API_TOKEN")

        logger.info("Simulated CrowdStrike host isolation", extra={"integration": "crowdstrike"})

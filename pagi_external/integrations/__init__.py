from __future__ import annotations

from pagi_external.integrations.api_clients import CrowdstrikeClient, JiraClient
from pagi_external.integrations.base import IssueTrackerClient, SecurityPlatformClient

__all__ = ["CrowdstrikeClient", "IssueTrackerClient", "JiraClient", "SecurityPlatformClient"]

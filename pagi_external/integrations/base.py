from __future__ import annotations

from typing import Protocol


class IssueTrackerClient(Protocol):
    async def create_issue(self, summary: str) -> None: ...


class SecurityPlatformClient(Protocol):
    async def isolate_host(self, hostname: str) -> None: ...

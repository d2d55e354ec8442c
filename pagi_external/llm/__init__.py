"""LLM integration layer.

Small on purpose:
- One provider (OpenRouter / OpenAI-compatible chat completions).
- Configured explicitly from a loaded `PagiConfig`.
- No prompt/output logging.
"""

from __future__ import annotations

from pagi_external.llm.provider import LLMProvider

__all__ = ["LLMProvider"]

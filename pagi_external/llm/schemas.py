"""Wire shapes for the OpenAI-compatible chat-completions endpoint."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

ChatRole = Literal["system", "user"]


class ChatMessage(BaseModel):
    role: ChatRole
    content: str


class ChatCompletionsRequest(BaseModel):
    model: str
    messages: list[ChatMessage]


class ChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ChoiceMessage


class ChatCompletionsResponse(BaseModel):
    """
    Subset of the provider response we consume.

    Only `choices[0]` is checked against `Choice`; later choices (e.g. tool calls with
    `content: null`) and every other field are ignored and may be absent.
    """

    model_config = ConfigDict(extra="ignore")

    choices: list[Any]


def build_chat_request(*, prompt: str, system_prompt: str, model: str) -> ChatCompletionsRequest:
    """Build the two-message request body: system turn first, then the user turn."""
    return ChatCompletionsRequest(
        model=model,
        messages=[
            ChatMessage(role="system", content=system_prompt),
            ChatMessage(role="user", content=prompt),
        ],
    )

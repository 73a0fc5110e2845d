"""Provider API data models.

Dataclass models for the response bodies of the chat-completions style APIs (DeepSeek, OpenAI)
and the Anthropic messages API. Only the fields the adapters read are declared; unknown keys
are ignored by dataclasses-json.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, dataclass_json

__all__: list[str] = ["ChatCompletionResponse", "MessagesResponse"]


@dataclass_json
@dataclass
class _ChatMessage(DataClassJsonMixin):
    role: str
    content: str | None


@dataclass_json
@dataclass
class _ChatChoice(DataClassJsonMixin):
    """One completion choice.

    Attributes:
        index (int): Position of the choice in the response.
        message (_ChatMessage): Assistant message holding the translation.
        finish_reason (str | None): Why generation stopped, e.g. "stop" or "length".
    """

    message: _ChatMessage
    index: int = 0
    finish_reason: str | None = None


@dataclass_json
@dataclass
class _Usage(DataClassJsonMixin):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass_json
@dataclass
class ChatCompletionResponse(DataClassJsonMixin):
    """Response body of a chat-completions request.

    Attributes:
        choices (list[_ChatChoice]): Generated choices; the first one is used.
        model (str): Model that served the request.
        usage (_Usage | None): Token accounting, when reported.
    """

    choices: list[_ChatChoice]
    model: str = ""
    usage: _Usage | None = None

    @property
    def first_content(self) -> str | None:
        if not self.choices:
            return None
        return self.choices[0].message.content


@dataclass_json
@dataclass
class _ContentBlock(DataClassJsonMixin):
    type: str
    text: str | None = None


@dataclass_json
@dataclass
class MessagesResponse(DataClassJsonMixin):
    """Response body of an Anthropic messages request.

    Attributes:
        content (list[_ContentBlock]): Content blocks; the first text block is used.
        model (str): Model that served the request.
        stop_reason (str | None): Why generation stopped.
    """

    content: list[_ContentBlock] = field(default_factory=list)
    model: str = ""
    stop_reason: str | None = None

    @property
    def first_text(self) -> str | None:
        for block in self.content:
            if block.type == "text" and block.text is not None:
                return block.text
        return None

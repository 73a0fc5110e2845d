from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from core.trans.engines.chat_completion import ChatCompletionTranslation
from core.trans.engines.trans_openai import OpenAITranslation
from models.config_models import Config
from models.translation_models import TranslationRequest, TranslationResult


@pytest.fixture
def engine(monkeypatch: pytest.MonkeyPatch) -> OpenAITranslation:
    monkeypatch.setenv("OPENAI_API_KEY", "openai-key")
    instance = OpenAITranslation()
    instance.initialize(Config())
    return instance


def test_uses_shared_system_prompt(engine: OpenAITranslation) -> None:
    request = TranslationRequest(text="Goal", source_lang="en", target_lang="zh-CN")

    payload = engine.build_payload(request)

    assert payload["model"] == "gpt-4"
    assert payload["max_tokens"] == 3000
    assert payload["messages"][0]["content"] == ChatCompletionTranslation.SYSTEM_PROMPT
    assert "常用术语对照" not in payload["messages"][1]["content"]
    assert engine.build_headers() == {"Authorization": "Bearer openai-key"}


@pytest.mark.asyncio
async def test_translation(engine: OpenAITranslation) -> None:
    http = MagicMock()
    http.post = AsyncMock(return_value={"choices": [{"message": {"role": "assistant", "content": "进球"}}]})
    engine.http = http

    result: TranslationResult = await engine.translation(
        TranslationRequest(text="Goal", source_lang="en", target_lang="zh-CN")
    )

    assert result.translated_text == "进球"
    assert result.model == "gpt-4"
    assert result.confidence == pytest.approx(0.90)

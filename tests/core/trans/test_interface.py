"""Unit tests for core.trans.interface module."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import ClassVar

import pytest

from core.trans import interface
from core.trans.interface import (
    ProviderAttributes,
    ProviderError,
    ProviderFailure,
    ProviderRateLimitError,
    ProviderSuccess,
    ProviderTimeoutError,
    TransInterface,
)
from models.translation_models import TranslationRequest, TranslationResult


class InterfaceDummyEngine(TransInterface):
    translation_error: ClassVar[BaseException | None] = None
    delay: ClassVar[float] = 0.0

    @staticmethod
    def fetch_engine_name() -> str:
        return "interface_dummy"

    def initialize(self, config) -> None:
        _ = config
        self.provider_attributes = ProviderAttributes(
            name=self.fetch_engine_name(),  # type: ignore[arg-type]
            model="dummy-model",
            confidence=0.9,
        )

    async def translation(self, request: TranslationRequest) -> TranslationResult:
        if type(self).delay:
            await asyncio.sleep(type(self).delay)
        err: BaseException | None = type(self).translation_error
        if err is not None:
            raise err
        return TranslationResult(
            translated_text="进球",
            confidence=self.confidence,
            quality_score=0.9,
            model=self.provider_attributes.model,
            processing_time=1,
            original_text=request.text,
            source_lang=request.source_lang,
            target_lang=request.target_lang,
        )

    async def close(self) -> None:
        pass


class FakeMonotonic:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now: float = now

    def monotonic(self) -> float:
        return self.now


@pytest.fixture(autouse=True)
def reset_engine_state() -> None:
    InterfaceDummyEngine.translation_error = None
    InterfaceDummyEngine.delay = 0.0


@pytest.fixture
def engine() -> InterfaceDummyEngine:
    instance = InterfaceDummyEngine()
    instance.initialize(None)
    return instance


@pytest.fixture
def fake_time(monkeypatch: pytest.MonkeyPatch) -> FakeMonotonic:
    fake = FakeMonotonic()
    monkeypatch.setattr(interface, "time", SimpleNamespace(monotonic=fake.monotonic))
    return fake


@pytest.fixture
def translation_request() -> TranslationRequest:
    return TranslationRequest(text="Goal", source_lang="en", target_lang="zh-CN")


def test_subclass_is_registered() -> None:
    assert TransInterface.registered["interface_dummy"] is InterfaceDummyEngine


def test_llm_providers_are_registered() -> None:
    import core.trans.engines  # noqa: F401

    assert {"deepseek", "claude", "openai"} <= set(TransInterface.registered)
    assert "" not in TransInterface.registered


def test_duplicate_name_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(TransInterface, "registered", {"interface_dummy": InterfaceDummyEngine})

    with pytest.raises(ValueError, match="already registered"):

        class _Duplicate(InterfaceDummyEngine):
            pass


def test_empty_name_is_not_registered(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(TransInterface, "registered", {})

    class _Intermediate(InterfaceDummyEngine):
        @staticmethod
        def fetch_engine_name() -> str:
            return ""

    assert TransInterface.registered == {}


def test_provider_attributes_set_once(engine: InterfaceDummyEngine) -> None:
    assert engine.engine_name == "interface_dummy"
    assert engine.confidence == pytest.approx(0.9)

    with pytest.raises(RuntimeError):
        engine.provider_attributes = ProviderAttributes(name="openai", model="x", confidence=0.1)


def test_provider_attributes_unset_raises() -> None:
    with pytest.raises(RuntimeError):
        _ = InterfaceDummyEngine().provider_attributes


def test_get_authentication_key(monkeypatch: pytest.MonkeyPatch, engine: InterfaceDummyEngine) -> None:
    monkeypatch.setenv("INTERFACE_DUMMY_API_KEY", "secret")
    assert engine.get_authentication_key() == "secret"

    monkeypatch.delenv("INTERFACE_DUMMY_API_KEY")
    assert engine.get_authentication_key() == ""


@pytest.mark.asyncio
async def test_attempt_success(engine: InterfaceDummyEngine, translation_request: TranslationRequest) -> None:
    outcome = await engine.attempt(translation_request, timeout=1.0)

    assert isinstance(outcome, ProviderSuccess)
    assert outcome.result.translated_text == "进球"


@pytest.mark.asyncio
async def test_attempt_timeout(engine: InterfaceDummyEngine, translation_request: TranslationRequest) -> None:
    InterfaceDummyEngine.delay = 1.0

    outcome = await engine.attempt(translation_request, timeout=0.01)

    assert isinstance(outcome, ProviderFailure)
    assert isinstance(outcome.error, ProviderTimeoutError)
    assert outcome.provider == "interface_dummy"
    assert engine.is_available


@pytest.mark.asyncio
async def test_attempt_provider_error(engine: InterfaceDummyEngine, translation_request: TranslationRequest) -> None:
    InterfaceDummyEngine.translation_error = ProviderError("boom")

    outcome = await engine.attempt(translation_request, timeout=1.0)

    assert isinstance(outcome, ProviderFailure)
    assert outcome.reason == "boom"
    assert engine.is_available


@pytest.mark.asyncio
async def test_attempt_rate_limit_starts_cooldown(
    engine: InterfaceDummyEngine, translation_request: TranslationRequest, fake_time: FakeMonotonic
) -> None:
    InterfaceDummyEngine.translation_error = ProviderRateLimitError("429")

    outcome = await engine.attempt(translation_request, timeout=1.0)

    assert isinstance(outcome, ProviderFailure)
    assert isinstance(outcome.error, ProviderRateLimitError)
    assert not engine.is_available

    fake_time.now += 1.0
    assert engine.is_available


@pytest.mark.asyncio
async def test_attempt_propagates_unexpected_errors(
    engine: InterfaceDummyEngine, translation_request: TranslationRequest
) -> None:
    InterfaceDummyEngine.translation_error = RuntimeError("bug")

    with pytest.raises(RuntimeError):
        await engine.attempt(translation_request, timeout=1.0)


def test_rate_limit_backoff_doubles_and_caps(engine: InterfaceDummyEngine, fake_time: FakeMonotonic) -> None:
    backoffs: list[float] = []
    for _ in range(7):
        backoffs.append(engine.register_rate_limit())
        fake_time.now += 0.5

    assert backoffs == [1.0, 2.0, 4.0, 8.0, 16.0, 30.0, 30.0]


def test_rate_limit_backoff_resets_after_quiet_period(
    engine: InterfaceDummyEngine, fake_time: FakeMonotonic
) -> None:
    engine.register_rate_limit()
    engine.register_rate_limit()

    fake_time.now += 61.0

    assert engine.is_available
    assert engine.register_rate_limit() == 1.0

"""
Translation Service Tests
"""

from unittest.mock import AsyncMock

import pytest

from portal_translations.core.config import settings
from portal_translations.core.errors import ExternalServiceError
from portal_translations.services.translation.prompts import build_translation_messages
from portal_translations.services.translation.translation_service import TranslationService


def _openai(reply):
    client = AsyncMock()
    client.chat_completion.return_value = reply
    return client


@pytest.mark.asyncio
async def test_translate_strips_reply():
    client = _openai("  Bienvenido\n")
    service = TranslationService(client=client, provider="OPENAI")

    result = await service.translate("Welcome", "ES")

    assert result == "Bienvenido"
    args, kwargs = client.chat_completion.await_args
    assert args[0] == build_translation_messages("Welcome", "es")
    assert kwargs["temperature"] == settings.translation_temperature
    assert kwargs["max_tokens"] == settings.translation_max_tokens


@pytest.mark.asyncio
async def test_empty_reply_is_an_error():
    service = TranslationService(client=_openai("   "), provider="OPENAI")

    with pytest.raises(ExternalServiceError):
        await service.translate("Welcome", "es")


@pytest.mark.asyncio
async def test_model_error_propagates():
    client = AsyncMock()
    client.chat_completion.side_effect = ExternalServiceError("OpenAI API error: 500")
    service = TranslationService(client=client, provider="OPENAI")

    with pytest.raises(ExternalServiceError):
        await service.translate("Welcome", "es")


@pytest.mark.asyncio
async def test_mock_provider():
    client = _openai("unused")
    service = TranslationService(client=client, provider="MOCK")

    assert await service.translate("Welcome", "ht") == "[ht] Welcome"
    assert await service.translate_query("comida") == "comida"
    client.chat_completion.assert_not_awaited()


@pytest.mark.asyncio
async def test_translate_query_uses_low_temperature():
    client = _openai("free food")
    service = TranslationService(client=client, provider="OPENAI")

    assert await service.translate_query("comida gratis") == "free food"
    kwargs = client.chat_completion.await_args.kwargs
    assert kwargs["temperature"] == 0.1
    assert kwargs["max_tokens"] == 100


@pytest.mark.asyncio
async def test_translate_query_falls_back_to_input():
    service = TranslationService(client=_openai(""), provider="OPENAI")

    assert await service.translate_query("comida gratis") == "comida gratis"


def test_prompt_names_target_language():
    messages = build_translation_messages("<b>Hello</b>", "ht")

    assert messages[0]["role"] == "system"
    assert "Haitian Creole (Kreyòl)" in messages[0]["content"]
    assert "Preserve any HTML tags" in messages[0]["content"]
    assert messages[1] == {"role": "user", "content": "<b>Hello</b>"}

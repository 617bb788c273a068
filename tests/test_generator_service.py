"""Tests for the generator service and the completion chain."""
from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from app.chains.post_chain import PostChain
from app.config.settings import settings
from app.schemas.request import GenerationRequest
from app.services.generator import generator_service
from app.utils.errors import ConfigurationError, TopicRequiredError, UpstreamError


class TestPostGeneratorService:

    @pytest.mark.asyncio
    async def test_generate_post(self, api_key, mock_chain):
        result = await generator_service.generate_post(
            GenerationRequest(topic="Candles", variantsCount=2, goal="leads")
        )

        assert result.success is True
        assert result.topic == "Candles"
        assert result.goal == "leads"
        assert result.variants_count == 2
        assert result.requested_variants_count == 2
        assert all(v.hook and v.caption for v in result.variants)

    @pytest.mark.asyncio
    async def test_missing_topic(self, api_key, mock_chain):
        with pytest.raises(TopicRequiredError):
            await generator_service.generate_post(GenerationRequest(topic=""))

        mock_chain.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_api_key(self, no_api_key, mock_chain):
        with pytest.raises(ConfigurationError) as exc_info:
            await generator_service.generate_post(GenerationRequest(topic="Candles"))

        assert exc_info.value.status_code == 500
        mock_chain.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_upstream_failure_is_wrapped(self, api_key, mock_chain):
        mock_chain.complete = AsyncMock(side_effect=ConnectionError("network down"))

        with pytest.raises(UpstreamError) as exc_info:
            await generator_service.generate_post(GenerationRequest(topic="Candles"))

        assert exc_info.value.to_dict() == {
            "success": False,
            "error": "Failed to generate post.",
            "details": "network down",
        }
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_failed_call_is_not_retried(self, api_key, mock_chain):
        mock_chain.complete = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(UpstreamError):
            await generator_service.generate_post(GenerationRequest(topic="Candles"))

        assert mock_chain.complete.await_count == 1


class TestPostChain:

    def test_llm_configuration(self, api_key):
        llm = PostChain()._get_llm()

        assert llm.model_name == settings.openai_model
        assert llm.temperature == settings.generation_temperature
        assert llm.max_retries == 0

    @pytest.mark.asyncio
    async def test_complete_passes_json_braces_through(self):
        reply = '{"variants": [{"hook": "Hi", "caption": "Hello.", "hashtags": []}]}'
        fake_llm = FakeListChatModel(responses=[reply])
        chain = PostChain()

        with patch.object(chain, "_get_llm", return_value=fake_llm):
            result = await chain.complete(
                "Answer with JSON only.",
                'Return { "variants": [ { "hook": string } ] }'
            )

        assert result == reply

    def test_prompt_keeps_braces_literal(self):
        messages = PostChain().prompt.format_messages(
            system_prompt="system",
            user_prompt='{ "variants": [] }'
        )

        assert [m.type for m in messages] == ["system", "human"]
        assert messages[1].content == '{ "variants": [] }'

"""
Tests for the assistant LLM client and guidance service.

HTTP calls are mocked.
"""

import json
import pytest
import httpx
from unittest.mock import AsyncMock, patch

from carecompanion.llm.client import LLMClient
from carecompanion.llm.prompts import GUIDANCE_SYSTEM, FALLBACK_RESPONSE, NO_CONTEXT
from carecompanion.schemas.chat import AssistantContext
from carecompanion.services.assistant_service import AssistantService, make_title


class TestLLMClient:
    """Tests for the chat completions client."""

    def test_client_initialization(self):
        client = LLMClient()
        assert client.model == "gpt-4.1-nano"
        assert client.base_url == "https://api.openai.com/v1"
        assert client.headers["Authorization"] == "Bearer test-key"

    def test_client_custom_model(self):
        client = LLMClient(model="gpt-4o-mini")
        assert client.model == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_complete_text(self):
        client = LLMClient()

        mock_response = {
            "choices": [
                {
                    "message": {
                        "content": "Try narrating play to build shared attention."
                    }
                }
            ]
        }

        with patch.object(client, "complete", new_callable=AsyncMock) as mock_complete:
            mock_complete.return_value = mock_response

            result = await client.complete_text(
                messages=[{"role": "user", "content": "test"}]
            )

            assert result == "Try narrating play to build shared attention."
            mock_complete.assert_called_once()


class TestAssistantService:
    """Tests for reply generation."""

    @pytest.mark.asyncio
    async def test_generate_response_without_context(self):
        llm = LLMClient()
        with patch.object(llm, "complete_text", new_callable=AsyncMock) as mock_complete:
            mock_complete.return_value = "Hello"

            service = AssistantService(db=None, llm=llm)
            result = await service.generate_response("What is M-CHAT?")

            assert result == "Hello"
            messages = mock_complete.call_args[0][0]
            assert messages[0]["role"] == "system"
            assert NO_CONTEXT in messages[0]["content"]
            assert messages[1] == {"role": "user", "content": "What is M-CHAT?"}

    @pytest.mark.asyncio
    async def test_generate_response_with_context(self):
        llm = LLMClient()
        with patch.object(llm, "complete_text", new_callable=AsyncMock) as mock_complete:
            mock_complete.return_value = "Hello"

            service = AssistantService(db=None, llm=llm)
            context = AssistantContext(child_age=20, recent_assessments=["medium risk"])
            await service.generate_response("How is my child doing?", context)

            system_prompt = mock_complete.call_args[0][0][0]["content"]
            assert json.dumps({"child_age": 20, "recent_assessments": ["medium risk"]}) in system_prompt

    @pytest.mark.asyncio
    async def test_generate_response_falls_back_on_http_error(self):
        llm = LLMClient()
        with patch.object(llm, "complete_text", new_callable=AsyncMock) as mock_complete:
            mock_complete.side_effect = httpx.ConnectError("connection refused")

            service = AssistantService(db=None, llm=llm)
            result = await service.generate_response("Hello?")

            assert result == FALLBACK_RESPONSE

    @pytest.mark.asyncio
    async def test_generate_response_falls_back_on_malformed_payload(self):
        llm = LLMClient()
        with patch.object(llm, "complete", new_callable=AsyncMock) as mock_complete:
            mock_complete.return_value = {"choices": []}

            service = AssistantService(db=None, llm=llm)
            result = await service.generate_response("Hello?")

            assert result == FALLBACK_RESPONSE

    def test_make_title(self):
        assert make_title("Short question") == "Short question"
        long_message = "x" * 60
        assert make_title(long_message) == "x" * 50 + "..."
        assert make_title("y" * 50) == "y" * 50


class TestPromptTemplates:

    def test_guidance_prompt_has_context_slot(self):
        assert "{context}" in GUIDANCE_SYSTEM

    def test_guidance_prompt_rules_out_diagnosis(self):
        lower_prompt = GUIDANCE_SYSTEM.lower()
        assert "never provide medical diagnoses" in lower_prompt

"""
Tests for SuggestionService.

These tests verify:
1. The provider is never called when there is nothing missing
2. The prompt names every missing keyword and carries the system prompt
3. Model output is reduced to at most five bullet lines
4. Provider errors surface unchanged
"""

import pytest
from unittest.mock import AsyncMock, patch

from resume_analyzer.agent import AgentManager
from resume_analyzer.agent.exceptions import ConfigurationError, QuotaExceededError
from resume_analyzer.prompt import RESUME_SUGGESTIONS_SYSTEM_PROMPT
from resume_analyzer.services import SuggestionService

MODEL_OUTPUT = """Here are some bullet points for your resume:

- Deployed containerised services to Kubernetes, cutting release time by 40%
- Provisioned AWS infrastructure with Terraform across three environments
Based on the keywords above, consider also:
- Built CI/CD pipelines in GitHub Actions for 12 repositories
- Automated cluster monitoring with Prometheus and Grafana
- Migrated legacy cron jobs to Airflow DAGs
- Mentored two junior engineers on infrastructure as code
"""


class TestSuggestionService:
    @pytest.mark.asyncio
    async def test_empty_missing_list_skips_provider(self):
        agent_manager = AsyncMock()
        service = SuggestionService(agent_manager=agent_manager)

        assert await service.generate([]) == []
        agent_manager.run.assert_not_called()

    def test_prompt_lists_missing_keywords(self):
        prompt = SuggestionService.build_prompt(["kubernetes", "terraform", "aws cloud"])

        assert "missing from the resume: kubernetes, terraform, aws cloud." in prompt
        assert "3-5 professional resume bullet points" in prompt
        assert prompt.endswith("Return only the bullet points, one per line.")

    @pytest.mark.asyncio
    async def test_runs_agent_with_system_prompt(self):
        agent_manager = AsyncMock()
        agent_manager.run.return_value = ["Deployed services to Kubernetes"]
        service = SuggestionService(agent_manager=agent_manager)

        result = await service.generate(["kubernetes"])

        assert result == ["Deployed services to Kubernetes"]
        args, kwargs = agent_manager.run.call_args
        assert "kubernetes" in args[0]
        assert kwargs["system"] == RESUME_SUGGESTIONS_SYSTEM_PROMPT

    @pytest.mark.asyncio
    async def test_parses_model_output_end_to_end(self):
        provider = AsyncMock(return_value=MODEL_OUTPUT)
        agent_manager = AgentManager(strategy="lines", model_provider="gateway", api_key="test-key")

        with patch.object(agent_manager, "_get_provider", AsyncMock(return_value=provider)):
            result = await SuggestionService(agent_manager=agent_manager).generate(
                ["kubernetes", "terraform"]
            )

        assert len(result) == 5
        assert all(result)
        assert not any(line.lower().startswith(("here", "based")) for line in result)
        assert result[0].startswith("- Deployed containerised services")
        provider.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_credential_raises_configuration_error(self):
        agent_manager = AgentManager(strategy="lines", model_provider="gateway", api_key=None)

        with pytest.raises(ConfigurationError) as exc_info:
            await SuggestionService(agent_manager=agent_manager).generate(["kubernetes"])

        assert str(exc_info.value) == "AI service not configured"

    @pytest.mark.asyncio
    async def test_provider_error_surfaces(self):
        agent_manager = AsyncMock()
        agent_manager.run.side_effect = QuotaExceededError()

        with pytest.raises(QuotaExceededError):
            await SuggestionService(agent_manager=agent_manager).generate(["kubernetes"])

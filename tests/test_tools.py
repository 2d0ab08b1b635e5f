"""
Capability tool tests.

The sentiment tool's Gemini client is patched at construction time; its
async generate_content is an AsyncMock returning canned response text.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from care_agent.errors import ToolNotFoundError
from care_agent.services.record_store import SimulatedRecordStore
from care_agent.services.vitals_service import SimulatedVitalsSource
from care_agent.tools import Capability, LabsTool, SentimentTool, ToolRegistry, VitalsTool

pytestmark = pytest.mark.anyio


def _gemini_response(text: str) -> MagicMock:
    mock_resp = MagicMock()
    mock_resp.text = text
    return mock_resp


class TestToolRegistry:

    def test_find_by_capability(self):
        vitals = VitalsTool(SimulatedVitalsSource())
        labs = LabsTool(SimulatedRecordStore())
        registry = ToolRegistry([vitals, labs])
        assert registry.find(Capability.LABS) is labs
        assert registry.has(Capability.VITALS)
        assert len(registry) == 2

    def test_missing_capability_raises(self):
        with pytest.raises(ToolNotFoundError) as exc_info:
            ToolRegistry([]).find(Capability.SENTIMENT)
        assert exc_info.value.capability == Capability.SENTIMENT
        assert "sentiment" in str(exc_info.value)

    def test_first_registered_tool_wins(self):
        first = VitalsTool(SimulatedVitalsSource())
        second = VitalsTool(SimulatedVitalsSource())
        assert ToolRegistry([first, second]).find(Capability.VITALS) is first


class TestVitalsTool:

    async def test_formats_reading(self):
        source = SimulatedVitalsSource({"P002": {"spo2": ("88%", False)}})
        assert await VitalsTool(source).execute(" P002 ") == "spo2 88% (abnormal)"

    async def test_empty_reading(self):
        source = SimulatedVitalsSource({"P003": {}})
        assert await VitalsTool(source).execute("P003") == "no vitals recorded"


class TestLabsTool:

    async def test_lists_chart_labs(self):
        result = await LabsTool(SimulatedRecordStore()).execute("P001")
        assert "potassium 4.1 mmol/L" in result

    async def test_no_labs(self):
        store = SimulatedRecordStore({"P002": {"vitals": {}}})
        assert await LabsTool(store).execute("P002") == "no lab results on file for P002"


class TestSentimentTool:

    def _tool(self, text):
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(return_value=_gemini_response(text))
        with patch("care_agent.tools.sentiment_tool.genai.Client", return_value=client):
            tool = SentimentTool(project_id="test-project")
            tool.setup()
        return tool, client

    def test_setup_requires_project(self):
        with pytest.raises(ValueError):
            SentimentTool(project_id=None).setup()

    async def test_parses_fenced_json(self):
        payload = json.dumps({"label": "distressed", "score": 0.91})
        tool, client = self._tool(f"```json\n{payload}\n```")

        assert await tool.execute("I'm scared about the surgery") == "sentiment distressed (score 0.91)"
        client.aio.models.generate_content.assert_awaited_once()

    async def test_bad_json_is_unknown(self):
        tool, _ = self._tool("not valid json")
        assert await tool.execute("ok") == "sentiment unknown (score 0.00)"

    async def test_non_numeric_score_degrades_to_zero(self):
        tool, _ = self._tool('{"label": "negative", "score": "high"}')
        assert await tool.execute("this is awful") == "sentiment negative (score 0.00)"

    def test_function_tool_carries_name(self):
        tool, _ = self._tool("{}")
        assert tool.as_function_tool().name == "score_sentiment"

"""ADK root agent wiring: name, model, tools and the rendered instruction."""

import pytest

from care_agent.agent import build_instruction, build_root_agent
from care_agent.models import AgentMode
from care_agent.services.record_store import SimulatedRecordStore
from care_agent.tools.labs_tool import LabsTool

pytestmark = pytest.mark.anyio


class TestRootAgent:

    def test_name_and_model(self, builder):
        root = build_root_agent(builder.build(), model="gemini-test")
        assert root.name == "CareCompanionAI"
        assert root.model == "gemini-test"

    def test_registers_engine_and_capability_tools(self, builder):
        agent = builder.with_tool(LabsTool(SimulatedRecordStore())).build()
        root = build_root_agent(agent)
        names = [tool.name for tool in root.tools]
        assert names == ["interact", "monitor_vitals", "check_vitals", "check_labs"]

    async def test_interact_tool_calls_engine(self, builder):
        agent = builder.with_mode(AgentMode.CHATBOT).build()
        root = build_root_agent(agent)
        interact = root.tools[0].func
        assert await interact("hello") == "Hello! How can I help you today?"


class TestInstruction:

    def test_includes_role_patient_and_notes(self, builder):
        agent = builder.with_mode(AgentMode.NURSE).with_context("Fall risk").build()
        instruction = build_instruction(agent)
        assert "Role: nurse" in instruction
        assert "Patient on record: P001" in instruction
        assert "- Fall risk" in instruction
        assert AgentMode.NURSE.preamble in instruction

    def test_no_notes(self, builder):
        assert "- None" in build_instruction(builder.build())

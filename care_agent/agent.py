"""
Care Companion - ADK root agent

Wraps a configured care Agent for an LLM front end:
- interact:        runs the role pipeline for a free-text query
- monitor_vitals:  vitals report, logged to ledger and record store
- every registered capability tool (vitals, labs, sentiment) as a FunctionTool

The LLM only routes and phrases; all clinical content comes from the tools.
"""

import logging

from google.adk.agents import Agent as AdkAgent
from google.adk.tools import FunctionTool

from care_agent.engine import Agent
from care_agent.settings import DEFAULT_MODEL

logger = logging.getLogger(__name__)

INSTRUCTION_TEMPLATE = """You are the Care Companion assistant on a hospital ward.

Role: {role}
Patient on record: {patient_id}
Role greeting: {preamble}

## Context notes
{context_notes}

## WORKFLOW
1. For any question from the user, call `interact` with their exact words and
   relay its answer.
2. When asked to check or monitor vitals for a patient, call `monitor_vitals`
   with the patient id.
3. Use the capability tools only when the user explicitly asks for that check.

## RULES
- Do NOT invent clinical facts, doses or compatibility results.
- Do NOT make a final diagnosis. Defer to the care team.
- Keep replies short and in plain language.
"""


def build_instruction(agent: Agent) -> str:
    notes = "\n".join(f"- {note}" for note in agent.context) or "- None"
    return INSTRUCTION_TEMPLATE.format(
        role=agent.mode.value,
        patient_id=agent.chart.patient_id,
        preamble=agent.mode.preamble,
        context_notes=notes,
    )


def build_root_agent(agent: Agent, model: str = DEFAULT_MODEL) -> AdkAgent:
    async def interact(query: str) -> str:
        """
        Answer a user query through the care agent's role pipeline.

        Args:
            query: the user's words, unmodified

        Returns:
            The composed response text.
        """
        return await agent.interact(query)

    async def monitor_vitals(patient_id: str) -> str:
        """
        Fetch, report and log the latest vitals for a patient.

        Args:
            patient_id: hospital patient identifier (e.g. "P001")

        Returns:
            A vitals report listing every reading.
        """
        return await agent.monitor(patient_id)

    tools = [FunctionTool(interact), FunctionTool(monitor_vitals)]
    tools.extend(tool.as_function_tool() for tool in agent.tools)
    logger.info(f"[RootAgent] {len(tools)} tools registered for {agent.mode.value} mode")

    return AdkAgent(
        name="CareCompanionAI",
        model=model,
        description=(
            "Role-aware ward assistant for nurses, patients, technicians, "
            "pharmacists and physicians."
        ),
        instruction=build_instruction(agent),
        tools=tools,
    )

"""Nurse mode: surface the most severe pending task, then prompt a needs assessment."""

from care_agent.agents.context import TurnContext
from care_agent.task_queue import prioritize

NEEDS_ASSESSMENT = "Let's also assess the patient's current needs: pain, mobility, hydration and comfort."


async def respond(ctx: TurnContext) -> str:
    return f"Top priority: {prioritize(ctx.tasks)}. {NEEDS_ASSESSMENT}"

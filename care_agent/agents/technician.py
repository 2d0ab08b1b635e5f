"""Technician mode: pass the first pending task along as a request."""

from care_agent.agents.context import TurnContext
from care_agent.task_queue import NO_TASKS


async def respond(ctx: TurnContext) -> str:
    if not ctx.tasks:
        return f"Nothing to hand over right now: {NO_TASKS}."
    task = ctx.tasks[0]
    return f"Could you please do me a favor and take care of this for patient {task.patient_id}: {task.description}? Thank you!"

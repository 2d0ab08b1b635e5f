"""Physician mode: specialty insight lookups, otherwise a credentialing notice."""

import logging

from care_agent.agents.commands import SPECIALTY_COMMAND, command_args, parse_specialty_command
from care_agent.agents.context import TurnContext
from care_agent.errors import ParseError
from care_agent.knowledge import specialty_insight

logger = logging.getLogger(__name__)

CREDENTIALING = (
    "Order entry and chart sign-off require verified physician credentials. "
    f"Available here: {SPECIALTY_COMMAND} <specialty> <condition>."
)


async def respond(ctx: TurnContext) -> str:
    args = command_args(ctx.query, SPECIALTY_COMMAND)
    if args is None:
        return CREDENTIALING
    try:
        specialty, condition = parse_specialty_command(args)
    except ParseError as e:
        logger.warning(f"[Physician] {e}")
        return e.usage
    return specialty_insight(specialty, condition)

"""Pharmacist mode: IV compatibility checks, otherwise a credentialing notice."""

import logging

from care_agent.agents.commands import IV_COMMAND, command_args, parse_iv_command
from care_agent.agents.context import TurnContext
from care_agent.errors import ParseError
from care_agent.knowledge import check_iv_compatibility

logger = logging.getLogger(__name__)

CREDENTIALING = (
    "Pharmacy verification, dispensing and order review require verified pharmacist "
    f"credentials. Available here: {IV_COMMAND} <drug-a> <drug-b>."
)


async def respond(ctx: TurnContext) -> str:
    args = command_args(ctx.query, IV_COMMAND)
    if args is None:
        return CREDENTIALING
    try:
        drug_a, drug_b = parse_iv_command(args)
    except ParseError as e:
        logger.warning(f"[Pharmacist] {e}")
        return e.usage
    return check_iv_compatibility(drug_a, drug_b)

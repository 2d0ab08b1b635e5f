"""Positional parsing for the structured pharmacist and physician commands."""

from typing import List, Optional

from care_agent.errors import ParseError

IV_COMMAND = "iv-compat"
SPECIALTY_COMMAND = "specialty"

IV_USAGE = (
    f"Usage: {IV_COMMAND} <drug-a> <drug-b>  (e.g. {IV_COMMAND} dopamine norepinephrine; "
    "join multi-word names with hyphens, e.g. potassium-chloride)"
)
SPECIALTY_USAGE = f"Usage: {SPECIALTY_COMMAND} <specialty> <condition>  (e.g. {SPECIALTY_COMMAND} cardiology heart failure)"


def command_args(query: str, command: str) -> Optional[List[str]]:
    """Arguments after `command`, or None when the query is not that command."""
    tokens = query.strip().split()
    if not tokens or tokens[0].lower() != command:
        return None
    return tokens[1:]


def parse_iv_command(args: List[str]) -> tuple:
    if len(args) != 2:
        raise ParseError(f"{IV_COMMAND} expects exactly two drugs, got {len(args)}", IV_USAGE)
    return args[0], args[1]


def parse_specialty_command(args: List[str]) -> tuple:
    if len(args) < 2:
        raise ParseError(f"{SPECIALTY_COMMAND} expects a specialty and a condition", SPECIALTY_USAGE)
    return args[0], " ".join(args[1:])

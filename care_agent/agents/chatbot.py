"""General information desk: fixed phrases with a generic fallback."""

from care_agent.agents.context import TurnContext

PHRASES = (
    ("hello", "Hello! How can I help you today?"),
    ("visiting hours", "Visiting hours are 9 AM to 8 PM every day."),
    ("parking", "Visitor parking is in Garage B; validate your ticket at the front desk."),
    ("cafeteria", "The cafeteria is on the ground floor and is open 7 AM to 7 PM."),
    ("thank", "You're welcome! Take care."),
)
FALLBACK = "I'm not sure about that one. Could you rephrase, or ask a member of staff?"


async def respond(ctx: TurnContext) -> str:
    text = ctx.query.lower()
    for keyword, phrase in PHRASES:
        if keyword in text:
            return phrase
    return FALLBACK

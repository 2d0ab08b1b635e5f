"""
Patient mode.

Status, medication and escalation questions run the bedside composition
pipeline:

  assess -> treat -> diagnose -> comfort -> escalate -> close

Each step returns a phrase (possibly empty) and the non-empty phrases are
concatenated in that order. Anything else is answered from a small phrase
table.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from care_agent.agents.context import TurnContext
from care_agent.errors import CollaboratorError, ToolNotFoundError
from care_agent.models import AgentMode
from care_agent.tools.base import Capability

logger = logging.getLogger(__name__)

MEDICATION_TERMS = ("medication", "medicine", "meds", "pill", "dose")
STATUS_TERMS = ("status", "vitals", "how am i", "how are my")
ESCALATION_PREFIXES = ("ask the doctor", "tell the doctor", "ask my doctor")

COMFORT = "You're in good hands, and your care team is keeping a close eye on you. "
CLOSE = "Is there anything else I can help you with?"
VITALS_UNAVAILABLE = "Your vitals are unavailable right now, but your nurse can check them for you. "

PHRASES = (
    ("pain", "I'm sorry you're hurting. I'll let your nurse know right away."),
    ("thirsty", "I'll ask your nurse whether you can have something to drink."),
    ("bathroom", "Your nurse will be with you shortly to help."),
    ("cold", "I'll ask someone to bring you a warm blanket."),
    ("thank", "You're very welcome."),
)
FALLBACK = "I understand. I've let your care team know."


@dataclass(frozen=True)
class PatientIntent:
    medication: bool = False
    status: bool = False
    escalation: Optional[str] = None

    @property
    def composes(self) -> bool:
        return self.medication or self.status or self.escalation is not None


def parse_intent(query: str) -> PatientIntent:
    normalized = " ".join(query.split())
    text = normalized.lower()
    escalation = None
    for prefix in ESCALATION_PREFIXES:
        if text == prefix or text.startswith(prefix + " "):
            escalation = normalized[len(prefix):].strip()
            break
    return PatientIntent(
        medication=any(term in text for term in MEDICATION_TERMS),
        status=any(term in text for term in STATUS_TERMS),
        escalation=escalation,
    )


class PatientPipeline:
    def __init__(self, ctx: TurnContext):
        self.ctx = ctx
        self.intent = parse_intent(ctx.query)

    def assess(self) -> str:
        if self.intent.escalation is not None:
            return "I understand you'd like to reach your physician. "
        if self.intent.medication:
            return "Let me check your medication schedule. "
        if self.intent.status:
            return "Let me look at how you're doing. "
        return "Thank you for telling me how you feel. "

    def treat(self) -> str:
        if not self.intent.medication or not self.ctx.chart.medications:
            return ""
        med = self.ctx.chart.medications[0]
        minutes = int(med.remaining(self.ctx.now).total_seconds() // 60)
        if minutes == 0:
            return f"Your {med.name} {med.dose} ({med.route}) is due now. "
        return f"Your next dose of {med.name} {med.dose} ({med.route}) is due in {minutes} minutes. "

    async def diagnose(self) -> str:
        """Raises ToolNotFoundError when no vitals tool is registered."""
        if not self.intent.status:
            return ""
        tool = self.ctx.tools.find(Capability.VITALS)
        summary = await tool.execute(self.ctx.chart.patient_id)
        return f"Your latest vitals: {summary}. "

    def comfort(self) -> str:
        return COMFORT

    async def escalate(self) -> str:
        if self.intent.escalation is None:
            return ""
        await self.ctx.bus.post(
            sender=AgentMode.PATIENT.value,
            recipient=AgentMode.PHYSICIAN.value,
            body=f"Patient query: {self.intent.escalation}",
        )
        return "I've passed your question on to your physician. "

    def close(self) -> str:
        return CLOSE

    async def run(self) -> str:
        try:
            diagnosis = await self.diagnose()
        except (ToolNotFoundError, CollaboratorError) as e:
            logger.warning(f"[PatientPipeline] Vitals step degraded: {e}")
            diagnosis = VITALS_UNAVAILABLE

        parts = [
            self.assess(),
            self.treat(),
            diagnosis,
            self.comfort(),
            await self.escalate(),
            self.close(),
        ]
        return "".join(p for p in parts if p)


async def respond(ctx: TurnContext) -> str:
    pipeline = PatientPipeline(ctx)
    if pipeline.intent.composes:
        return await pipeline.run()

    text = ctx.query.lower()
    for keyword, phrase in PHRASES:
        if keyword in text:
            return phrase
    return FALLBACK

"""Vitals capability: summarizes the latest bedside reading for a patient."""

import logging

from care_agent.models import format_vitals
from care_agent.tools.base import Capability, CapabilityTool

logger = logging.getLogger(__name__)


class VitalsTool(CapabilityTool):
    capability = Capability.VITALS
    name = "check_vitals"
    description = "Fetch and summarize the latest vital signs for a patient id."

    def __init__(self, vitals_source):
        self.vitals_source = vitals_source

    async def execute(self, input: str) -> str:
        patient_id = input.strip()
        vitals = await self.vitals_source.stream(patient_id)
        logger.info(f"[VitalsTool] Summarized {len(vitals)} vitals for {patient_id}")
        return format_vitals(vitals) or "no vitals recorded"

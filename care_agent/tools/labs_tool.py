"""Labs capability: reports resulted labs from the patient's chart."""

import logging

from care_agent.tools.base import Capability, CapabilityTool

logger = logging.getLogger(__name__)


class LabsTool(CapabilityTool):
    capability = Capability.LABS
    name = "check_labs"
    description = "List resulted laboratory values on a patient's chart."

    def __init__(self, record_store):
        self.record_store = record_store

    async def execute(self, input: str) -> str:
        patient_id = input.strip()
        chart = await self.record_store.fetch_chart(patient_id)
        labs = chart.get("labs") or {}
        if not labs:
            return f"no lab results on file for {patient_id}"
        return ", ".join(f"{name} {value}" for name, value in labs.items())

"""
Vitals telemetry source.

Simulated: returns a fixed bedside reading for any patient id. Swap in a real
monitor integration by implementing `stream(patient_id)`.
"""

import logging
from typing import Dict

from care_agent.errors import CollaboratorError
from care_agent.models import VitalReading

logger = logging.getLogger(__name__)

DEFAULT_READING: Dict[str, VitalReading] = {
    "heart_rate": ("78 bpm", True),
    "blood_pressure": ("142/91 mmHg", False),
    "respiratory_rate": ("16 /min", True),
    "spo2": ("97%", True),
    "temperature": ("37.1 C", True),
}


class SimulatedVitalsSource:
    def __init__(self, readings: Dict[str, Dict[str, VitalReading]] = None):
        self._readings = readings or {}

    async def stream(self, patient_id: str) -> Dict[str, VitalReading]:
        if not patient_id:
            raise CollaboratorError("vitals source", "empty patient id")
        reading = self._readings.get(patient_id, DEFAULT_READING)
        logger.info(f"[Vitals] {len(reading)} readings for patient {patient_id}")
        return dict(reading)

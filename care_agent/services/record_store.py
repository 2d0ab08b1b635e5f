"""
Clinical record store.

Two implementations share one async interface:

  fetch_chart(patient_id) -> {"vitals", "medications", "demographics", "labs"}
  log_action(patient_id, action, credential) -> ack string

SimulatedRecordStore keeps charts in memory. HttpRecordStore talks to the
hospital backend at BACKEND_URL and, like the diagnosis submission flow,
records locally when the backend cannot be reached.
"""

import logging
from datetime import timedelta
from typing import Dict, List, Tuple

import httpx

from care_agent.errors import CollaboratorError
from care_agent.models import PatientRecord, utc_now

logger = logging.getLogger(__name__)


def demo_chart() -> dict:
    now = utc_now()
    return {
        "vitals": {
            "heart_rate": ("82 bpm", True),
            "blood_pressure": ("138/88 mmHg", False),
            "spo2": ("96%", True),
        },
        "medications": [
            {"name": "Metoprolol", "dose": "25 mg", "route": "PO", "time_due": now + timedelta(minutes=45)},
            {"name": "Enoxaparin", "dose": "40 mg", "route": "SC", "time_due": now + timedelta(hours=6)},
        ],
        "demographics": {"name": "Demo Patient", "age": "67", "ward": "4B"},
        "labs": {"potassium": "4.1 mmol/L", "creatinine": "1.3 mg/dL"},
    }


class SimulatedRecordStore:
    def __init__(self, charts: Dict[str, dict] = None):
        self._charts = charts if charts is not None else {"P001": demo_chart()}
        self._actions: List[Tuple[str, str, str]] = []

    @property
    def actions(self) -> Tuple[Tuple[str, str, str], ...]:
        return tuple(self._actions)

    async def fetch_chart(self, patient_id: str) -> dict:
        chart = self._charts.get(patient_id)
        if chart is None:
            raise CollaboratorError("record store", f"no chart for patient {patient_id}")
        return chart

    async def log_action(self, patient_id: str, action: str, credential: str) -> str:
        self._actions.append((patient_id, action, credential))
        logger.info(f"[RecordStore] {credential} logged '{action}' for {patient_id}")
        return f"ack:{patient_id}:{action}"


class HttpRecordStore:
    def __init__(self, backend_url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport = None):
        self.backend_url = backend_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def fetch_chart(self, patient_id: str) -> dict:
        url = f"{self.backend_url}/patients/{patient_id}/chart"
        logger.info(f"[RecordStore] Fetching chart from: {url}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            raise CollaboratorError("record store", f"chart fetch failed: {e}") from e

    async def log_action(self, patient_id: str, action: str, credential: str) -> str:
        url = f"{self.backend_url}/patients/{patient_id}/actions"
        payload = {"action": action, "credential": credential}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, json=payload)
                response.raise_for_status()
                data = response.json()
            return f"ack:{patient_id}:{data.get('action_id', action)}"
        except httpx.ConnectError:
            logger.warning(f"[RecordStore] Backend unreachable, recorded locally: {action}")
            return f"ack:{patient_id}:{action}:local"
        except httpx.HTTPError as e:
            raise CollaboratorError("record store", f"action log failed: {e}") from e


async def load_chart(record_store, patient_id: str) -> PatientRecord:
    chart = await record_store.fetch_chart(patient_id)
    return PatientRecord.from_chart(patient_id, chart)

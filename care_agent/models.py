"""
Data model shared by the engine, the mode pipelines and the collaborators.

Vitals are kept as `name -> (value, is_normal)` pairs everywhere so a chart
snapshot and a live vitals stream can be formatted the same way.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

VitalReading = Tuple[str, bool]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AgentMode(str, Enum):
    NURSE = "nurse"
    TECHNICIAN = "technician"
    PATIENT = "patient"
    PHARMACIST = "pharmacist"
    PHYSICIAN = "physician"
    CHATBOT = "chatbot"

    @property
    def preamble(self) -> str:
        return _PREAMBLES[self]


_PREAMBLES = {
    AgentMode.NURSE: "Nurse assistant ready. I'll keep your task list prioritized by severity.",
    AgentMode.TECHNICIAN: "Technician assistant ready. I'll pass along pending care requests.",
    AgentMode.PATIENT: "Hello, I'm your bedside care assistant. Ask me about your medications or how you're doing.",
    AgentMode.PHARMACIST: "Pharmacy assistant ready. Use 'iv-compat <drug> <drug>' to check Y-site compatibility.",
    AgentMode.PHYSICIAN: "Physician assistant ready. Use 'specialty <specialty> <condition>' for specialty insights.",
    AgentMode.CHATBOT: "Hospital information desk. How can I help you today?",
}


class UserPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: AgentMode = AgentMode.PATIENT
    language: str = "en"
    voice_enabled: bool = False


class PatientTask(BaseModel):
    id: int
    patient_id: str
    description: str
    severity: int = Field(ge=0, le=255)
    time_criticality: Optional[timedelta] = None
    last_updated: datetime = Field(default_factory=utc_now)


class Medication(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    dose: str
    route: str
    time_due: datetime

    @field_validator("time_due")
    @classmethod
    def time_due_as_utc(cls, value: datetime) -> datetime:
        # naive timestamps from the backend are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def remaining(self, now: datetime) -> timedelta:
        """Time left until the dose is due; zero once it is due or overdue."""
        return max(timedelta(0), self.time_due - now)


class PatientRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    patient_id: str
    vitals: Dict[str, VitalReading] = Field(default_factory=dict)
    medications: Tuple[Medication, ...] = ()
    demographics: Dict[str, str] = Field(default_factory=dict)
    labs: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_chart(cls, patient_id: str, chart: dict) -> "PatientRecord":
        """Build a record view from a record-store chart payload."""
        return cls(
            patient_id=patient_id,
            vitals={k: tuple(v) for k, v in (chart.get("vitals") or {}).items()},
            medications=tuple(Medication(**m) for m in chart.get("medications") or []),
            demographics=chart.get("demographics") or {},
            labs=chart.get("labs") or {},
        )


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender: str
    recipient: str
    body: str
    at: datetime = Field(default_factory=utc_now)


def format_vitals(vitals: Dict[str, VitalReading]) -> str:
    parts: List[str] = []
    for name, (value, is_normal) in vitals.items():
        parts.append(f"{name} {value} ({'normal' if is_normal else 'abnormal'})")
    return ", ".join(parts)

"""
Shared fixtures: a fixed clock, a seeded chart and a small task list.

Every async test in this suite runs through the anyio pytest plugin on the
asyncio backend.
"""

from datetime import datetime, timedelta, timezone

import pytest

from care_agent.config import AgentBuilder
from care_agent.models import Medication, PatientRecord, PatientTask
from care_agent.services.vitals_service import SimulatedVitalsSource
from care_agent.tools.vitals_tool import VitalsTool

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def chart() -> PatientRecord:
    return PatientRecord(
        patient_id="P001",
        vitals={"heart_rate": ("82 bpm", True)},
        medications=(
            Medication(name="Metoprolol", dose="25 mg", route="PO", time_due=NOW + timedelta(minutes=45)),
            Medication(name="Enoxaparin", dose="40 mg", route="SC", time_due=NOW + timedelta(hours=6)),
        ),
    )


@pytest.fixture
def tasks():
    return [
        PatientTask(id=1, patient_id="P001", description="Reposition patient", severity=40),
        PatientTask(id=2, patient_id="P001", description="Recheck blood pressure", severity=180),
        PatientTask(id=3, patient_id="P002", description="Answer call light", severity=180),
        PatientTask(id=4, patient_id="P001", description="Collect blood samples", severity=90),
    ]


@pytest.fixture
def builder(chart, tasks) -> AgentBuilder:
    return (
        AgentBuilder()
        .with_chart(chart)
        .with_tasks(tasks)
        .with_tool(VitalsTool(SimulatedVitalsSource()))
        .with_clock(lambda: NOW)
    )

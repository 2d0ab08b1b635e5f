"""
External collaborators: action ledger, clinical record store, vitals source.
All are async and can be swapped for real integrations without touching the engine.
"""

from care_agent.services.ledger_service import HashLedger
from care_agent.services.record_store import HttpRecordStore, SimulatedRecordStore, load_chart
from care_agent.services.vitals_service import SimulatedVitalsSource

__all__ = [
    "HashLedger",
    "HttpRecordStore",
    "SimulatedRecordStore",
    "SimulatedVitalsSource",
    "load_chart",
]

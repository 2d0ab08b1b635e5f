"""
Interaction engine.

An Agent is an immutable configuration (mode, preferences, chart, tasks,
tools, message bus and external collaborators) with two entry points:

  interact(query)     speech decode -> mode pipeline -> speech encode -> ledger
  monitor(patient_id) vitals fetch -> report -> ledger + record store

The mode is fixed for the agent's lifetime. `with_mode()` returns a new agent
value with its own copy of the task queue; the message bus stays shared.

Collaborator failures never abort an interaction: they are logged and the
response gets a short degraded note appended.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Callable, List, Tuple

from care_agent.agents import PIPELINES, TurnContext
from care_agent.errors import CollaboratorError
from care_agent.messaging import MessageBus
from care_agent.models import AgentMode, PatientRecord, UserPreferences, format_vitals, utc_now
from care_agent.services.ledger_service import is_error_receipt
from care_agent.task_queue import TaskQueue
from care_agent.tools.base import ToolRegistry

logger = logging.getLogger(__name__)

MONITOR_ACTION = "monitor_vitals"


def _with_notes(response: str, notes: List[str]) -> str:
    return response + "".join(f" (Note: {n} unavailable.)" for n in notes)


@dataclass(frozen=True)
class Agent:
    mode: AgentMode
    preferences: UserPreferences
    chart: PatientRecord
    tasks: TaskQueue
    tools: ToolRegistry
    bus: MessageBus
    ledger: Any
    record_store: Any
    vitals_source: Any
    transcoder: Any
    context: Tuple[str, ...] = ()
    clock: Callable[[], datetime] = field(default=utc_now, compare=False)

    @property
    def credential(self) -> str:
        return self.preferences.role.value

    def with_mode(self, mode: AgentMode) -> "Agent":
        return replace(self, mode=mode, tasks=TaskQueue(self.tasks.snapshot()))

    def prioritize(self) -> str:
        return self.tasks.prioritize()

    def _turn(self, query: str) -> TurnContext:
        return TurnContext(
            query=query,
            now=self.clock(),
            chart=self.chart,
            tasks=self.tasks.snapshot(),
            tools=self.tools,
            bus=self.bus,
        )

    async def _log_ledger(self, action: str, subject_id: str, payload: str, notes: List[str]) -> None:
        try:
            receipt = await self.ledger.log(action, subject_id, payload)
        except CollaboratorError as e:
            logger.warning(f"[Engine] Ledger write failed: {e}")
            notes.append("audit ledger")
            return
        if is_error_receipt(receipt):
            logger.warning(f"[Engine] Ledger returned an error receipt: {receipt}")
        else:
            logger.debug(f"[Engine] Ledger receipt: {receipt}")

    async def interact(self, query: str) -> str:
        notes: List[str] = []
        voice = self.preferences.voice_enabled

        text = query
        if voice:
            try:
                text = await self.transcoder.decode(query)
            except CollaboratorError as e:
                logger.warning(f"[Engine] Speech decode failed, using raw query: {e}")
                notes.append("voice transcription")

        logger.info(f"[Engine] {self.mode.value} interaction for {self.chart.patient_id}")
        response = await PIPELINES[self.mode](self._turn(text))

        if voice:
            try:
                response = await self.transcoder.encode(response, self.preferences.language)
            except CollaboratorError as e:
                logger.warning(f"[Engine] Speech encode failed, returning text: {e}")
                notes.append("voice output")

        await self._log_ledger(f"{self.mode.value}_interaction", self.chart.patient_id, response, notes)
        return _with_notes(response, notes)

    async def monitor(self, patient_id: str) -> str:
        try:
            vitals = await self.vitals_source.stream(patient_id)
        except CollaboratorError as e:
            logger.warning(f"[Engine] Vitals fetch failed for {patient_id}: {e}")
            return f"Vitals for {patient_id} are unavailable right now."

        report = f"Vitals for {patient_id}: {format_vitals(vitals) or 'no readings'}"
        notes: List[str] = []
        await self._log_ledger(MONITOR_ACTION, patient_id, report, notes)

        try:
            ack = await self.record_store.log_action(patient_id, MONITOR_ACTION, self.credential)
            logger.info(f"[Engine] Record store ack: {ack}")
        except CollaboratorError as e:
            logger.warning(f"[Engine] Record store update failed: {e}")
            notes.append("chart update")

        return _with_notes(report, notes)

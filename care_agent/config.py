"""
Agent configuration builder.

Every setter returns a new builder, so a half-configured agent is never
observable. build() is the only step that can fail: it initializes each
tool's backing resource (and the speech transcoder when voice is on) and
raises ConfigurationError if any of them cannot load.

    agent = (
        AgentBuilder()
        .with_preferences(UserPreferences(role=AgentMode.NURSE))
        .with_chart(chart)
        .with_tasks(tasks)
        .with_tool(VitalsTool(vitals_source))
        .build()
    )
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Tuple

from care_agent.engine import Agent
from care_agent.errors import ConfigurationError
from care_agent.messaging import MessageBus
from care_agent.models import AgentMode, PatientRecord, PatientTask, UserPreferences, utc_now
from care_agent.services.ledger_service import HashLedger
from care_agent.services.record_store import HttpRecordStore, SimulatedRecordStore
from care_agent.services.vitals_service import SimulatedVitalsSource
from care_agent.settings import Settings
from care_agent.task_queue import TaskQueue
from care_agent.tools.base import CapabilityTool, ToolRegistry
from care_agent.tools.labs_tool import LabsTool
from care_agent.tools.sentiment_tool import SentimentTool
from care_agent.tools.speech_tools import GeminiTranscoder, SimulatedTranscoder
from care_agent.tools.vitals_tool import VitalsTool

logger = logging.getLogger(__name__)

UNASSIGNED = "unassigned"


@dataclass(frozen=True)
class AgentBuilder:
    preferences: UserPreferences = field(default_factory=UserPreferences)
    mode: Optional[AgentMode] = None
    chart: Optional[PatientRecord] = None
    bus: Optional[MessageBus] = None
    tasks: Tuple[PatientTask, ...] = ()
    tools: Tuple[CapabilityTool, ...] = ()
    context: Tuple[str, ...] = ()
    ledger: Any = None
    record_store: Any = None
    vitals_source: Any = None
    transcoder: Any = None
    clock: Callable[[], datetime] = utc_now

    def with_preferences(self, preferences: UserPreferences) -> "AgentBuilder":
        return replace(self, preferences=preferences)

    def with_mode(self, mode: AgentMode) -> "AgentBuilder":
        return replace(self, mode=mode)

    def with_chart(self, chart: PatientRecord) -> "AgentBuilder":
        return replace(self, chart=chart)

    def with_bus(self, bus: MessageBus) -> "AgentBuilder":
        return replace(self, bus=bus)

    def with_tasks(self, tasks: Iterable[PatientTask]) -> "AgentBuilder":
        return replace(self, tasks=tuple(tasks))

    def with_tool(self, tool: CapabilityTool) -> "AgentBuilder":
        return replace(self, tools=self.tools + (tool,))

    def with_tools(self, tools: Iterable[CapabilityTool]) -> "AgentBuilder":
        return replace(self, tools=self.tools + tuple(tools))

    def with_context(self, note: str) -> "AgentBuilder":
        return replace(self, context=self.context + (note,))

    def with_ledger(self, ledger) -> "AgentBuilder":
        return replace(self, ledger=ledger)

    def with_record_store(self, record_store) -> "AgentBuilder":
        return replace(self, record_store=record_store)

    def with_vitals_source(self, vitals_source) -> "AgentBuilder":
        return replace(self, vitals_source=vitals_source)

    def with_transcoder(self, transcoder) -> "AgentBuilder":
        return replace(self, transcoder=transcoder)

    def with_clock(self, clock: Callable[[], datetime]) -> "AgentBuilder":
        return replace(self, clock=clock)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AgentBuilder":
        """Default stack: simulated collaborators unless the environment points at real ones."""
        vitals_source = SimulatedVitalsSource()
        if settings.backend_url:
            record_store = HttpRecordStore(settings.backend_url)
        else:
            record_store = SimulatedRecordStore()

        builder = (
            cls()
            .with_vitals_source(vitals_source)
            .with_record_store(record_store)
            .with_tool(VitalsTool(vitals_source))
            .with_tool(LabsTool(record_store))
        )
        if settings.project_id:
            builder = builder.with_tool(
                SentimentTool(settings.project_id, settings.location, settings.model)
            )
        return builder

    def build(self) -> Agent:
        for tool in self.tools:
            try:
                tool.setup()
            except Exception as e:
                logger.error(f"[Config] Tool '{tool.name}' failed to initialize: {e}")
                raise ConfigurationError(f"Tool '{tool.name}' failed to initialize: {e}") from e

        transcoder = self.transcoder
        if transcoder is None:
            transcoder = SimulatedTranscoder()
        if self.preferences.voice_enabled:
            try:
                transcoder.setup()
            except Exception as e:
                logger.error(f"[Config] Speech transcoder failed to initialize: {e}")
                raise ConfigurationError(f"Speech transcoder failed to initialize: {e}") from e

        mode = self.mode or self.preferences.role
        chart = self.chart or PatientRecord(patient_id=UNASSIGNED)
        vitals_source = self.vitals_source or SimulatedVitalsSource()

        agent = Agent(
            mode=mode,
            preferences=self.preferences,
            chart=chart,
            tasks=TaskQueue(self.tasks),
            tools=ToolRegistry(self.tools),
            bus=self.bus if self.bus is not None else MessageBus(),
            ledger=self.ledger or HashLedger(),
            record_store=self.record_store or SimulatedRecordStore(),
            vitals_source=vitals_source,
            transcoder=transcoder,
            context=self.context,
            clock=self.clock,
        )
        logger.info(
            f"[Config] Built {mode.value} agent for {chart.patient_id} "
            f"({len(self.tasks)} tasks, {len(self.tools)} tools, voice={self.preferences.voice_enabled})"
        )
        return agent


def gemini_transcoder(settings: Settings) -> GeminiTranscoder:
    return GeminiTranscoder(settings.project_id, settings.location, settings.model)

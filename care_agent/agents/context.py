"""Per-turn view handed to a mode pipeline."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from care_agent.messaging import MessageBus
from care_agent.models import PatientRecord, PatientTask
from care_agent.tools.base import ToolRegistry


@dataclass(frozen=True)
class TurnContext:
    """
    Snapshot taken once at the start of an interaction. Pipelines read tasks
    and chart from here, so a concurrent re-enqueue never shows up mid-run.
    """

    query: str
    now: datetime
    chart: PatientRecord
    tasks: Tuple[PatientTask, ...] = ()
    tools: ToolRegistry = field(default_factory=ToolRegistry)
    bus: MessageBus = field(default_factory=MessageBus)

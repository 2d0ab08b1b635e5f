"""
Care Agent - role-aware ward assistant

One configured Agent per role (nurse, patient, technician, pharmacist,
physician, chatbot). The mode picks the response pipeline; tasks, chart,
capability tools and the shared message bus feed it.

Key pieces:
1. AgentBuilder: fluent, immutable configuration; build() is the only fallible step
2. Agent.interact / Agent.monitor: the interaction engine
3. TaskQueue: severity ranking with stable ties
4. ToolRegistry: capability-tagged tool lookup
"""

from care_agent.config import AgentBuilder
from care_agent.engine import Agent
from care_agent.errors import (
    CareAgentError,
    CollaboratorError,
    ConfigurationError,
    ParseError,
    ToolNotFoundError,
)
from care_agent.messaging import MessageBus
from care_agent.models import AgentMode, Medication, Message, PatientRecord, PatientTask, UserPreferences
from care_agent.task_queue import TaskQueue

__all__ = [
    "Agent",
    "AgentBuilder",
    "AgentMode",
    "CareAgentError",
    "CollaboratorError",
    "ConfigurationError",
    "Medication",
    "Message",
    "MessageBus",
    "ParseError",
    "PatientRecord",
    "PatientTask",
    "TaskQueue",
    "ToolNotFoundError",
    "UserPreferences",
]

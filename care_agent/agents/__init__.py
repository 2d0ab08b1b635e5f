"""
Mode pipelines, one module per role:
- patient:     bedside composition pipeline + phrase table
- nurse:       top-priority task + needs assessment
- technician:  first pending task as a request
- pharmacist:  IV compatibility command
- physician:   specialty insight command
- chatbot:     information desk phrases
"""

from care_agent.agents import chatbot, nurse, patient, pharmacist, physician, technician
from care_agent.agents.context import TurnContext
from care_agent.models import AgentMode

PIPELINES = {
    AgentMode.PATIENT: patient.respond,
    AgentMode.NURSE: nurse.respond,
    AgentMode.TECHNICIAN: technician.respond,
    AgentMode.PHARMACIST: pharmacist.respond,
    AgentMode.PHYSICIAN: physician.respond,
    AgentMode.CHATBOT: chatbot.respond,
}

__all__ = ["PIPELINES", "TurnContext"]

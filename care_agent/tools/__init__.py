"""
Capability tools for the care agent.

This package contains:
- CapabilityTool base class, Capability tags and the ToolRegistry
- VitalsTool (vitals source), LabsTool (record store), SentimentTool (Gemini)
- Speech transcoders (simulated identity, Gemini native audio)
"""

from care_agent.tools.base import Capability, CapabilityTool, ToolRegistry
from care_agent.tools.labs_tool import LabsTool
from care_agent.tools.sentiment_tool import SentimentTool
from care_agent.tools.speech_tools import GeminiTranscoder, SimulatedTranscoder
from care_agent.tools.vitals_tool import VitalsTool

__all__ = [
    "Capability",
    "CapabilityTool",
    "GeminiTranscoder",
    "LabsTool",
    "SentimentTool",
    "SimulatedTranscoder",
    "ToolRegistry",
    "VitalsTool",
]

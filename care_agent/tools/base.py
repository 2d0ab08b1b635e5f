"""
Capability tools.

Every tool exposes a single async `execute(input) -> str` and carries an
explicit capability tag. The engine looks tools up by tag, never by name and
never by calling them speculatively.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Tuple

from care_agent.errors import ToolNotFoundError

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    VITALS = "vitals"
    LABS = "labs"
    SENTIMENT = "sentiment"


class CapabilityTool(ABC):
    capability: Capability
    name: str = "tool"
    description: str = ""

    def setup(self) -> None:
        """Load any backing resource. Called once by AgentBuilder.build()."""

    @abstractmethod
    async def execute(self, input: str) -> str:
        ...

    def as_function_tool(self):
        """Wrap this tool for a google-adk agent."""
        from google.adk.tools import FunctionTool

        tool = self

        async def run(input: str) -> str:
            return await tool.execute(input)

        run.__name__ = self.name
        run.__doc__ = (
            f"{self.description}\n\n"
            "Args:\n"
            "    input: patient identifier or free text for the check\n\n"
            "Returns:\n"
            "    Plain-text summary."
        )
        return FunctionTool(run)


class ToolRegistry:
    def __init__(self, tools: Iterable[CapabilityTool] = ()):
        self._tools: Tuple[CapabilityTool, ...] = tuple(tools)

    def __iter__(self):
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def find(self, capability: Capability) -> CapabilityTool:
        for tool in self._tools:
            if tool.capability == capability:
                return tool
        logger.warning(f"[Tools] No tool registered for '{capability.value}'")
        raise ToolNotFoundError(capability)

    def has(self, capability: Capability) -> bool:
        return any(t.capability == capability for t in self._tools)

"""
Error taxonomy for the care agent.

Only ConfigurationError is fatal. Everything raised on the interaction path
is caught by the engine and turned into a degraded or hint response.
"""


class CareAgentError(Exception):
    """Base class for all care agent errors."""


class ConfigurationError(CareAgentError):
    """A resource backing a tool or collaborator could not be initialized."""


class ToolNotFoundError(CareAgentError):
    def __init__(self, capability):
        self.capability = capability
        super().__init__(f"No tool registered for capability '{capability.value}'")


class CollaboratorError(CareAgentError):
    def __init__(self, collaborator: str, message: str):
        self.collaborator = collaborator
        super().__init__(f"{collaborator}: {message}")


class ParseError(CareAgentError):
    """A structured command was malformed. `usage` is shown to the user."""

    def __init__(self, message: str, usage: str):
        self.usage = usage
        super().__init__(message)

"""Agent-facing navigation interface."""

from .interface import TOOL_NAMES, AgentNavigator

__all__ = [
    'AgentNavigator',
    'TOOL_NAMES',
]

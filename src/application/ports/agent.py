"""
Port: Agent Interface
Contract the envelope adapter uses to talk to a conversational agent
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class AgentMessage:
    """Flattened chat message handed to an agent"""

    role: str
    content: str


@dataclass
class AgentResponse:
    """Agent reply plus the raw results of any tools it ran"""

    text: str = ""
    tool_results: list[Any] = field(default_factory=list)


class IAgent(ABC):
    """Interface for agents reachable through the envelope route"""

    name: str = ""

    @abstractmethod
    def generate(self, messages: list[AgentMessage]) -> AgentResponse:
        """
        Produce a reply to a conversation

        Args:
            messages: Conversation so far, oldest first

        Returns:
            AgentResponse with reply text and tool results
        """
        pass

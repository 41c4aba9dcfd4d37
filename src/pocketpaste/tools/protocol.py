# Tool protocol — string-in, string-out tools for LLM function calling.
# Created: 2026-10-12

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

NO_PARAMETERS: dict[str, Any] = {"type": "object", "properties": {}, "required": []}


@dataclass(frozen=True)
class ToolDefinition:
    """What an LLM needs to know to call a tool."""

    name: str
    description: str
    parameters: dict[str, Any]  # JSON Schema
    trust_level: str = "standard"

    def schema(self, format: str = "openai") -> dict[str, Any]:
        """Function-calling schema in "openai" or "anthropic" shape."""
        if format == "anthropic":
            return {
                "name": self.name,
                "description": self.description,
                "input_schema": self.parameters,
            }
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


class BaseTool(ABC):
    """A tool is described by class attributes and run via ``execute``.

    ``execute`` returns text in every case; failures are reported with
    ``_error()`` rather than raised.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    trust_level: ClassVar[str] = "standard"
    parameters: ClassVar[dict[str, Any]] = NO_PARAMETERS

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
            trust_level=self.trust_level,
        )

    @abstractmethod
    async def execute(self, **params: Any) -> str: ...

    def _error(self, message: str) -> str:
        return f"Error: {message}"

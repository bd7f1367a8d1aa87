"""
Base Agent Class

All agents inherit from this base class.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar
import logging

from ..config import StudioConfig
from ..generation import ResilientGenerator
from ..models import (
    AgentPersona,
    AgentRole,
    Blueprint,
    GenerateOptions,
    GenerationResult,
    Prompt,
    TaskCategory,
    Vendor,
)
from ..progress import AgentLogger
from ..utils import count_words, parse_json_object


T = TypeVar('T')  # Input type
R = TypeVar('R')  # Result type


@dataclass
class AgentContext:
    """Context passed to agents during one workflow run"""
    project_id: str
    config: StudioConfig
    logger: Optional[AgentLogger] = None
    blueprint: Optional[Blueprint] = None
    style_context: str = ""
    persona: Optional[AgentPersona] = None

    def report(self, *args, **kwargs) -> None:
        """Emit an AgentLogEntry if a logger is attached"""
        if self.logger:
            self.logger.log(*args, **kwargs)


class BaseAgent(ABC, Generic[T, R]):
    """
    Base class for all Creation Studio agents.

    Each agent:
    1. Has a specific role in the workflow
    2. Routes its model calls through one task category
    3. Takes typed input and produces typed output
    4. Recovers locally from malformed model output
    """

    role: AgentRole = AgentRole.PROJECT_MANAGER
    stage: str = ""

    def __init__(self, config: StudioConfig, generator: ResilientGenerator):
        self.config = config
        self.generator = generator
        self.logger = logging.getLogger(f"CreationStudio.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Agent name for logging"""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description of agent's role"""
        pass

    @abstractmethod
    async def execute(self, input_data: T, context: AgentContext) -> R:
        """Execute the agent's main task."""
        pass

    @property
    def task(self) -> TaskCategory:
        return self.config.task_for(self.stage)

    async def call_ai(
        self,
        prompt: Prompt,
        system_prompt: Optional[str] = None,
        response_format: str = "text",
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        preferred_vendor: Optional[Vendor] = None,
    ) -> GenerationResult:
        """
        Call the resilient generator for this agent's task category.

        Raises:
            NoProvidersConfiguredError: no vendor configured
            AllProvidersFailedError: every vendor failed
        """
        options = GenerateOptions(
            system_prompt=system_prompt,
            temperature=temperature if temperature is not None else self.config.temperature,
            max_tokens=max_tokens,
            response_format=response_format,
        )
        result = await self.generator.generate(
            prompt,
            self.task,
            options=options,
            preferred_vendor=preferred_vendor,
        )
        self.logger.debug(f"{self.name} answered by {result.vendor_used.value}")
        return result

    async def call_ai_json(
        self,
        prompt: Prompt,
        fallback: Dict[str, Any],
        system_prompt: Optional[str] = None,
        **kwargs,
    ) -> Tuple[Dict[str, Any], GenerationResult]:
        """Call the model in JSON mode; malformed output becomes ``fallback``."""
        result = await self.call_ai(
            prompt,
            system_prompt=system_prompt,
            response_format="json",
            **kwargs,
        )
        return parse_json_object(result.text, fallback), result

    def count_words(self, text: str) -> int:
        """Count words in text"""
        return count_words(text)

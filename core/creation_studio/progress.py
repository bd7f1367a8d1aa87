"""
Workflow progress reporting

The workflow surfaces progress only through one injected callback that
receives AgentLogEntry values. There is no subscriber list.
"""

import logging
from typing import Callable, Optional

from .models import AgentLogEntry, AgentRole, LogStatus

logger = logging.getLogger(__name__)

# Type alias for the host's log sink
LogCallback = Callable[[AgentLogEntry], None]


class AgentLogger:
    """
    Builds AgentLogEntry values and hands them to the callback.

    A failing callback is logged and otherwise ignored so the run
    continues.
    """

    def __init__(self, on_log: Optional[LogCallback] = None):
        self.on_log = on_log

    def log(
        self,
        agent: AgentRole,
        message: str,
        metadata: Optional[str] = None,
        status: LogStatus = LogStatus.WORKING,
        vendor_used: Optional[str] = None,
    ) -> AgentLogEntry:
        entry = AgentLogEntry(
            agent=agent,
            message=message,
            status=status,
            metadata=metadata,
            vendor_used=vendor_used,
        )

        level = logging.WARNING if status in (LogStatus.FAILED, LogStatus.WARNING) else logging.DEBUG
        logger.log(level, f"[{agent.value}] {message} ({status.value})")

        if self.on_log is not None:
            try:
                self.on_log(entry)
            except Exception as e:
                logger.error(f"on_log callback raised {type(e).__name__}: {e}")
        return entry

    # Shorthands

    def thinking(self, agent: AgentRole, message: str, metadata: Optional[str] = None) -> AgentLogEntry:
        return self.log(agent, message, metadata, LogStatus.THINKING)

    def success(
        self,
        agent: AgentRole,
        message: str,
        metadata: Optional[str] = None,
        vendor_used: Optional[str] = None,
    ) -> AgentLogEntry:
        return self.log(agent, message, metadata, LogStatus.SUCCESS, vendor_used)

    def failed(self, agent: AgentRole, message: str, metadata: Optional[str] = None) -> AgentLogEntry:
        return self.log(agent, message, metadata, LogStatus.FAILED)

    def warning(
        self,
        agent: AgentRole,
        message: str,
        metadata: Optional[str] = None,
        vendor_used: Optional[str] = None,
    ) -> AgentLogEntry:
        return self.log(agent, message, metadata, LogStatus.WARNING, vendor_used)

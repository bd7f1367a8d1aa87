"""
Creation Studio Custom Exceptions
"""

from typing import Dict, List, Optional


class StudioError(Exception):
    """Base exception for Creation Studio"""
    pass


class ProviderError(StudioError):
    """A vendor call failed (non-2xx status or transport error)"""
    def __init__(
        self,
        vendor: str,
        message: str,
        status_code: Optional[int] = None,
        body: str = "",
    ):
        self.vendor = vendor
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ProviderNotConfiguredError(ProviderError):
    """Vendor has no usable credential"""
    def __init__(self, vendor: str, env_var: str):
        super().__init__(
            vendor,
            f"{vendor} API key not configured. Add {env_var} to .env",
        )


class NoProvidersConfiguredError(StudioError):
    """No vendor is usable at all - fatal, never retried"""
    def __init__(self):
        super().__init__("No AI providers configured. Please add API keys to .env")


class AllProvidersFailedError(StudioError):
    """Every vendor in the try-order failed"""
    def __init__(self, failures: Dict[str, List[str]]):
        self.failures = failures
        lines = [
            f"{vendor}: {reason}"
            for vendor, reasons in failures.items()
            for reason in reasons
        ]
        super().__init__("All providers failed:\n" + "\n".join(lines))


class AgentError(StudioError):
    """Error in agent execution"""
    def __init__(self, agent_name: str, message: str, recoverable: bool = True):
        self.agent_name = agent_name
        self.recoverable = recoverable
        super().__init__(f"[{agent_name}] {message}")


class WorkflowError(StudioError):
    """Workflow could not produce a plan"""
    pass

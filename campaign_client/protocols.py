"""
Campaign Client Protocols (Interfaces)

These interfaces define contracts for the collaborators the request builders
consume. NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Optional, Protocol, Sequence, runtime_checkable


# ============================================================================
# Custom Exceptions - raised inside the builders, never past them
# ============================================================================

class CampaignRequestError(Exception):
    """Base exception for request construction errors"""
    pass


class MissingConfigurationError(CampaignRequestError):
    """A required value is absent or empty"""

    def __init__(self, fields: Sequence[str], context: str = "request"):
        self.fields = list(fields)
        self.context = context
        super().__init__(
            f"Missing required {context} values: {', '.join(self.fields)}"
        )


class AssemblyFailureError(CampaignRequestError):
    """Inputs were valid but the URL or body could not be assembled"""
    pass


# ============================================================================
# Collaborator Protocols
# ============================================================================

@runtime_checkable
class CampaignStateProtocol(Protocol):
    """
    Read-only view of the campaign state.

    Each value is None when it was never configured.
    """

    @property
    def server(self) -> Optional[str]:
        ...

    @property
    def pkey(self) -> Optional[str]:
        ...

    @property
    def ecid(self) -> Optional[str]:
        ...


@runtime_checkable
class LogSinkProtocol(Protocol):
    """
    Diagnostic sink for the builders.

    Fire-and-forget: implementations must not block, and the builders ignore
    anything a sink raises.
    """

    def error(self, tag: str, message: str) -> None:
        """Record an error-level diagnostic"""
        ...

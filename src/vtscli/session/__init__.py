"""Per-invocation session orchestration."""

from .orchestrator import ClientFactory, SessionOrchestrator, SessionState

__all__ = ["ClientFactory", "SessionOrchestrator", "SessionState"]

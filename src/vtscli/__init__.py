"""vtscli public API surface.

Only the entry points needed to drive a session programmatically are
exported here; everything else should be considered internal.
"""

from .config.models import ConnectionConfig
from .session.orchestrator import SessionOrchestrator
from .version import __version__

__all__ = ["ConnectionConfig", "SessionOrchestrator", "__version__"]

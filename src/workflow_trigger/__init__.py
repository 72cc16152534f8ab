"""Workflow Trigger.

Fires a GitHub ``repository_dispatch`` event with:
- configuration loaded from flags, the environment, or `.env`
- a retrying transport with a constant delay
- typed errors carrying the platform's message
"""

__version__ = "0.1.0"

from workflow_trigger.client import WorkflowClient, configure
from workflow_trigger.config import TriggerConfig
from workflow_trigger.context import CancelToken
from workflow_trigger.errors import TriggerError

__all__ = [
    "__version__",
    "CancelToken",
    "TriggerConfig",
    "TriggerError",
    "WorkflowClient",
    "configure",
]

"""Pipeline module driving a whole conversion run."""

from .config import RunConfig, build_config
from .orchestrator import BatchOrchestrator, RunSummary

__all__ = ["BatchOrchestrator", "RunConfig", "RunSummary", "build_config"]

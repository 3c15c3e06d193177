"""Section registry and start-up orchestration."""

from .app import LOADED_EVENT, LoadedEvent, PortfolioApp, error_block
from .components import (
    ComponentDescriptor,
    ComponentSnapshot,
    ComponentState,
    Failed,
    Populated,
    SectionResult,
    Skipped,
)

__all__ = [
    "LOADED_EVENT",
    "ComponentDescriptor",
    "ComponentSnapshot",
    "ComponentState",
    "Failed",
    "LoadedEvent",
    "Populated",
    "PortfolioApp",
    "SectionResult",
    "Skipped",
    "error_block",
]

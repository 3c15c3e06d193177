"""Component descriptors and per-section results."""

from dataclasses import dataclass
from enum import StrEnum

from bs4 import Tag

from ..sections import Populate


class ComponentState(StrEnum):
    UNREGISTERED = "unregistered"
    REGISTERED = "registered"
    POPULATED = "populated"
    ERRORED = "errored"


@dataclass
class ComponentDescriptor:
    """The orchestrator's record for one section."""

    name: str
    element: Tag | None
    populate: Populate
    state: ComponentState = ComponentState.REGISTERED
    error: str | None = None

    @property
    def populated(self) -> bool:
        return self.state is ComponentState.POPULATED

    @property
    def renderable(self) -> bool:
        return self.element is not None


@dataclass(frozen=True)
class Populated:
    name: str


@dataclass(frozen=True)
class Failed:
    name: str
    error: str


@dataclass(frozen=True)
class Skipped:
    name: str
    reason: str


SectionResult = Populated | Failed | Skipped


@dataclass(frozen=True)
class ComponentSnapshot:
    """Point-in-time view returned by ``get_all_components``."""

    name: str
    element: Tag | None
    populated: bool
    is_visible: bool

"""Headless browser runtime the site is rendered against."""

from .document import (
    Document,
    add_class,
    get_style,
    has_class,
    is_displayed,
    load_shell,
    remove_class,
    set_style,
)
from .events import Event, EventRegistry
from .layout import Box, FlowLayout, Viewport
from .observers import IntersectionRegistry, is_attached
from .page import Page
from .resources import ResourceLoader
from .storage import LocalStorage
from .timers import Debouncer, Scheduler, TimerHandle

__all__ = [
    "Box",
    "Debouncer",
    "Document",
    "Event",
    "EventRegistry",
    "FlowLayout",
    "IntersectionRegistry",
    "LocalStorage",
    "Page",
    "ResourceLoader",
    "Scheduler",
    "TimerHandle",
    "Viewport",
    "add_class",
    "get_style",
    "has_class",
    "is_attached",
    "is_displayed",
    "load_shell",
    "remove_class",
    "set_style",
]

"""Cross-cutting page helpers: theme, navigation, announcements, images, animation, SEO."""

from .animations import ScrollAnimator
from .announcer import Announcer
from .images import LazyImageLoader, placeholder_image
from .navigation import SmoothScroller
from .seo import SEOManager, check_heading_hierarchy
from .theme import ThemeManager

__all__ = [
    "Announcer",
    "LazyImageLoader",
    "SEOManager",
    "ScrollAnimator",
    "SmoothScroller",
    "ThemeManager",
    "check_heading_hierarchy",
    "placeholder_image",
]

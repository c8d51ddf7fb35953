"""List screens: the shared pipeline, navigation and notifications."""

from .navigation import NavigationState, Navigator
from .notifications import Notification, NotificationKind, Notifier
from .pipeline import ALL, FilterSpec, ListQuery, ListViewPipeline, ScreenConfig, page_window
from .screen import ListScreen

__all__ = [
    "ALL",
    "FilterSpec",
    "ListQuery",
    "ListScreen",
    "ListViewPipeline",
    "NavigationState",
    "Navigator",
    "Notification",
    "NotificationKind",
    "Notifier",
    "ScreenConfig",
    "page_window",
]

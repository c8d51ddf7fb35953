"""Cross-screen navigation state."""

import logging
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class NavigationState(BaseModel):
    """Inbound request to show and highlight one row on a screen."""

    model_config = ConfigDict(frozen=True)

    screen: str = Field(..., description="Target screen name")
    highlight: str = Field(..., description="Key of the row to highlight")
    message: Optional[str] = Field(None, description="Notification to show on arrival")


class Navigator:
    """
    Carries navigation state from one screen to another.

    A state is delivered once: `take` removes it, so revisiting a screen
    never replays an old highlight.
    """

    def __init__(self):
        self._pending: Dict[str, NavigationState] = {}

    def navigate(self, screen: str, highlight: str, message: Optional[str] = None) -> NavigationState:
        state = NavigationState(screen=screen, highlight=highlight, message=message)
        self._pending[screen] = state
        logger.info("Navigation requested", extra={"screen": screen, "highlight": highlight})
        return state

    def pending(self, screen: str) -> Optional[NavigationState]:
        return self._pending.get(screen)

    def take(self, screen: str) -> Optional[NavigationState]:
        return self._pending.pop(screen, None)

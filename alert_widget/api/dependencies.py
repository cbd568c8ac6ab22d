"""
Shared widget instance for API routers
"""
from typing import Optional
import logging

from fastapi import HTTPException

from alert_widget.tabs import TabsState

logger = logging.getLogger(__name__)

# Global widget instance (one per process)
widget: Optional[TabsState] = None


def get_widget() -> TabsState:
    """Get the global widget instance"""
    if widget is None:
        raise HTTPException(status_code=503, detail="Widget not initialized")
    return widget


def set_widget(new_widget: Optional[TabsState]):
    """Set the global widget instance"""
    global widget
    widget = new_widget

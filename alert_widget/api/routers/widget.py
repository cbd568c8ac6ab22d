"""
Widget endpoints: the user-input surface of the alert widget
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from alert_widget.api.dependencies import get_widget
from alert_widget.api.models import SearchRequest, ShowFavoritesRequest
from alert_widget.exceptions import UnknownCategoryError, WidgetStateError
from alert_widget.models import WidgetSnapshot
from alert_widget.tabs import TabsState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/widget", tags=["Widget"])


def _state_conflict(e: WidgetStateError) -> HTTPException:
    logger.warning(f"Rejected widget operation: {e}")
    return HTTPException(status_code=409, detail=str(e))


@router.get("", response_model=WidgetSnapshot)
async def get_snapshot(widget: TabsState = Depends(get_widget)):
    """Current widget state"""
    return widget.snapshot()


@router.post("/tabs/{index}", response_model=WidgetSnapshot)
async def select_tab(index: int, widget: TabsState = Depends(get_widget)):
    """Select a tab (the first category is always shown)"""
    try:
        widget.select_tab(index)
    except WidgetStateError as e:
        raise _state_conflict(e)
    return widget.snapshot()


@router.post("/categories/{category}/toggle", response_model=WidgetSnapshot)
async def toggle_category(category: str, widget: TabsState = Depends(get_widget)):
    """Select or deselect a category"""
    try:
        widget.toggle_category(category)
    except UnknownCategoryError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WidgetStateError as e:
        raise _state_conflict(e)
    return widget.snapshot()


@router.post("/search", response_model=WidgetSnapshot)
async def search(request: SearchRequest, widget: TabsState = Depends(get_widget)):
    """Update the search text and re-filter"""
    try:
        widget.on_input_change(request.query)
    except WidgetStateError as e:
        raise _state_conflict(e)
    return widget.snapshot()


@router.post("/items/{index}/favorite", response_model=WidgetSnapshot)
async def toggle_favorite(index: int, widget: TabsState = Depends(get_widget)):
    """Toggle the favorite status of a displayed row"""
    if index < 0 or index >= len(widget.selected_content):
        raise HTTPException(status_code=404, detail=f"No displayed row at index {index}")
    try:
        widget.toggle_favorite(widget.selected_content[index])
    except WidgetStateError as e:
        raise _state_conflict(e)
    return widget.snapshot()


@router.post("/show-favorites", response_model=WidgetSnapshot)
async def toggle_show_favorites(request: ShowFavoritesRequest, widget: TabsState = Depends(get_widget)):
    """Switch favorites-only mode"""
    try:
        widget.toggle_show_favorites(request.checked)
    except WidgetStateError as e:
        raise _state_conflict(e)
    return widget.snapshot()

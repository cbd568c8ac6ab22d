"""
Pydantic models for API requests
"""
from pydantic import BaseModel, Field
from typing import Optional


class SearchRequest(BaseModel):
    """Search box contents"""
    query: str = Field(default="", description="Search text, interpreted as a case-insensitive regular expression")


class ShowFavoritesRequest(BaseModel):
    """Favorites-only checkbox"""
    checked: Optional[bool] = Field(default=None, description="Checkbox state; omit to flip the current mode")

#!/usr/bin/env python3
"""
FastAPI service for the Alert Widget

Serves the widget state as JSON and accepts the user's tab, category,
search and favorite actions. The data document is loaded once, in the
background, when the service starts.
"""
from fastapi import FastAPI
from contextlib import asynccontextmanager
import asyncio
import logging
import os

from alert_widget.config import LOG_LEVEL, WIDGET_TITLE
from alert_widget.data_loader import create_loader
from alert_widget.tabs import TabsState
from alert_widget.api.dependencies import set_widget
from alert_widget.api.routers import widget as widget_router

# Configure logging first (before any logger usage)
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the widget and start its one-time data load."""
    widget = TabsState()
    set_widget(widget)

    loader = create_loader()
    load_task = asyncio.create_task(widget.load(loader))
    logger.info(f"✓ Widget '{WIDGET_TITLE}' created, data load started")

    yield  # Server runs here

    if not load_task.done():
        load_task.cancel()
    set_widget(None)
    logger.info("Shutting down Alert Widget service...")


app = FastAPI(
    title="Alert Widget API",
    description="Categorized, searchable view of alert event fields with favorites",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(widget_router.router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "alert-widget"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("ALERT_WIDGET_HOST", "0.0.0.0"),
        port=int(os.getenv("ALERT_WIDGET_PORT", "8000"))
    )

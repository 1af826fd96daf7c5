"""FastAPI REST API for frame composition and pricing.

This module provides a REST API for laying out and pricing framing orders,
validating configurations, browsing the catalog and exporting previews.

Usage:
    uvicorn framing.web:app --reload
"""

from framing.web.app import app, create_app

__all__ = ["app", "create_app"]

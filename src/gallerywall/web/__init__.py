"""FastAPI REST API for gallery wall layout generation.

This module provides a REST API for generating layouts and validating
requests.

Usage:
    uvicorn gallerywall.web:app --reload
"""

from gallerywall.web.app import app, create_app

__all__ = ["app", "create_app"]

"""
FastAPI birthday tracker package.

Exposes the FastAPI app instance and factory for convenience imports
(birthday_api.app, birthday_api.create_app).
"""

from .main import app, create_app  # noqa: F401

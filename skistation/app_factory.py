"""Entry point for the ski station FastAPI app (``uvicorn skistation.app_factory:app``)."""
from skistation.app import app, create_app

__all__ = ["app", "create_app"]

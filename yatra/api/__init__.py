"""HTTP API for the Yatra site."""
from .routes import router

__all__ = ["router"]

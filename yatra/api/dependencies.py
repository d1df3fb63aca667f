"""FastAPI dependencies for the API routes."""
from fastapi import Request

from ..services.storage import Storage


def get_storage(request: Request) -> Storage:
    """Get the store the application was created with (``app.state.storage``)."""
    return request.app.state.storage

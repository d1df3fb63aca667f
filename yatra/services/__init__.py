"""Services for the Yatra site."""
from .storage import Storage, MemStorage

__all__ = [
    "Storage",
    "MemStorage",
]

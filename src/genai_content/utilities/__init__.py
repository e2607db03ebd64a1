from .mime_type import get_mime_type

__all__ = ["get_mime_type"]

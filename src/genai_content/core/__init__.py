"""Core data models and parsing for conversational content."""

from .base import Modality, ContentRole, BasePart, TextPart, DataPart, Part
from .cache import Cache
from .content import Content
from .history import ChatHistory
from .parser import parse_content, parse_part

__all__ = [
    # Enums
    "Modality",
    "ContentRole",
    # Parts
    "BasePart",
    "TextPart",
    "DataPart",
    "Part",
    # Content
    "Content",
    "ChatHistory",
    # Parsing
    "Cache",
    "parse_content",
    "parse_part"
]

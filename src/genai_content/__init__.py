"""
The `genai_content` package models the request payload of a multi-turn conversational API.

It exposes:
- `Content`, `TextPart`, `DataPart`: the turn and part types, with their wire representation.
- `parse_content`, `parse_part`, `Cache`: parsing of decoded wire JSON, reusing repeated text parts.
- `ChatHistory`: an ordered list of turns owning one cache.
- `FormatError`: raised for values that match no known wire shape.
"""

from .core import (
    Modality,
    ContentRole,
    BasePart,
    TextPart,
    DataPart,
    Part,
    Cache,
    Content,
    ChatHistory,
    parse_content,
    parse_part
)
from .exceptions import FormatError

__all__ = [
    "Modality",
    "ContentRole",
    "BasePart",
    "TextPart",
    "DataPart",
    "Part",
    "Cache",
    "Content",
    "ChatHistory",
    "parse_content",
    "parse_part",
    "FormatError"
]
